"""
Configuration Loader - Filter Configuration from YAML.

A configuration file sits next to an optional ``profiles/`` directory:

    admin/
        filters.yaml
        profiles/
            strict.yaml

``load_config("admin/filters.yaml", profile="strict")`` overlays the
profile onto the base file before validation. Filter definitions are
validated as a whole, so a bad name or a duplicate fails at load time
instead of in the middle of a request.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from crud_filters.config.models import CrudFiltersConfig
from crud_filters.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROFILES_DIR = "profiles"


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
) -> CrudFiltersConfig:
    """
    Load and validate filter configuration.

    Args:
        config_path: Path to the YAML config file
        profile: Optional profile name, read from ``profiles/<name>.yaml``
            beside the config file

    Returns:
        Validated CrudFiltersConfig object

    Raises:
        FileNotFoundError: If the config file or the profile doesn't exist
        ConfigurationError: If a file does not hold a YAML mapping
        ValidationError: If the merged config is invalid
    """
    path = Path(config_path)
    data = _read_mapping(path)

    if profile:
        data = _deep_merge(data, _read_mapping(profile_path(path, profile)))

    config = CrudFiltersConfig.model_validate(data)
    logger.debug(
        f"Loaded config from {path} (profile={profile}, "
        f"{len(config.filters)} filter definitions)"
    )
    return config


def profile_path(config_path: Union[str, Path], profile: str) -> Path:
    """Location of a profile overlay for the given config file."""
    path = Path(config_path).parent / PROFILES_DIR / f"{profile}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {profile} (looked in {path.parent})")
    return path


def _read_mapping(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path} must contain a mapping, not {type(data).__name__}"
        )
    return data


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Nested mappings are merged; lists (such as ``filters``) are replaced."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
