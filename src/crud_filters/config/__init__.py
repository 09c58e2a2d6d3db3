"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the filter registry:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - CrudFiltersConfig: Root configuration object
    - ObservabilityConfig: Structured event logging settings
    - FilterDefinitionConfig: Filters declared in YAML

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Profiles deep-merged over the base file
"""

from crud_filters.config.loader import load_config, profile_path
from crud_filters.config.models import (
    CrudFiltersConfig,
    FilterDefinitionConfig,
    ObservabilityConfig,
)

__all__ = [
    "profile_path",
    "load_config",
    "CrudFiltersConfig",
    "FilterDefinitionConfig",
    "ObservabilityConfig",
]
