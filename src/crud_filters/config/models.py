"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from crud_filters.domain.entities import DEFAULT_FILTER_TYPE

SUPPORTED_VERSIONS = ("1.0",)


class ObservabilityConfig(BaseModel):
    """Configuration for structured event logging."""

    enabled: bool = True
    use_json: bool = True
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class FilterDefinitionConfig(BaseModel):
    """
    A filter declared in configuration.

    ``name`` must be a string when given. Every other key except
    ``values`` becomes a filter option. Logic cannot be expressed in
    YAML, so configured filters rely on the default equality clause.
    """

    name: Optional[str] = None
    values: Any = None

    model_config = {"extra": "allow"}

    def to_options(self) -> Dict[str, Any]:
        """Options dict for FilterRegistry.add()."""
        options = dict(self.model_extra or {})
        if self.name is not None:
            options = {"name": self.name, **options}
        return options


class CrudFiltersConfig(BaseModel):
    """Root configuration object."""

    version: str = SUPPORTED_VERSIONS[-1]
    setting_key: str = Field(default="filters", min_length=1)
    default_type: str = Field(default=DEFAULT_FILTER_TYPE, min_length=1)
    apply_default_logic: bool = True
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    filters: List[FilterDefinitionConfig] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("version", mode="before")
    @classmethod
    def _check_version(cls, value: Any) -> str:
        # YAML reads an unquoted 1.0 as a float
        version = str(value)
        if version not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported config version {version!r} "
                f"(supported: {', '.join(SUPPORTED_VERSIONS)})"
            )
        return version

    @model_validator(mode="after")
    def _check_filter_names(self) -> "CrudFiltersConfig":
        seen = set()
        for definition in self.filters:
            if definition.name is None:
                continue
            if definition.name in seen:
                raise ValueError(f"Filter '{definition.name}' is declared twice")
            seen.add(definition.name)
        return self
