"""
Core Domain Entities.

This module defines the filter descriptor the registry stores, the
values variant used at registration time and the typed patch applied
by FilterRegistry.modify().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

# Callable signatures for the two apply-time branches
ActiveLogic = Callable[[Any, Any], Any]  # (query, current_value)
FallbackLogic = Callable[[Any], Any]  # (query)

DEFAULT_FILTER_TYPE = "simple"

_MISSING = object()


# =============================================================================
# Values Variant
# =============================================================================


@dataclass(frozen=True)
class LiteralValues(Generic[T]):
    """Rendering payload given as literal data."""

    payload: T


@dataclass(frozen=True)
class DeferredValues(Generic[T]):
    """Rendering payload computed by a zero-argument producer."""

    producer: Callable[[], T]


def resolve_values(values: Any) -> Any:
    """
    Resolve a values variant to its literal payload.

    Deferred producers (and bare callables) are invoked exactly once,
    synchronously. Anything else is returned unchanged.
    """
    if isinstance(values, LiteralValues):
        return values.payload
    if isinstance(values, DeferredValues):
        return values.producer()
    if callable(values):
        return values()
    return values


def is_empty_value(value: Any) -> bool:
    """Check whether a request value counts as 'not provided'."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def make_label(name: str) -> str:
    """Turn a filter name into a human label ('price_range' -> 'Price range')."""
    words = name.replace("-", " ").replace("_", " ").replace(".", " ").split()
    return " ".join(words).capitalize()


# =============================================================================
# Filter Descriptor
# =============================================================================


@dataclass
class FilterDescriptor:
    """A named filter: UI metadata plus query-modification logic."""

    name: str
    options: Dict[str, Any] = field(default_factory=dict)
    values: Any = None
    active_logic: Optional[ActiveLogic] = None
    fallback_logic: Optional[FallbackLogic] = None
    default_type: str = field(default=DEFAULT_FILTER_TYPE, repr=False, compare=False)

    FIELDS = ("name", "options", "values", "active_logic", "fallback_logic")
    DERIVED = ("type", "label")

    @property
    def type(self) -> str:
        """Filter type from options, falling back to the default type."""
        return self.options.get("type") or self.default_type

    @property
    def label(self) -> str:
        """Label from options, falling back to the humanized name."""
        return self.options.get("label") or make_label(self.name)

    def current_value(self, request_input: Optional[Mapping[str, Any]]) -> Any:
        """Value submitted for this filter, or None."""
        if not request_input:
            return None
        return request_input.get(self.name)

    def is_active(self, request_input: Optional[Mapping[str, Any]]) -> bool:
        """A filter is active when the input holds a non-empty value under its name."""
        if not request_input or self.name not in request_input:
            return False
        return not is_empty_value(request_input[self.name])

    def get_attribute(self, attribute: str, default: Any = None) -> Any:
        """
        Read an attribute by name for generic lookups.

        Descriptor fields and derived properties take precedence over
        option keys.
        """
        if attribute in self.FIELDS or attribute in self.DERIVED:
            return getattr(self, attribute)
        return self.options.get(attribute, default)

    def has_attribute_value(self, attribute: str, value: Any) -> bool:
        """Check whether an attribute is present and equal to value."""
        current = self.get_attribute(attribute, _MISSING)
        return current is not _MISSING and current == value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "type": self.type,
            "label": self.label,
            "options": dict(self.options),
            "values": self.values,
            "has_active_logic": self.active_logic is not None,
            "has_fallback_logic": self.fallback_logic is not None,
        }


# =============================================================================
# Typed Partial Update
# =============================================================================


class FilterPatch(BaseModel):
    """
    Field-level overwrite for an existing filter.

    Only fields explicitly set are applied. The name is immutable and
    therefore not a field here.
    """

    options: Dict[str, Any] = Field(default_factory=dict)
    values: Any = None
    active_logic: Optional[Callable[..., Any]] = None
    fallback_logic: Optional[Callable[..., Any]] = None

    model_config = {"extra": "forbid", "arbitrary_types_allowed": True}

    def apply_to(self, descriptor: FilterDescriptor) -> FilterDescriptor:
        """Overwrite the descriptor fields set on this patch."""
        for field_name in self.model_fields_set:
            value = getattr(self, field_name)
            if field_name == "values":
                value = resolve_values(value)
            elif field_name == "options":
                value = dict(value)
            setattr(descriptor, field_name, value)
        return descriptor
