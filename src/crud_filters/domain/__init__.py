"""
Domain Layer - Filter Entities and Errors.

Components:
    - FilterDescriptor: A registered filter (metadata + logic)
    - LiteralValues / DeferredValues: Rendering payload variants
    - FilterPatch: Typed partial update for modify()
    - ConfigurationError / FilterNotFoundError: Fatal declaration errors
"""

from crud_filters.domain.entities import (
    DEFAULT_FILTER_TYPE,
    DeferredValues,
    FilterDescriptor,
    FilterPatch,
    LiteralValues,
    is_empty_value,
    make_label,
    resolve_values,
)
from crud_filters.domain.exceptions import (
    ConfigurationError,
    CrudFilterError,
    FilterNotFoundError,
)

__all__ = [
    "DEFAULT_FILTER_TYPE",
    "DeferredValues",
    "FilterDescriptor",
    "FilterPatch",
    "LiteralValues",
    "is_empty_value",
    "make_label",
    "resolve_values",
    "ConfigurationError",
    "CrudFilterError",
    "FilterNotFoundError",
]
