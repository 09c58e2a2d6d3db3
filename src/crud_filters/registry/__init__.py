"""
Registry Module - Per-Request Filter Management.

This module provides the registry that owns the filters of one CRUD
configuration context, and the fluent builder returned by declare().

Components:
    - FilterRegistry: Registration, lookup, mutation and apply-time dispatch
    - FilterSet: Registry state stored in the operation settings
    - FilterBuilder: Fluent declaration entry point
"""

from crud_filters.registry.filter_builder import FilterBuilder
from crud_filters.registry.filter_registry import (
    DISABLED,
    FilterRegistry,
    FilterSet,
)

__all__ = [
    "DISABLED",
    "FilterBuilder",
    "FilterRegistry",
    "FilterSet",
]
