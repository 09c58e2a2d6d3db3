"""
Filter Builder - Fluent Filter Declaration.

Collects a filter's configuration through chained calls and registers
it on save(). Nothing touches the registry before a terminal call.

Usage:
    registry.declare("price") \\
        .type("range") \\
        .label("Price (EUR)") \\
        .when_active(lambda query, value: query.where_between("price", *value)) \\
        .when_inactive(lambda query: query.where("archived", False)) \\
        .save()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Set

from crud_filters.domain.entities import ActiveLogic, FallbackLogic, FilterDescriptor

if TYPE_CHECKING:
    from crud_filters.registry.filter_registry import FilterRegistry


class FilterBuilder:
    """Filter declaration in progress, bound to a registry and a name."""

    def __init__(self, registry: FilterRegistry, name: str) -> None:
        self._registry = registry
        self._name = name
        self._options: Dict[str, Any] = {"name": name}
        self._values: Any = None
        self._active_logic: Optional[ActiveLogic] = None
        self._fallback_logic: Optional[FallbackLogic] = None
        # fields set through the builder; only these patch an existing filter
        self._touched: Set[str] = set()

    @property
    def name(self) -> str:
        return self._name

    # =========================================================================
    # Configuration
    # =========================================================================

    def option(self, key: str, value: Any) -> "FilterBuilder":
        """Set a single option."""
        self._options[key] = value
        self._touched.add("options")
        return self

    def options(self, **options: Any) -> "FilterBuilder":
        """Set several options at once."""
        for key, value in options.items():
            self.option(key, value)
        return self

    def type(self, filter_type: str) -> "FilterBuilder":
        return self.option("type", filter_type)

    def label(self, label: str) -> "FilterBuilder":
        return self.option("label", label)

    def placeholder(self, placeholder: str) -> "FilterBuilder":
        return self.option("placeholder", placeholder)

    def values(self, values: Any) -> "FilterBuilder":
        """Rendering payload: literal, LiteralValues, DeferredValues or a producer."""
        self._values = values
        self._touched.add("values")
        return self

    def when_active(self, logic: ActiveLogic) -> "FilterBuilder":
        """Query logic for when the filter is active: ``logic(query, value)``."""
        self._active_logic = logic
        self._touched.add("active_logic")
        return self

    def when_inactive(self, logic: FallbackLogic) -> "FilterBuilder":
        """Query logic for when the filter is not active: ``logic(query)``."""
        self._fallback_logic = logic
        self._touched.add("fallback_logic")
        return self

    logic = when_active
    fallback = when_inactive

    # =========================================================================
    # Terminal Operations
    # =========================================================================

    def save(self) -> FilterDescriptor:
        """
        Register the filter, or update it if the name is already taken.

        Updating merges the builder's options over the existing ones and
        overwrites only the other fields set on this builder.
        """
        existing = self._registry.get_filter(self._name)
        if existing is None:
            return self._registry.add(
                dict(self._options),
                self._values,
                self._active_logic,
                self._fallback_logic,
            )
        return self._registry.modify(self._name, self._patch(existing))

    def apply(self, request_input: Optional[Mapping[str, Any]] = None) -> FilterDescriptor:
        """Save, then apply the filter to the context's query."""
        descriptor = self.save()
        self._registry.apply(descriptor, request_input)
        return descriptor

    def remove(self) -> bool:
        """Remove the filter with this name from the registry."""
        return self._registry.remove(self._name)

    def before(self, target: str) -> "FilterBuilder":
        """Save, then place this filter directly before target."""
        self.save()
        self._registry.move_before(self._name, target)
        return self

    def after(self, target: str) -> "FilterBuilder":
        """Save, then place this filter directly after target."""
        self.save()
        self._registry.move_after(self._name, target)
        return self

    def make_first(self) -> "FilterBuilder":
        self.save()
        self._registry.make_first(self._name)
        return self

    def make_last(self) -> "FilterBuilder":
        self.save()
        self._registry.make_last(self._name)
        return self

    def _patch(self, existing: FilterDescriptor) -> Dict[str, Any]:
        patch: Dict[str, Any] = {}
        if "options" in self._touched:
            patch["options"] = {**existing.options, **self._options}
        if "values" in self._touched:
            patch["values"] = self._values
        if "active_logic" in self._touched:
            patch["active_logic"] = self._active_logic
        if "fallback_logic" in self._touched:
            patch["fallback_logic"] = self._fallback_logic
        return patch

    def __repr__(self) -> str:
        return f"FilterBuilder(name={self._name!r}, options={self._options!r})"
