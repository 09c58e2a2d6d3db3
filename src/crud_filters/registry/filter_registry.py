"""
Filter Registry - Named, Ordered Filters for One CRUD Request.

This module provides the registry that owns the filters of one CRUD
configuration context. The registry keeps no state of its own: the
ordered filter set lives in the context's operation settings under a
well-known key ("filters" by default) for the duration of the request.

Usage:
    context = CrudContext(query=query, request_input={"status": "paid"})
    registry = FilterRegistry(context)

    registry.add({"name": "status", "type": "dropdown"}, values={"paid": "Paid"})
    registry.declare("price").type("range").when_active(
        lambda query, value: query.where_between("price", *value)
    ).save()

    # Modify the query according to the request input
    registry.apply_all()

States:
    - Disabled (also: never initialized): no filters, lookups return nothing
    - Enabled: a live ordered list, possibly empty after clear()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from pydantic import ValidationError

from crud_filters.config.models import CrudFiltersConfig, FilterDefinitionConfig
from crud_filters.domain.entities import (
    ActiveLogic,
    FallbackLogic,
    FilterDescriptor,
    FilterPatch,
    LiteralValues,
    resolve_values,
)
from crud_filters.domain.exceptions import ConfigurationError, FilterNotFoundError
from crud_filters.interfaces.crud_context import CrudContextProtocol
from crud_filters.observability.observability_manager import ObservabilityManager
from crud_filters.registry.filter_builder import FilterBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSet:
    """Registry state as stored in the operation settings."""

    enabled: bool
    filters: Union[List[FilterDescriptor], tuple] = field(default_factory=list)

    def __post_init__(self) -> None:
        # An enabled set is appended to in place
        if self.enabled and not isinstance(self.filters, list):
            object.__setattr__(self, "filters", list(self.filters))

    @classmethod
    def empty(cls) -> "FilterSet":
        """An enabled set without filters."""
        return cls(enabled=True, filters=[])

    def __len__(self) -> int:
        return len(self.filters)


# Disabled marker: empty and immutable
DISABLED = FilterSet(enabled=False, filters=())


class FilterRegistry:
    """
    Registry for the filters of one CRUD configuration context.

    Supports:
        - Registration with name-uniqueness enforcement
        - Explicit enabled/disabled state, independent of size
        - Lookup, typed modification and removal by name
        - Apply-time dispatch between active and fallback logic
        - Fluent declaration via declare()
    """

    def __init__(
        self,
        context: CrudContextProtocol,
        config: Optional[CrudFiltersConfig] = None,
        observability: Optional[ObservabilityManager] = None,
    ) -> None:
        """
        Initialize registry over a context.

        Args:
            context: Per-request context holding operation settings,
                query builder and request input
            config: Registry configuration (defaults apply when omitted)
            observability: Optional structured event recorder
        """
        self._context = context
        self._config = config or CrudFiltersConfig()
        self._observability = observability

    @property
    def setting_key(self) -> str:
        """Operation setting key the filter set is stored under."""
        return self._config.setting_key

    @property
    def context(self) -> CrudContextProtocol:
        return self._context

    # =========================================================================
    # State
    # =========================================================================

    def _state(self) -> FilterSet:
        state = self._context.get_operation_setting(self.setting_key)
        if isinstance(state, FilterSet):
            return state
        return DISABLED

    def _store(self, state: FilterSet) -> None:
        self._context.set_operation_setting(self.setting_key, state)

    def is_enabled(self) -> bool:
        """True once enabled, even when currently empty."""
        return self._state().enabled

    def is_disabled(self) -> bool:
        """True when disabled or never initialized."""
        return not self.is_enabled()

    def enable(self) -> None:
        """Initialize an empty filter set if the registry is disabled."""
        if self.is_disabled():
            self._store(FilterSet.empty())
            logger.debug("Filters enabled")
            self._emit_state("enabled")

    def disable(self) -> None:
        """Discard all filters and mark the registry disabled."""
        self._store(DISABLED)
        logger.info("Filters disabled")
        self._emit_state("disabled")

    def clear(self) -> None:
        """Discard all filters, staying enabled."""
        self._store(FilterSet.empty())
        logger.info("Cleared all filters")
        self._emit_state("cleared")

    def remove_all(self) -> None:
        """Remove every filter. Same as clear()."""
        self.clear()

    # =========================================================================
    # Registration
    # =========================================================================

    def add(
        self,
        options: Mapping[str, Any],
        values: Any = None,
        active_logic: Optional[ActiveLogic] = None,
        fallback_logic: Optional[FallbackLogic] = None,
    ) -> FilterDescriptor:
        """
        Register a filter. The filter logic is NOT applied.

        Args:
            options: Name, type, label, etc. ``name`` is required.
            values: Literal payload, LiteralValues, DeferredValues or a
                zero-argument callable (invoked once, now)
            active_logic: ``(query, value)`` callback used when active
            fallback_logic: ``(query)`` callback used when inactive

        Returns:
            The registered descriptor

        Raises:
            ConfigurationError: If the name is missing or already taken
        """
        values = resolve_values(values)

        self.enable()

        options = dict(options or {})
        name = options.get("name")
        if name is None or name == "":
            raise self._configuration_error("All filters need a name.")
        if not isinstance(name, str):
            raise self._configuration_error(
                f"Filter names must be strings, got {type(name).__name__} {name!r}."
            )
        if self._find(name) is not None:
            raise self._configuration_error(
                f"Duplicate filter name '{name}': two filters cannot share a name.",
                name,
            )

        descriptor = FilterDescriptor(
            name=name,
            options=options,
            values=values,
            active_logic=active_logic,
            fallback_logic=fallback_logic,
            default_type=self._config.default_type,
        )
        state = self._state()
        state.filters.append(descriptor)
        self._store(state)

        logger.info(f"Registered filter: {name} ({descriptor.type})")
        if self._observability is not None:
            self._observability.log_filter_added(name, descriptor.type)
        return descriptor

    def add_descriptor(self, descriptor: FilterDescriptor) -> FilterDescriptor:
        """
        Register a copy of a descriptor built elsewhere.

        The stored descriptor is a new object carrying the same fields.
        """
        options = {**descriptor.options, "name": descriptor.name}
        return self.add(
            options,
            LiteralValues(descriptor.values),
            descriptor.active_logic,
            descriptor.fallback_logic,
        )

    def add_and_apply(
        self,
        options: Mapping[str, Any],
        values: Any = None,
        active_logic: Optional[ActiveLogic] = None,
        fallback_logic: Optional[FallbackLogic] = None,
        request_input: Optional[Mapping[str, Any]] = None,
    ) -> FilterDescriptor:
        """Register a filter and immediately apply it to the query."""
        descriptor = self.add(options, values, active_logic, fallback_logic)
        self.apply(descriptor, request_input)
        return descriptor

    def load_definitions(
        self,
        definitions: Optional[Iterable[FilterDefinitionConfig]] = None,
    ) -> List[FilterDescriptor]:
        """
        Register filters declared in configuration, in declaration order.

        Args:
            definitions: Definitions to load (defaults to config.filters)

        Returns:
            The registered descriptors
        """
        if definitions is None:
            definitions = self._config.filters
        return [self.add(d.to_options(), d.values) for d in definitions]

    def declare(self, name: str) -> FilterBuilder:
        """Start a fluent declaration for a filter with this name."""
        return FilterBuilder(self, name)

    # =========================================================================
    # Application
    # =========================================================================

    def apply(
        self,
        descriptor: FilterDescriptor,
        request_input: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Modify the context's query according to one filter.

        Active filters call their active logic with the submitted value;
        without active logic the default equality clause is used when
        configured. Inactive filters call their fallback logic if any.

        Args:
            descriptor: Filter to apply
            request_input: Input to evaluate (defaults to the context's)
        """
        if request_input is None:
            request_input = self._context.request_input
        query = self._context.query
        active = descriptor.is_active(request_input)

        if active:
            value = descriptor.current_value(request_input)
            if descriptor.active_logic is not None:
                descriptor.active_logic(query, value)
                branch = "active"
            elif self._config.apply_default_logic and query is not None:
                query.where(descriptor.name, value)
                branch = "default"
            else:
                branch = "none"
        elif descriptor.fallback_logic is not None:
            descriptor.fallback_logic(query)
            branch = "fallback"
        else:
            branch = "none"

        logger.debug(f"Applied filter {descriptor.name}: active={active}, branch={branch}")
        if self._observability is not None:
            self._observability.log_filter_applied(descriptor.name, active, branch)

    def apply_all(self, request_input: Optional[Mapping[str, Any]] = None) -> None:
        """Apply every registered filter in order."""
        for descriptor in list(self.list_all()):
            self.apply(descriptor, request_input)

    # =========================================================================
    # Lookup
    # =========================================================================

    def list_all(self) -> Sequence[FilterDescriptor]:
        """The live ordered filter list (empty when disabled)."""
        state = self._state()
        if not state.enabled:
            return []
        return state.filters

    def names(self) -> List[str]:
        """Names of registered filters, in order."""
        return [d.name for d in self.list_all()]

    def get_filter(self, name: str) -> Optional[FilterDescriptor]:
        """
        Get a filter by name.

        Returns:
            The descriptor, or None if disabled or not registered
        """
        if self.is_disabled():
            return None
        return self._find(name)

    def is_active(
        self,
        name: str,
        request_input: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """
        Check whether a registered filter is active for the request input.

        Unknown names and a disabled registry are never active.
        """
        descriptor = self.get_filter(name)
        if descriptor is None:
            return False
        if request_input is None:
            request_input = self._context.request_input
        return descriptor.is_active(request_input)

    def find_where(self, attribute: str, value: Any) -> bool:
        """Check if any filter has attribute equal to value."""
        return self.first_where(attribute, value) is not None

    def first_where(self, attribute: str, value: Any) -> Optional[FilterDescriptor]:
        """First filter, in insertion order, whose attribute equals value."""
        for descriptor in self.list_all():
            if descriptor.has_attribute_value(attribute, value):
                return descriptor
        return None

    def _find(self, name: str) -> Optional[FilterDescriptor]:
        return self.first_where("name", name)

    @property
    def filter_count(self) -> int:
        """Number of registered filters."""
        return len(self.list_all())

    def __len__(self) -> int:
        return self.filter_count

    def __iter__(self) -> Iterator[FilterDescriptor]:
        return iter(list(self.list_all()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get_filter(name) is not None

    # =========================================================================
    # Mutation
    # =========================================================================

    def modify(
        self,
        name: str,
        patch: Union[FilterPatch, Mapping[str, Any]],
    ) -> FilterDescriptor:
        """
        Overwrite fields of a registered filter.

        Args:
            name: Filter name
            patch: FilterPatch, or a mapping with any of ``options``,
                ``values``, ``active_logic``, ``fallback_logic``

        Returns:
            The modified descriptor, for chaining

        Raises:
            FilterNotFoundError: If no filter has this name
            ConfigurationError: If the patch has unknown or invalid fields
        """
        descriptor = self._require(name)

        if not isinstance(patch, FilterPatch):
            try:
                patch = FilterPatch.model_validate(dict(patch))
            except ValidationError as e:
                raise self._configuration_error(
                    f"Invalid modification for filter '{name}': {e}", name
                ) from e

        patch.apply_to(descriptor)

        fields = list(patch.model_fields_set)
        logger.info(f"Modified filter {name}: {sorted(fields)}")
        if self._observability is not None:
            self._observability.log_filter_modified(name, fields)
        return descriptor

    def remove(self, name: str) -> bool:
        """
        Remove a filter by name, keeping the order of the others.

        Returns:
            True if a filter was removed, False if not found
        """
        state = self._state()
        if not state.enabled:
            return False

        remaining = [d for d in state.filters if d.name != name]
        if len(remaining) == len(state.filters):
            logger.debug(f"Cannot remove: filter '{name}' not found")
            return False

        self._store(FilterSet(enabled=True, filters=remaining))
        logger.info(f"Removed filter: {name}")
        if self._observability is not None:
            self._observability.log_filter_removed(name)
        return True

    # =========================================================================
    # Ordering
    # =========================================================================

    def make_first(self, name: str) -> FilterDescriptor:
        """Move a filter to the front."""
        return self._move(name, lambda filters: 0)

    def make_last(self, name: str) -> FilterDescriptor:
        """Move a filter to the end."""
        return self._move(name, lambda filters: len(filters))

    def move_before(self, name: str, target: str) -> FilterDescriptor:
        """Move a filter directly before another one."""
        self._require(target)
        if name == target:
            return self._require(name)
        return self._move(name, lambda filters: self._index(filters, target))

    def move_after(self, name: str, target: str) -> FilterDescriptor:
        """Move a filter directly after another one."""
        self._require(target)
        if name == target:
            return self._require(name)
        return self._move(name, lambda filters: self._index(filters, target) + 1)

    def _move(self, name, position) -> FilterDescriptor:
        descriptor = self._require(name)
        filters = [d for d in self.list_all() if d is not descriptor]
        filters.insert(position(filters), descriptor)
        self._store(FilterSet(enabled=True, filters=filters))
        return descriptor

    @staticmethod
    def _index(filters: List[FilterDescriptor], name: str) -> int:
        for i, descriptor in enumerate(filters):
            if descriptor.name == name:
                return i
        raise FilterNotFoundError(name)

    # =========================================================================
    # Errors
    # =========================================================================

    def _require(self, name: str) -> FilterDescriptor:
        descriptor = self._find(name)
        if descriptor is None:
            logger.error(f"Filter not found: {name}")
            if self._observability is not None:
                self._observability.log_filter_error("filter not found", name)
            raise FilterNotFoundError(name)
        return descriptor

    def _configuration_error(
        self,
        message: str,
        name: Optional[str] = None,
    ) -> ConfigurationError:
        logger.error(message)
        if self._observability is not None:
            self._observability.log_filter_error(message, name)
        return ConfigurationError(message)

    def _emit_state(self, state: str) -> None:
        if self._observability is not None:
            self._observability.log_state_change(state)
