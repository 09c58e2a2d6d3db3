"""
Unit Tests for CrudContext.

Test Aspects Covered:
    ✅ Business Logic: Operation settings, registry state storage
    ✅ State: Filters are scoped per operation
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from crud_filters.adapters.in_memory_query import InMemoryQuery
from crud_filters.config.models import CrudFiltersConfig
from crud_filters.context.crud_context import CrudContext
from crud_filters.interfaces.crud_context import CrudContextProtocol
from crud_filters.registry.filter_registry import FilterRegistry, FilterSet


class TestOperationSettings:
    """Tests for per-operation settings."""

    def test_set_and_get(self) -> None:
        context = CrudContext()

        context.set_operation_setting("page_length", 25)

        assert context.get_operation_setting("page_length") == 25
        assert context.has_operation_setting("page_length") is True

    def test_default_when_absent(self) -> None:
        context = CrudContext()

        assert context.get_operation_setting("missing") is None
        assert context.get_operation_setting("missing", default=10) == 10

    def test_settings_are_namespaced_by_operation(self) -> None:
        """
        SCENARIO: Setting stored during "list", operation switched to "show"
        EXPECTED: Not visible in "show", still readable for "list" explicitly
        """
        # Arrange
        context = CrudContext(operation="list")
        context.set_operation_setting("page_length", 25)

        # Act
        context.set_operation("show")

        # Assert
        assert context.operation == "show"
        assert context.get_operation_setting("page_length") is None
        assert context.get_operation_setting("page_length", operation="list") == 25

    def test_request_input_is_copied(self) -> None:
        data = {"status": "paid"}
        context = CrudContext(request_input=data)

        data["status"] = "draft"

        assert context.request_input == {"status": "paid"}


class TestContextFilters:
    """Tests for the registry bound to a context."""

    def test_filters_registry_is_cached(self, context: CrudContext) -> None:
        assert context.filters is context.filters
        assert isinstance(context.filters, FilterRegistry)

    def test_registry_state_stored_under_filters_key(self, context: CrudContext) -> None:
        context.filters.add({"name": "status"})

        state = context.get_operation_setting("filters")
        assert isinstance(state, FilterSet)
        assert state.enabled is True
        assert [d.name for d in state.filters] == ["status"]

    def test_custom_setting_key(self, query: InMemoryQuery) -> None:
        context = CrudContext(query=query, config=CrudFiltersConfig(setting_key="list_filters"))

        context.filters.add({"name": "status"})

        assert context.get_operation_setting("filters") is None
        assert isinstance(context.get_operation_setting("list_filters"), FilterSet)

    def test_filters_are_per_operation(self, context: CrudContext) -> None:
        context.filters.add({"name": "status"})

        context.set_operation("export")

        assert context.filters.is_disabled() is True
        assert context.filters.list_all() == []

    def test_foreign_setting_value_reads_as_disabled(self, context: CrudContext) -> None:
        context.set_operation_setting("filters", [])

        assert context.filters.is_disabled() is True

    def test_implements_protocol(self, context: CrudContext) -> None:
        assert isinstance(context, CrudContextProtocol)


class DictContext:
    """Minimal third-party context: settings in a plain dict."""

    def __init__(self, query: Any, request_input: Mapping[str, Any]) -> None:
        self.settings: Dict[str, Any] = {}
        self.query = query
        self.request_input = request_input

    def get_operation_setting(
        self, key: str, operation: Optional[str] = None, default: Any = None
    ) -> Any:
        return self.settings.get(key, default)

    def set_operation_setting(self, key: str, value: Any, operation: Optional[str] = None) -> None:
        self.settings[key] = value


class TestForeignContext:
    """The registry works against any object honoring the protocol."""

    def test_registry_over_dict_context(self, query: InMemoryQuery) -> None:
        context = DictContext(query, {"status": "sold"})
        registry = FilterRegistry(context)

        registry.add({"name": "status"})
        registry.apply_all()

        assert isinstance(context, CrudContextProtocol)
        assert "filters" in context.settings
        assert [row["name"] for row in query.get()] == ["Rug"]
