"""
Unit Tests for ObservabilityManager.

Test Aspects Covered:
    ✅ Business Logic: Correlation IDs, structured events, counters
    ✅ Edge Cases: Event filtering, clearing
"""

from __future__ import annotations

import logging

from crud_filters.config.models import ObservabilityConfig
from crud_filters.context.crud_context import CrudContext
from crud_filters.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
)


class TestCorrelationIds:
    """Test correlation ID management."""

    def test_set_and_get_correlation_id(self) -> None:
        """
        SCENARIO: Set correlation ID
        EXPECTED: Can retrieve same ID
        """
        # Arrange
        manager = ObservabilityManager()

        # Act
        manager.set_correlation_id("request-123")

        # Assert
        assert get_correlation_id() == "request-123"

    def test_generate_correlation_id(self) -> None:
        manager = ObservabilityManager()

        correlation_id = manager.generate_correlation_id()

        assert len(correlation_id) == 36  # UUID format
        assert get_correlation_id() == correlation_id

    def test_events_carry_correlation_id(self) -> None:
        manager = ObservabilityManager()
        manager.set_correlation_id("request-456")

        manager.log_filter_added("status", "dropdown")

        assert manager.get_events()[0]["correlation_id"] == "request-456"


class TestEvents:
    """Test structured event recording."""

    def test_log_event_records_data(self) -> None:
        manager = ObservabilityManager(use_json=False)

        manager.log_event("custom", {"key": "value"})

        event = manager.get_events()[0]
        assert event["event_type"] == "custom"
        assert event["key"] == "value"
        assert "timestamp" in event

    def test_get_events_by_type(self) -> None:
        manager = ObservabilityManager()

        manager.log_filter_added("status", "dropdown")
        manager.log_filter_removed("status")
        manager.log_filter_added("price", "range")

        added = manager.get_events("filter_added")
        assert [e["filter"] for e in added] == ["status", "price"]

    def test_filter_applied_counts(self) -> None:
        manager = ObservabilityManager()

        manager.log_filter_applied("status", True, "active")
        manager.log_filter_applied("status", False, "fallback")

        metrics = manager.get_metrics()["filters_applied_total"]
        assert len(metrics) == 2
        assert metrics[1]["tags"] == {"filter": "status", "branch": "fallback"}
        assert metrics[0]["type"] == "counter"

    def test_modified_fields_sorted(self) -> None:
        manager = ObservabilityManager()

        manager.log_filter_modified("status", ["values", "options"])

        assert manager.get_events()[0]["fields"] == ["options", "values"]

    def test_state_change_event_name(self) -> None:
        manager = ObservabilityManager()

        manager.log_state_change("disabled")

        assert manager.get_events()[0]["event_type"] == "filters_disabled"

    def test_clear(self) -> None:
        manager = ObservabilityManager()
        manager.log_filter_applied("status", True, "active")

        manager.clear()

        assert manager.get_events() == []
        assert manager.get_metrics() == {}


class TestFromConfig:
    """Test creation from configuration."""

    def test_from_config(self) -> None:
        config = ObservabilityConfig(use_json=False, log_level="warning")

        manager = ObservabilityManager.from_config(config)

        assert manager.use_json is False
        assert manager.log_level == logging.WARNING

    def test_disabled_config_gives_no_manager(self) -> None:
        """
        SCENARIO: observability.enabled is false
        EXPECTED: No manager; a registry built without one records nothing
        """
        # Arrange
        config = ObservabilityConfig(enabled=False)

        # Act
        manager = ObservabilityManager.from_config(config)
        crud = CrudContext(observability=manager)
        crud.filters.add({"name": "status"})

        # Assert
        assert manager is None
        assert crud.filters.names() == ["status"]
