"""
Observability Manager - Structured Filter Events and Counters.

Provides:
    - Structured logging via structlog (JSON or console rendering)
    - Request correlation ID propagation
    - Counters for filter applications

Design Notes:
    - Correlation ID stored in a ContextVar, so each request sees its own
    - Events are kept in memory for inspection during the request
"""

from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar
from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog

from crud_filters.config.models import ObservabilityConfig

# Context variable for correlation ID
_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


class ObservabilityManager:
    """
    Structured events for filter registration and application.

    One manager is typically created per request together with the
    CrudContext; the recorded events describe what the registry did
    while handling that request.
    """

    def __init__(
        self,
        service_name: str = "crud_filters",
        use_json: bool = True,
        log_level: int = logging.INFO,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Service name for log entries
            use_json: Render JSON lines instead of console output
            log_level: Logging level
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._events: List[Dict[str, Any]] = []

        self._configure_structlog()
        self._logger = structlog.get_logger(service_name)

    @classmethod
    def from_config(cls, config: ObservabilityConfig) -> Optional["ObservabilityManager"]:
        """
        Create a manager from validated configuration.

        Returns None when observability is disabled. A registry without a
        manager records no events.
        """
        if not config.enabled:
            return None
        return cls(
            use_json=config.use_json,
            log_level=getattr(logging, config.log_level),
        )

    def _configure_structlog(self) -> None:
        """Configure structlog for structured logging."""
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set correlation ID for current context.

        Args:
            correlation_id: Unique ID for request tracing
        """
        set_correlation_id(correlation_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Log a structured event.

        Args:
            event_type: Type of event (e.g., "filter_added", "filter_applied")
            data: Additional event data
            level: Log level (debug, info, warning, error)
        """
        event_data = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            **(data or {}),
        }
        self._events.append(event_data)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        payload = {k: v for k, v in event_data.items() if k != "correlation_id"}
        log_method(event_type, **payload)

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
        metric_type: str = "counter",
    ) -> None:
        """
        Record a metric value.

        Args:
            name: Metric name
            value: Metric value
            tags: Additional tags/labels
            metric_type: Type (gauge, counter)
        """
        metric_entry = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id(),
        }
        self._metrics.setdefault(name, []).append(metric_entry)

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all recorded metrics."""
        return dict(self._metrics)

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded events, optionally only those of one type."""
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e["event_type"] == event_type]

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        self._metrics.clear()
        self._events.clear()

    # =========================================================================
    # Registry Events
    # =========================================================================

    def log_filter_added(self, name: str, filter_type: str) -> None:
        self.log_event("filter_added", {"filter": name, "type": filter_type})

    def log_filter_applied(self, name: str, active: bool, branch: str) -> None:
        """
        Log one apply-time dispatch.

        Args:
            name: Filter name
            active: Whether the filter was active for the request input
            branch: "active", "default", "fallback" or "none"
        """
        self.log_event(
            "filter_applied",
            {"filter": name, "active": active, "branch": branch},
            level="debug",
        )
        self.record_metric(
            "filters_applied_total",
            1.0,
            tags={"filter": name, "branch": branch},
        )

    def log_filter_modified(self, name: str, fields: List[str]) -> None:
        self.log_event("filter_modified", {"filter": name, "fields": sorted(fields)})

    def log_filter_removed(self, name: str) -> None:
        self.log_event("filter_removed", {"filter": name})

    def log_state_change(self, state: str) -> None:
        """Log a registry state transition (enabled, disabled, cleared)."""
        self.log_event(f"filters_{state}")

    def log_filter_error(self, message: str, name: Optional[str] = None) -> None:
        self.log_event(
            "filter_error",
            {"filter": name, "message": message},
            level="error",
        )
