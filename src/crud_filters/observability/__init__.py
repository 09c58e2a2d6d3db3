"""
Observability Package - Structured Events for the Filter Registry.

Components:
    - ObservabilityManager: structlog events, correlation IDs, counters
"""

from crud_filters.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = ["ObservabilityManager", "get_correlation_id", "set_correlation_id"]
