"""
CRUD Context - Per-Request Configuration Container.

The CrudContext holds everything one CRUD request configures: the
current operation, its operation settings, the query under construction
and the request input.

Design Notes:
    - Settings are namespaced per operation ("list.filters", "show.filters")
    - One context per request; nothing here is shared across requests
    - The filter registry is created lazily and stores its state here
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from crud_filters.config.models import CrudFiltersConfig
from crud_filters.observability.observability_manager import ObservabilityManager
from crud_filters.registry.filter_registry import FilterRegistry

logger = logging.getLogger(__name__)

DEFAULT_OPERATION = "list"


class CrudContext:
    """
    In-memory configuration context for one CRUD request.

    Implements CrudContextProtocol.
    """

    def __init__(
        self,
        query: Any = None,
        request_input: Optional[Mapping[str, Any]] = None,
        operation: str = DEFAULT_OPERATION,
        *,
        config: Optional[CrudFiltersConfig] = None,
        observability: Optional[ObservabilityManager] = None,
    ) -> None:
        """
        Initialize context.

        Args:
            query: Query builder that filter logic modifies
            request_input: Input of the current request
            operation: Name of the current CRUD operation
            config: Filter registry configuration
            observability: Optional structured event recorder
        """
        self._query = query
        self._request_input: Dict[str, Any] = dict(request_input or {})
        self._operation = operation
        self._settings: Dict[str, Any] = {}
        self._config = config or CrudFiltersConfig()
        self._observability = observability
        self._filters: Optional[FilterRegistry] = None

    # =========================================================================
    # Operation
    # =========================================================================

    @property
    def operation(self) -> str:
        """Name of the current CRUD operation."""
        return self._operation

    def set_operation(self, operation: str) -> None:
        logger.debug(f"Switching operation: {self._operation} -> {operation}")
        self._operation = operation

    # =========================================================================
    # Operation Settings
    # =========================================================================

    def _setting_key(self, key: str, operation: Optional[str]) -> str:
        return f"{operation or self._operation}.{key}"

    def get_operation_setting(
        self,
        key: str,
        operation: Optional[str] = None,
        default: Any = None,
    ) -> Any:
        """
        Read a setting of the given (or current) operation.

        Args:
            key: Setting name
            operation: Operation name, defaults to the current one
            default: Returned when the setting is absent

        Returns:
            The stored value or default
        """
        return self._settings.get(self._setting_key(key, operation), default)

    def set_operation_setting(
        self,
        key: str,
        value: Any,
        operation: Optional[str] = None,
    ) -> None:
        """Store a setting for the given (or current) operation."""
        self._settings[self._setting_key(key, operation)] = value

    def has_operation_setting(self, key: str, operation: Optional[str] = None) -> bool:
        return self._setting_key(key, operation) in self._settings

    # =========================================================================
    # Request
    # =========================================================================

    @property
    def query(self) -> Any:
        """Query builder that filter logic modifies."""
        return self._query

    @property
    def request_input(self) -> Mapping[str, Any]:
        """Input of the current request."""
        return self._request_input

    @property
    def filters(self) -> FilterRegistry:
        """Filter registry bound to this context."""
        if self._filters is None:
            self._filters = FilterRegistry(
                self,
                config=self._config,
                observability=self._observability,
            )
        return self._filters
