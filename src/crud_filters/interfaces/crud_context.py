"""
CRUD Context Protocol.

Defines the contract of the per-request configuration context that owns
the filter registry. The registry never persists anything itself: it
reads and writes its state through the operation settings of this
context, under a well-known key.

The context is responsible for:
    - Storing operation settings for the duration of one request
    - Exposing the query builder that filter logic modifies
    - Exposing the request input consulted for filter activity

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Lifecycle is scoped to one request; no cross-request sharing
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class OperationSettingsProtocol(Protocol):
    """Key-value settings for the current CRUD operation."""

    def get_operation_setting(
        self,
        key: str,
        operation: Optional[str] = None,
        default: Any = None,
    ) -> Any:
        """Read a setting for the given (or current) operation."""
        ...

    def set_operation_setting(
        self,
        key: str,
        value: Any,
        operation: Optional[str] = None,
    ) -> None:
        """Store a setting for the given (or current) operation."""
        ...


@runtime_checkable
class CrudContextProtocol(OperationSettingsProtocol, Protocol):
    """Operation settings plus the query and request input of one request."""

    @property
    def query(self) -> Any:
        """Query builder that filter logic modifies."""
        ...

    @property
    def request_input(self) -> Mapping[str, Any]:
        """Opaque key-value input of the current request."""
        ...
