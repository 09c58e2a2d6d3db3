"""
Query Builder Protocol.

Defines the minimal surface the registry needs from a query builder:
a single equality clause used when a filter has no explicit active
logic. Custom logic may call anything the concrete builder offers; the
registry passes the builder through untouched.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QueryBuilderProtocol(Protocol):
    """Abstract interface for a query under construction."""

    def where(self, column: str, value: Any) -> Any:
        """
        Restrict the query to rows where column equals value.

        Args:
            column: Column or attribute name
            value: Value to compare against

        Returns:
            The builder (implementations may chain)
        """
        ...
