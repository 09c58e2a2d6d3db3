"""
Filter Exceptions - Fatal Configuration Errors.

Every exception here signals a developer mistake in how filters were
declared, not a runtime or user condition. They are raised at the call
site and are meant to end the current request with an error response.

Lookup misses (get_filter, first_where, is_active on an unknown name)
are NOT errors and never raise.
"""

from __future__ import annotations


class CrudFilterError(Exception):
    """Base class for all filter registry errors."""

    status_code: int = 500


class ConfigurationError(CrudFilterError):
    """Raised when a filter is declared without a name, twice, or patched badly."""
    pass


class FilterNotFoundError(CrudFilterError, LookupError):
    """Raised when an operation requires a filter that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Filter "{name}" not found. '
            f"Check that the filter exists before you modify it."
        )
