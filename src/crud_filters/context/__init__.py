"""
Context Package - Per-Request Configuration.

Components:
    - CrudContext: In-memory operation settings, query and request input
"""

from crud_filters.context.crud_context import DEFAULT_OPERATION, CrudContext

__all__ = ["CrudContext", "DEFAULT_OPERATION"]
