"""
CRUD Filters - Filter Registry for Admin-Panel CRUD Views.

Registers named filters on a per-request CRUD configuration context and
applies them to the query of a list view: each filter pairs UI metadata
with query-modification logic and is switched active or inactive by the
request input.

Architecture:
    - Ports & Adapters: the registry only talks to protocols
    - The registry stores its state in the context's operation settings
    - Configuration-driven behavior via YAML

Main Components:
    - domain: FilterDescriptor, values variants, typed patch, errors
    - interfaces: Protocols for the context and the query builder
    - registry: FilterRegistry and the fluent FilterBuilder
    - context: In-memory per-request CrudContext
    - adapters: InMemoryQuery for development and tests
    - config: Configuration models and loaders
    - observability: structlog events and correlation IDs

Example:
    >>> from crud_filters import CrudContext, InMemoryQuery
    >>> crud = CrudContext(query=InMemoryQuery(rows), request_input={"status": "paid"})
    >>> crud.filters.add({"name": "status", "type": "dropdown"})
    >>> crud.filters.apply_all()
    >>> print(f"{crud.query.count()} rows match")

"""

import logging

from crud_filters.adapters.in_memory_query import InMemoryQuery
from crud_filters.config.models import CrudFiltersConfig
from crud_filters.context.crud_context import CrudContext
from crud_filters.domain.entities import (
    DeferredValues,
    FilterDescriptor,
    FilterPatch,
    LiteralValues,
)
from crud_filters.domain.exceptions import (
    ConfigurationError,
    CrudFilterError,
    FilterNotFoundError,
)
from crud_filters.registry.filter_builder import FilterBuilder
from crud_filters.registry.filter_registry import FilterRegistry

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for CRUD Filters.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import crud_filters
        >>> crud_filters.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("crud_filters").setLevel(level)


__all__ = [
    "ConfigurationError",
    "CrudContext",
    "CrudFilterError",
    "CrudFiltersConfig",
    "DeferredValues",
    "FilterBuilder",
    "FilterDescriptor",
    "FilterNotFoundError",
    "FilterPatch",
    "FilterRegistry",
    "InMemoryQuery",
    "LiteralValues",
    "configure_logging",
]
