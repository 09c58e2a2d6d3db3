"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package.

Queries:
    - InMemoryQuery: Recording query builder over row dicts (dev/testing)

Design Principles:
    - All adapters implement their respective protocols
    - No filter registry logic in adapters
"""

from crud_filters.adapters.in_memory_query import Clause, InMemoryQuery

__all__ = ["Clause", "InMemoryQuery"]
