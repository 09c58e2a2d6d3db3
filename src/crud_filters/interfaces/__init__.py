"""
Interfaces Layer - Abstract Protocols for Collaborators.

The filter registry depends only on these abstractions:

Protocols:
    - OperationSettingsProtocol: get/set of per-operation settings
    - CrudContextProtocol: settings + query + request input
    - QueryBuilderProtocol: target of filter logic side effects

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Request input is any Mapping[str, Any]
"""

from crud_filters.interfaces.crud_context import (
    CrudContextProtocol,
    OperationSettingsProtocol,
)
from crud_filters.interfaces.query_builder import QueryBuilderProtocol

__all__ = [
    "CrudContextProtocol",
    "OperationSettingsProtocol",
    "QueryBuilderProtocol",
]
