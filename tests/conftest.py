"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

from crud_filters.adapters.in_memory_query import InMemoryQuery
from crud_filters.config.models import CrudFiltersConfig
from crud_filters.context.crud_context import CrudContext
from crud_filters.observability.observability_manager import ObservabilityManager
from crud_filters.registry.filter_registry import FilterRegistry


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding sample configuration files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def product_rows() -> List[Dict[str, Any]]:
    """A small product table for list views."""
    return [
        {"id": 1, "name": "Desk", "price": 120, "status": "active", "archived": False},
        {"id": 2, "name": "Lamp", "price": 35, "status": "active", "archived": False},
        {"id": 3, "name": "Chair", "price": 49, "status": "draft", "archived": False},
        {"id": 4, "name": "Shelf", "price": 15, "status": "active", "archived": True},
        {"id": 5, "name": "Rug", "price": 80, "status": "sold", "archived": True},
    ]


@pytest.fixture
def query(product_rows: List[Dict[str, Any]]) -> InMemoryQuery:
    """Fresh in-memory query over the product table."""
    return InMemoryQuery(product_rows)


@pytest.fixture
def default_config() -> CrudFiltersConfig:
    """Create default registry configuration."""
    return CrudFiltersConfig()


@pytest.fixture
def context(query: InMemoryQuery, default_config: CrudFiltersConfig) -> CrudContext:
    """Context of a list request without input."""
    return CrudContext(query=query, config=default_config)


@pytest.fixture
def registry(context: CrudContext) -> FilterRegistry:
    """Registry bound to the list context."""
    return context.filters


@pytest.fixture
def observability() -> ObservabilityManager:
    """Create observability manager with console rendering."""
    return ObservabilityManager(use_json=False)
