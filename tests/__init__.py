"""
Test Suite for CRUD Filters.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end registry scenarios
    - fixtures/: Sample configuration files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/crud_filters           # With coverage
"""
