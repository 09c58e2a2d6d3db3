"""
Integration Tests - End-to-End Registry Scenarios.

These tests register filters on a CrudContext, apply them to an
InMemoryQuery and check the resulting rows.

Test Files:
    - test_filter_lifecycle.py: Request-level filter workflows
"""
