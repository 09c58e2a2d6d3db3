"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_filter_registry.py: Registry state, registration, lookup, mutation
    - test_filter_builder.py: Fluent declaration
    - test_entities.py: Descriptor, values variants, typed patch
    - test_crud_context.py: Operation settings and request data
    - test_in_memory_query.py: Recording query adapter
    - test_config_loader.py: Configuration loading/validation
    - test_observability_manager.py: Structured events and correlation IDs
"""
