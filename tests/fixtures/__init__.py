"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration with declared filters
    - profiles/strict.yaml: Profile overlay for loader tests
"""
