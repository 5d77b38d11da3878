"""
Test Suite for CSV Data Table.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end tests from CSV text to rendered HTML
    - fixtures/: Shared sample CSV and configuration files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
