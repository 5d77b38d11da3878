"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_csv_parser.py: Header and row parsing
    - test_text_filter.py: Free-text filtering
    - test_column_sort.py: Column sort and click toggling
    - test_table_session.py: When stages run on user input
    - test_sources.py: HTTP and file sources
    - test_views.py: HTML rendering adapters
    - test_component.py: Fetch-once shell and failure policy
    - test_config_loader.py: Configuration loading/validation
"""
