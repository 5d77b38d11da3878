"""
Filters Package - Row Selection.

Filters:
    - TextFilter: Case-insensitive substring match across all columns

Design Principles:
    - Filters are stateless; the query is passed on every call
    - Stable: kept rows preserve their relative order
    - Total: no input in the documented domain raises
"""

from csv_datatable.filters.text_filter import TextFilter, filter_rows, row_matches

__all__ = ["TextFilter", "filter_rows", "row_matches"]
