"""
Sorting Package - Row Ordering.

Components:
    - ColumnSort: Sort stage driven by a SortSpec
    - sort_rows: Plain function form of the same sort
"""

from csv_datatable.sorting.column_sort import ColumnSort, sort_rows

__all__ = ["ColumnSort", "sort_rows"]
