"""
Resilience Package - Error Types and Failure Policy.

This package provides the failure handling for CSV loading:
    - DataTableError / CsvFetchError: Exceptions raised by sources
    - ErrorHandler: Logs fetch failures and reports "no data"

Design Principles:
    - Fail soft at the component boundary (log, stay loading)
    - No retry: one fetch per mounted component
"""

from csv_datatable.resilience.error_handler import (
    CsvFetchError,
    DataTableError,
    ErrorHandler,
)

__all__ = ["CsvFetchError", "DataTableError", "ErrorHandler"]
