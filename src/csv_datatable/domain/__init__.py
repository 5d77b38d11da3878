"""
Domain Layer - Core Entities and Value Objects.

This package contains the core domain model for the data table.

Entities:
    - Row: One parsed CSV data line, column name -> cell value

Value Objects:
    - SortDirection: Ascending or descending
    - SortSpec: Active sort column plus direction

Design Principles:
    - Immutable (read-only rows, frozen Pydantic models)
    - All cell values are strings; no type inference
    - No infrastructure dependencies
"""

from csv_datatable.domain.entities import Cell, Row
from csv_datatable.domain.value_objects import RowList, SortDirection, SortSpec

__all__ = ["Cell", "Row", "RowList", "SortDirection", "SortSpec"]
