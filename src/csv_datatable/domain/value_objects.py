"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe how rows are presented
but have no conceptual identity.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from csv_datatable.domain.entities import Row


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Parsed table: rows in source order
RowList = List[Row]


class SortDirection(str, Enum):
    """Direction of a column sort."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class SortSpec(BaseModel):
    """Active sort column and direction."""

    column: Optional[str] = Field(default=None, description="Sort column, None = unsorted")
    direction: SortDirection = Field(default=SortDirection.ASCENDING)

    model_config = {"frozen": True}

    def toggled(self, column: str) -> SortSpec:
        """
        Derive the spec that results from clicking a column header.

        Clicking the active column while ascending flips to descending.
        Every other click, including the active column while descending,
        yields ascending. There is no way back to "unsorted".

        Args:
            column: Header that was clicked

        Returns:
            New SortSpec
        """
        if self.column == column and self.direction is SortDirection.ASCENDING:
            return SortSpec(column=column, direction=SortDirection.DESCENDING)
        return SortSpec(column=column, direction=SortDirection.ASCENDING)

    def is_active(self, column: str) -> bool:
        """Check if the given column is the current sort column."""
        return self.column is not None and self.column == column
