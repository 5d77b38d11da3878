"""
Text Filter Implementation.

Keeps rows where any cell contains the query, case-insensitively.

Present cells are coerced with str() before matching. Missing cells
(None, from short lines) are skipped rather than coerced, so a short row
never matches a query such as "none" or "undefined" through its absent
columns.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from csv_datatable.domain.entities import Row

logger = logging.getLogger(__name__)


def row_matches(row: Row, folded_query: str) -> bool:
    """Check whether any cell of the row contains an already folded query."""
    return any(
        folded_query in str(value).casefold()
        for value in row.values()
        if value is not None
    )


def filter_rows(rows: Sequence[Row], query: str) -> List[Row]:
    """
    Filter rows by free-text query.

    Args:
        rows: Rows to filter
        query: Substring to look for in any column. The empty string
            disables filtering; no trimming is applied.

    Returns:
        Matching rows in their original relative order
    """
    if query == "":
        return list(rows)

    folded = query.casefold()
    return [row for row in rows if row_matches(row, folded)]


class TextFilter:
    """Filter stage matching a query across all columns."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "text_filter"

    def apply(self, rows: Sequence[Row], query: str) -> List[Row]:
        """
        Apply text filtering.

        Args:
            rows: Rows to filter
            query: Free-text query

        Returns:
            Filtered rows
        """
        result = filter_rows(rows, query)
        logger.debug(
            f"{self.name}: {len(result)}/{len(rows)} rows match {query!r}"
        )
        return result
