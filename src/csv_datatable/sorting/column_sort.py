"""
Column Sort Implementation.

Orders rows by the string value of one column. Values compare
lexicographically; there is no numeric or date coercion, so "10" sorts
before "9". Missing cells sort after every present value when ascending.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from csv_datatable.domain.entities import Row
from csv_datatable.domain.value_objects import SortDirection, SortSpec

logger = logging.getLogger(__name__)


def _sort_key(column: str):
    def key(row: Row) -> Tuple[bool, str]:
        value = row.get(column)
        return (value is None, "" if value is None else str(value))

    return key


def sort_rows(
    rows: Sequence[Row],
    column: Optional[str],
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[Row]:
    """
    Sort rows by a column.

    Args:
        rows: Rows to sort
        column: Column to sort by; None leaves the order unchanged
        direction: Ascending or descending

    Returns:
        New list of rows. Order among equal keys is not part of the
        contract.
    """
    if column is None:
        return list(rows)

    return sorted(
        rows,
        key=_sort_key(column),
        reverse=direction is SortDirection.DESCENDING,
    )


class ColumnSort:
    """Sort stage driven by a SortSpec."""

    @property
    def name(self) -> str:
        """Unique name of this sort stage."""
        return "column_sort"

    def apply(self, rows: Sequence[Row], spec: SortSpec) -> List[Row]:
        """
        Apply the sort described by spec.

        Args:
            rows: Rows to sort
            spec: Column and direction

        Returns:
            Sorted rows
        """
        if spec.column is not None:
            logger.debug(
                f"{self.name}: sorting {len(rows)} rows by "
                f"{spec.column!r} {spec.direction.value}"
            )
        return sort_rows(rows, spec.column, spec.direction)
