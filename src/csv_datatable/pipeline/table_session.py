"""
Table Session - Per-Instance Interaction State.

A TableSession holds the state of one rendered table: all parsed rows,
the filter text, the sort spec and the rows currently displayed. It
decides when each pipeline stage runs:

    - Filtering re-runs whenever the filter text or the row set changes,
      always starting from all rows. The sort is not reapplied.
    - Sorting runs only on a header click and reorders whatever is
      displayed at that moment.

Sessions share nothing; every component owns its own.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from csv_datatable.domain.entities import Row
from csv_datatable.domain.value_objects import SortSpec
from csv_datatable.pipeline.table_pipeline import TablePipeline

logger = logging.getLogger(__name__)


class TableSession:
    """Mutable view state for one table instance."""

    def __init__(self, pipeline: Optional[TablePipeline] = None) -> None:
        self.pipeline = pipeline or TablePipeline()
        self._all_rows: List[Row] = []
        self._display_rows: List[Row] = []
        self._filter_text = ""
        self._sort_spec = SortSpec()

    @property
    def all_rows(self) -> List[Row]:
        return list(self._all_rows)

    @property
    def display_rows(self) -> List[Row]:
        return list(self._display_rows)

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def sort_spec(self) -> SortSpec:
        return self._sort_spec

    @property
    def headers(self) -> List[str]:
        """Column names, taken from the first row of the full row set."""
        if not self._all_rows:
            return []
        return self._all_rows[0].columns

    @property
    def is_loading(self) -> bool:
        """True until a non-empty row set has been loaded."""
        return not self._all_rows

    def set_rows(self, rows: Iterable[Row]) -> None:
        """Replace the full row set and re-run the filter."""
        self._all_rows = list(rows)
        self._refilter()

    def set_filter_text(self, text: str) -> None:
        """Update the filter text and re-run the filter over all rows.

        Setting the current text again is a no-op, so a sorted display
        keeps its order.
        """
        if text == self._filter_text:
            return
        self._filter_text = text
        self._refilter()

    def request_sort(self, column: str) -> SortSpec:
        """
        Handle a click on a column header.

        Args:
            column: Header that was clicked

        Returns:
            The new sort spec
        """
        self._sort_spec = self._sort_spec.toggled(column)
        self._display_rows = self.pipeline.sort(self._display_rows, self._sort_spec)
        return self._sort_spec

    def _refilter(self) -> None:
        self._display_rows = self.pipeline.filter(self._all_rows, self._filter_text)
