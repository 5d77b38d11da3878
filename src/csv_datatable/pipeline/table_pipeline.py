"""
Table Pipeline - Shared Parse / Filter / Sort Logic.

The TablePipeline is the single place where CSV text becomes display
rows. Both presentation adapters (editor preview and public view) use it,
so the two can never drift apart.

Data flow:
    raw text -> parse -> all rows -> filter -> filtered rows -> sort -> display rows
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from csv_datatable.domain.entities import Row
from csv_datatable.domain.value_objects import SortSpec
from csv_datatable.filters.text_filter import TextFilter
from csv_datatable.parsing.csv_parser import parse_csv
from csv_datatable.sorting.column_sort import ColumnSort

logger = logging.getLogger(__name__)


class TablePipeline:
    """Stateless orchestrator for the three pipeline stages."""

    def __init__(
        self,
        text_filter: Optional[TextFilter] = None,
        column_sort: Optional[ColumnSort] = None,
    ) -> None:
        """
        Initialize pipeline with its stages.

        Args:
            text_filter: Filter stage (default: TextFilter)
            column_sort: Sort stage (default: ColumnSort)
        """
        self.text_filter = text_filter or TextFilter()
        self.column_sort = column_sort or ColumnSort()

    def parse(self, csv_text: str) -> List[Row]:
        """Parse CSV text into rows."""
        start = time.perf_counter()
        rows = parse_csv(csv_text)
        logger.debug(
            f"parse: {len(rows)} rows in {time.perf_counter() - start:.4f}s"
        )
        return rows

    def filter(self, rows: Sequence[Row], query: str) -> List[Row]:
        """Apply the filter stage."""
        return self.text_filter.apply(rows, query)

    def sort(self, rows: Sequence[Row], spec: SortSpec) -> List[Row]:
        """Apply the sort stage."""
        return self.column_sort.apply(rows, spec)

    def run(
        self,
        csv_text: str,
        query: str = "",
        spec: Optional[SortSpec] = None,
    ) -> List[Row]:
        """
        Execute the whole data flow in one call.

        Args:
            csv_text: Raw CSV text
            query: Filter query ("" keeps every row)
            spec: Sort spec (default: unsorted)

        Returns:
            Display rows
        """
        rows = self.filter(self.parse(csv_text), query)
        return self.sort(rows, spec or SortSpec())
