"""
Unit Tests for ColumnSort and SortSpec.

Test Aspects Covered:
    ✅ Business Logic: Ascending/descending order, click toggling
    ✅ Edge Cases: No column, single row, missing cells, string ordering
"""

from __future__ import annotations

from typing import List

from csv_datatable.domain.entities import Row
from csv_datatable.domain.value_objects import SortDirection, SortSpec
from csv_datatable.sorting.column_sort import ColumnSort, sort_rows


def _values(rows: List[Row], column: str) -> List[object]:
    return [r[column] for r in rows]


class TestSortRows:
    """Test cases for sort_rows."""

    def test_ascending(self) -> None:
        """
        SCENARIO: Rows k=b, a, c sorted ascending by k
        EXPECTED: a, b, c
        """
        rows = [Row({"k": "b"}), Row({"k": "a"}), Row({"k": "c"})]

        result = sort_rows(rows, "k", SortDirection.ASCENDING)

        assert _values(result, "k") == ["a", "b", "c"]

    def test_descending(self) -> None:
        """
        SCENARIO: Rows k=b, a, c sorted descending by k
        EXPECTED: c, b, a
        """
        rows = [Row({"k": "b"}), Row({"k": "a"}), Row({"k": "c"})]

        result = sort_rows(rows, "k", SortDirection.DESCENDING)

        assert _values(result, "k") == ["c", "b", "a"]

    def test_no_column_is_noop(self, sample_rows: List[Row]) -> None:
        """
        SCENARIO: Column is None
        EXPECTED: Rows unchanged, for either direction
        """
        assert sort_rows(sample_rows, None) == sample_rows
        assert sort_rows(sample_rows, None, SortDirection.DESCENDING) == sample_rows

    def test_lexicographic_not_numeric(self) -> None:
        """
        SCENARIO: Numeric-looking strings
        EXPECTED: Compared as strings ("10" < "9")
        """
        rows = [Row({"n": "9"}), Row({"n": "10"}), Row({"n": "100"})]

        result = sort_rows(rows, "n")

        assert _values(result, "n") == ["10", "100", "9"]

    def test_missing_cells_sort_last_ascending(self) -> None:
        """
        SCENARIO: One row has a None cell in the sort column
        EXPECTED: Last when ascending, first when descending
        """
        rows = [Row({"k": None}), Row({"k": "b"}), Row({"k": "a"})]

        ascending = sort_rows(rows, "k", SortDirection.ASCENDING)
        descending = sort_rows(rows, "k", SortDirection.DESCENDING)

        assert _values(ascending, "k") == ["a", "b", None]
        assert _values(descending, "k") == [None, "b", "a"]

    def test_unknown_column_does_not_raise(self, sample_rows: List[Row]) -> None:
        result = sort_rows(sample_rows, "nope")

        assert sorted(result, key=repr) == sorted(sample_rows, key=repr)

    def test_single_row(self) -> None:
        rows = [Row({"k": "x"})]

        assert sort_rows(rows, "k", SortDirection.DESCENDING) == rows

    def test_does_not_mutate_input(self) -> None:
        rows = [Row({"k": "b"}), Row({"k": "a"})]

        sort_rows(rows, "k")

        assert _values(rows, "k") == ["b", "a"]


class TestSortSpec:
    """Test cases for header click toggling."""

    def test_default_is_unsorted_ascending(self) -> None:
        spec = SortSpec()

        assert spec.column is None
        assert spec.direction is SortDirection.ASCENDING

    def test_first_click_is_ascending(self) -> None:
        spec = SortSpec().toggled("name")

        assert spec == SortSpec(column="name", direction=SortDirection.ASCENDING)

    def test_second_click_is_descending(self) -> None:
        spec = SortSpec().toggled("name").toggled("name")

        assert spec.direction is SortDirection.DESCENDING

    def test_third_click_back_to_ascending(self) -> None:
        """
        SCENARIO: Same header clicked three times
        EXPECTED: asc, desc, asc (two-state, never unsorted)
        """
        spec = SortSpec()
        directions = []
        for _ in range(3):
            spec = spec.toggled("name")
            directions.append(spec.direction)

        assert directions == [
            SortDirection.ASCENDING,
            SortDirection.DESCENDING,
            SortDirection.ASCENDING,
        ]
        assert spec.column == "name"

    def test_other_column_resets_to_ascending(self) -> None:
        """
        SCENARIO: Descending on one column, then another column clicked
        EXPECTED: New column, ascending
        """
        spec = SortSpec(column="name", direction=SortDirection.DESCENDING)

        spec = spec.toggled("age")

        assert spec == SortSpec(column="age", direction=SortDirection.ASCENDING)

    def test_is_active(self) -> None:
        spec = SortSpec(column="name")

        assert spec.is_active("name")
        assert not spec.is_active("age")
        assert not SortSpec().is_active("name")


class TestColumnSort:
    """Test cases for the ColumnSort stage."""

    def test_name(self) -> None:
        assert ColumnSort().name == "column_sort"

    def test_apply_uses_spec(self) -> None:
        rows = [Row({"k": "b"}), Row({"k": "a"}), Row({"k": "c"})]
        spec = SortSpec().toggled("k").toggled("k")

        result = ColumnSort().apply(rows, spec)

        assert _values(result, "k") == ["c", "b", "a"]
