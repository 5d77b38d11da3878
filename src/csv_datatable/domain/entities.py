"""
Core Domain Entities.

This module defines the row record that every pipeline stage operates on.
A Row is created once by the parser and never mutated afterwards; filter
and sort stages only select and reorder rows.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


# Cell value: a string, or None when the data line was too short
Cell = Optional[str]


class Row(Mapping[str, Cell]):
    """Ordered, read-only mapping of column name to cell value."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Tuple[str, Cell]] | Mapping[str, Cell]) -> None:
        """
        Initialize row from column/value pairs.

        Args:
            cells: Mapping or iterable of (column, value) pairs, in
                header order. Repeated columns keep the first position
                and the last value.
        """
        self._cells: Mapping[str, Cell] = MappingProxyType(dict(cells))

    def __getitem__(self, column: str) -> Cell:
        return self._cells[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __hash__(self) -> int:
        return hash(tuple(self._cells.items()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return list(self._cells.items()) == list(other._cells.items())
        if isinstance(other, Mapping):
            return dict(self._cells) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Row({dict(self._cells)!r})"

    @property
    def columns(self) -> List[str]:
        """Column names in header order."""
        return list(self._cells)

    def to_dict(self) -> Dict[str, Cell]:
        """Return a mutable copy of the cells."""
        return dict(self._cells)
