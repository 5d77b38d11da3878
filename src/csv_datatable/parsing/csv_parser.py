"""
CSV Parser.

Converts raw CSV text into an ordered list of rows.

Splitting is deliberately naive: lines are split on "\\n" and fields on
",". Quoted fields are not recognised, so a comma inside quotes still
separates two fields. Parsing is total and never raises on ragged lines.
"""

from __future__ import annotations

import logging
from typing import List

from csv_datatable.domain.entities import Row

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"
FIELD_SEPARATOR = ","


def parse_header(line: str) -> List[str]:
    """Split a header line into trimmed column names."""
    return [name.strip() for name in line.split(FIELD_SEPARATOR)]


def parse_csv(csv_text: str) -> List[Row]:
    """
    Parse CSV text into rows keyed by the header line.

    Args:
        csv_text: Raw CSV text, first non-blank line is the header

    Returns:
        Rows in input order. Short lines leave the trailing columns as
        None, extra values are dropped. Empty list if no line survives.
    """
    lines = [line for line in csv_text.split(LINE_SEPARATOR) if line.strip()]
    if not lines:
        return []

    headers = parse_header(lines[0])
    rows: List[Row] = []

    for line in lines[1:]:
        values = [value.strip() for value in line.split(FIELD_SEPARATOR)]
        if len(values) != len(headers):
            logger.debug(
                f"Ragged line: {len(values)} values for {len(headers)} columns"
            )
        rows.append(
            Row(
                (header, values[i] if i < len(values) else None)
                for i, header in enumerate(headers)
            )
        )

    logger.debug(f"Parsed {len(rows)} rows with {len(headers)} columns")
    return rows
