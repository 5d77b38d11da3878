"""
Parsing Package - CSV Text to Rows.

Components:
    - parse_csv: Best-effort parser producing Row records
    - parse_header: Header line to ordered column names
"""

from csv_datatable.parsing.csv_parser import parse_csv, parse_header

__all__ = ["parse_csv", "parse_header"]
