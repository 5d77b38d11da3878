"""
CSV Data Table - Filterable, Sortable Tables from CSV Files.

Renders a CSV file as an interactive table: parse raw CSV text into row
records, filter them with a free-text query across all columns and sort
them by a clicked column. An editor preview and a public view render the
same session through one shared pipeline.

Architecture:
    - Ports & Adapters (sources and views are swappable)
    - Dependency Injection for testability
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Row, SortSpec, SortDirection
    - parsing / filters / sorting: The three pipeline stages
    - pipeline: TablePipeline orchestration and per-instance TableSession
    - adapters: HTTP, file and in-memory CSV sources
    - presentation: DataTableComponent plus public and editor views
    - config: Configuration models and loaders

Example:
    >>> from csv_datatable import DataTableComponent, load_config
    >>> config = load_config("config/default.yaml", source_url="https://example.com/data.csv")
    >>> table = DataTableComponent(config)
    >>> table.mount()
    >>> table.set_filter_text("bob")
    >>> html = table.render()

"""

import logging

from csv_datatable.config import DataTableConfig, load_config
from csv_datatable.domain import Row, SortDirection, SortSpec
from csv_datatable.filters import filter_rows
from csv_datatable.parsing import parse_csv
from csv_datatable.pipeline import TablePipeline, TableSession
from csv_datatable.presentation import (
    DataTableComponent,
    EditorPreviewView,
    PublicTableView,
)
from csv_datatable.sorting import sort_rows

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for CSV Data Table.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible, which still includes
    fetch failures and empty parses.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import csv_datatable
        >>> csv_datatable.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("csv_datatable").setLevel(level)


__all__ = [
    "DataTableComponent",
    "DataTableConfig",
    "EditorPreviewView",
    "PublicTableView",
    "Row",
    "SortDirection",
    "SortSpec",
    "TablePipeline",
    "TableSession",
    "configure_logging",
    "filter_rows",
    "load_config",
    "parse_csv",
    "sort_rows",
]
