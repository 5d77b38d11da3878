"""
Presentation Package - Component Shell and Render Adapters.

Components:
    - DataTableComponent: Fetch-once shell owning a TableSession
    - PublicTableView: Markup for the public page
    - EditorPreviewView: Same markup inside the editor block wrapper

Design Principles:
    - Adapters are thin: all data logic lives in the pipeline package
    - Each component instance owns its own session
"""

from csv_datatable.presentation.component import DataTableComponent
from csv_datatable.presentation.views import (
    EditorPreviewView,
    PublicTableView,
    TableView,
)

__all__ = [
    "DataTableComponent",
    "EditorPreviewView",
    "PublicTableView",
    "TableView",
]
