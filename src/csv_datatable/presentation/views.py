"""
Presentation Adapters - HTML Rendering of a TableSession.

Two thin adapters render the same session. They differ only in the
surrounding chrome:

    - PublicTableView: bare container, mounted by the host page
    - EditorPreviewView: the same markup inside an editor block wrapper

Neither adapter filters or sorts; they only read session state.
"""

from __future__ import annotations

from html import escape
from typing import List

from csv_datatable.config.models import DisplayConfig
from csv_datatable.domain.entities import Row
from csv_datatable.domain.value_objects import SortDirection, SortSpec
from csv_datatable.pipeline.table_session import TableSession


class TableView:
    """Shared markup for both adapters."""

    def __init__(self, display: DisplayConfig) -> None:
        self.display = display

    @property
    def prefix(self) -> str:
        return self.display.css_prefix

    def render(self, session: TableSession) -> str:
        """Render the session as an HTML fragment."""
        return self.render_body(session)

    def render_body(self, session: TableSession) -> str:
        if session.is_loading:
            return f"<p>{escape(self.display.loading_message)}</p>"

        headers = session.headers
        parts = [
            f'<div class="{self.prefix}__container">',
            self._render_filter_input(session.filter_text),
            f'<table class="{self.prefix}">',
            "<thead><tr>",
            *(self._render_header(h, session.sort_spec) for h in headers),
            "</tr></thead>",
            "<tbody>",
            *(self._render_row(row, headers) for row in session.display_rows),
            "</tbody>",
            "</table>",
            "</div>",
        ]
        return "".join(parts)

    def sort_indicator(self, column: str, spec: SortSpec) -> str:
        """Glyph shown next to the active sort column, empty elsewhere."""
        if not spec.is_active(column):
            return ""
        if spec.direction is SortDirection.ASCENDING:
            return f" {self.display.ascending_glyph}"
        return f" {self.display.descending_glyph}"

    def _render_filter_input(self, text: str) -> str:
        return (
            f'<input type="text" class="{self.prefix}__filter-input"'
            f' placeholder="{escape(self.display.filter_placeholder)}"'
            f' value="{escape(text)}">'
        )

    def _render_header(self, column: str, spec: SortSpec) -> str:
        indicator = self.sort_indicator(column, spec)
        glyph = f"<span>{escape(indicator)}</span>" if indicator else ""
        return (
            f'<th class="{self.prefix}__header" data-column="{escape(column)}">'
            f"{escape(column)}{glyph}</th>"
        )

    def _render_row(self, row: Row, headers: List[str]) -> str:
        cells = "".join(
            f"<td>{escape(row.get(h) or '')}</td>" for h in headers
        )
        return f"<tr>{cells}</tr>"


class PublicTableView(TableView):
    """Adapter for the public page."""


class EditorPreviewView(TableView):
    """Adapter for the editor preview; wraps output in a block wrapper."""

    def render(self, session: TableSession) -> str:
        return (
            f'<div class="{self.prefix}__editor-block">'
            f"{self.render_body(session)}</div>"
        )
