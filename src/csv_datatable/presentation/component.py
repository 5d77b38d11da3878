"""
Data Table Component - Interaction Shell.

Owns one TableSession, fetches the CSV exactly once on mount and routes
user input (filter keystrokes, header clicks) into the session.

Failure policy:
    - Empty URL or unsupported scheme: no fetch, the table stays loading
    - Fetch failure or empty parse: logged, loading state forever
    - Unmounted before the fetch resolves: the result is discarded
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from threading import Lock
from typing import Optional, Protocol

from csv_datatable.adapters import source_for
from csv_datatable.config.models import DataTableConfig
from csv_datatable.domain.value_objects import SortSpec
from csv_datatable.pipeline.table_pipeline import TablePipeline
from csv_datatable.pipeline.table_session import TableSession
from csv_datatable.presentation.views import PublicTableView, TableView
from csv_datatable.resilience.error_handler import ErrorHandler

logger = logging.getLogger(__name__)


class CsvSourceProtocol(Protocol):
    """Protocol for CSV sources."""

    @property
    def url(self) -> str:
        ...

    def fetch_text(self) -> str:
        ...


class DataTableComponent:
    """One mounted table instance."""

    def __init__(
        self,
        config: DataTableConfig,
        view: Optional[TableView] = None,
        source: Optional[CsvSourceProtocol] = None,
        pipeline: Optional[TablePipeline] = None,
        error_handler: Optional[ErrorHandler] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        """
        Initialize component with all dependencies.

        Args:
            config: Table configuration; source.url names the CSV
            view: Presentation adapter (default: PublicTableView)
            source: CSV source (default: chosen from source.url)
            pipeline: Shared pipeline (default: new TablePipeline)
            error_handler: Fetch failure policy
            executor: Runs the fetch off the caller's thread when given
        """
        self.config = config
        self.view = view or PublicTableView(config.display)
        self.pipeline = pipeline or TablePipeline()
        self.session = TableSession(self.pipeline)
        self.error_handler = error_handler or ErrorHandler()
        self._source = source
        self._executor = executor
        self._lock = Lock()
        self._mounted = False
        self._alive = True

    @property
    def source(self) -> Optional[CsvSourceProtocol]:
        if self._source is None and self.config.source.url:
            self._source = source_for(self.config.source)
        return self._source

    @property
    def is_alive(self) -> bool:
        return self._alive

    def mount(self) -> Optional[Future]:
        """
        Start the one-time fetch.

        Returns:
            The pending Future when an executor is configured, else None
        """
        if self._mounted:
            return None
        self._mounted = True

        source = self.source
        if source is None or not source.url:
            logger.debug("No usable CSV source configured, skipping fetch")
            return None

        if self._executor is None:
            self._apply(self._fetch(source))
            return None

        future = self._executor.submit(self._fetch, source)
        future.add_done_callback(self._on_fetched)
        return future

    def unmount(self) -> None:
        """Tear down; any fetch still in flight is ignored when it lands."""
        with self._lock:
            self._alive = False

    def set_filter_text(self, text: str) -> None:
        with self._lock:
            self.session.set_filter_text(text)

    def request_sort(self, column: str) -> SortSpec:
        with self._lock:
            return self.session.request_sort(column)

    def render(self) -> str:
        with self._lock:
            return self.view.render(self.session)

    def _fetch(self, source: CsvSourceProtocol) -> Optional[str]:
        return self.error_handler.guard_fetch(source.fetch_text, source.url)

    def _on_fetched(self, future: Future) -> None:
        if future.cancelled():
            return
        self._apply(future.result())

    def _apply(self, csv_text: Optional[str]) -> None:
        if csv_text is None:
            return

        rows = self.pipeline.parse(csv_text)
        if not rows:
            logger.error("Parsed data is not a valid list or is empty.")
            return

        with self._lock:
            if not self._alive:
                logger.debug("Component unmounted before fetch resolved, dropping rows")
                return
            self.session.set_rows(rows)
