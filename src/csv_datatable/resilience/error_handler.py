"""
Error Handler - Failure Policy for CSV Loading.

Provides:
    - Exception types raised by CSV sources
    - A guard that turns fetch failures into a logged diagnostic

Design Notes:
    - Fetch failures are terminal for the component: no retry
    - Nothing raised by a source crosses into the presentation layer
    - Programming errors (anything not a DataTableError) still propagate
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DataTableError(Exception):
    """Base class for data table errors."""
    pass


class CsvFetchError(DataTableError):
    """Raised when CSV text cannot be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch CSV from {url}: {reason}")
        self.url = url
        self.reason = reason


class ErrorHandler:
    """Applies the log-and-stay-loading policy to fetch calls."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger
        self.last_error: Optional[DataTableError] = None

    def guard_fetch(
        self,
        func: Callable[[], str],
        operation_name: str = "fetch",
    ) -> Optional[str]:
        """
        Execute a fetch, logging failures instead of raising.

        Args:
            func: Callable returning CSV text
            operation_name: Name for logging

        Returns:
            The fetched text, or None if the fetch failed
        """
        try:
            text = func()
        except DataTableError as e:
            self.last_error = e
            self._log.error(f"Failed to fetch or parse CSV ({operation_name}): {e}")
            return None

        self.last_error = None
        return text
