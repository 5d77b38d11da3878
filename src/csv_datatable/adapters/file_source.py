"""
Local CSV Sources.

FileCsvSource reads a filesystem path or file:// URL, for hosts that ship
the CSV beside the page. StaticCsvSource serves text already in memory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

from csv_datatable.config.models import SourceConfig
from csv_datatable.resilience.error_handler import CsvFetchError

logger = logging.getLogger(__name__)


def path_from_url(url: str) -> Path:
    """Convert a file:// URL or plain path into a Path."""
    parsed = urlparse(url)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(url)


class FileCsvSource:
    """CSV source reading a local file."""

    def __init__(self, config: SourceConfig) -> None:
        self.config = config

    @property
    def url(self) -> str:
        return self.config.url

    def fetch_text(self) -> str:
        """
        Read the CSV file.

        Raises:
            CsvFetchError: If the file is missing or cannot be decoded
        """
        path = path_from_url(self.url)
        logger.debug(f"Reading {path}")
        try:
            return path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise CsvFetchError(self.url, str(e)) from e


class StaticCsvSource:
    """CSV source returning fixed text."""

    def __init__(self, text: str, url: str = "memory://static") -> None:
        self._text = text
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def fetch_text(self) -> str:
        return self._text
