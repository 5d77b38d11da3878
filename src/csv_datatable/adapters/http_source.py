"""
HTTP CSV Source.

Fetches CSV text over HTTP(S) with requests. Any network failure or
non-2xx status is reported as CsvFetchError.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from csv_datatable.config.models import SourceConfig
from csv_datatable.resilience.error_handler import CsvFetchError

logger = logging.getLogger(__name__)


class HttpCsvSource:
    """CSV source backed by a single HTTP GET."""

    def __init__(
        self,
        config: SourceConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize HTTP source.

        Args:
            config: Source configuration (url, timeout, encoding)
            session: Optional requests session, e.g. for connection reuse
        """
        self.config = config
        self._session = session

    @property
    def url(self) -> str:
        return self.config.url

    def fetch_text(self) -> str:
        """
        Download the CSV text.

        Returns:
            Response body decoded with the configured encoding

        Raises:
            CsvFetchError: On network error or non-success response
        """
        getter = self._session.get if self._session is not None else requests.get
        logger.debug(f"GET {self.url}")

        try:
            response = getter(self.url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            raise CsvFetchError(self.url, str(e)) from e

        response.encoding = self.config.encoding
        return response.text
