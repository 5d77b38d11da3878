"""
Adapters Package - Infrastructure Implementations.

This package contains the concrete CSV sources the component fetches
from. Following the Ports & Adapters pattern, the component only needs
an object with a `url` and a `fetch_text()` method.

Sources:
    - HttpCsvSource: HTTP(S) GET via requests
    - FileCsvSource: Local path or file:// URL
    - StaticCsvSource: In-memory text for previews and testing

Design Principles:
    - All sources raise CsvFetchError on failure
    - Unsupported URL schemes are logged and get no source
    - Easily swappable via Dependency Injection
    - No parsing or filtering logic in adapters
"""

from __future__ import annotations

import logging
from typing import Optional, Union
from urllib.parse import urlparse

from csv_datatable.adapters.file_source import FileCsvSource, StaticCsvSource
from csv_datatable.adapters.http_source import HttpCsvSource
from csv_datatable.config.models import SourceConfig

logger = logging.getLogger(__name__)

HTTP_SCHEMES = ("http", "https")
FILE_SCHEMES = ("", "file")


def source_for(config: SourceConfig) -> Optional[Union[HttpCsvSource, FileCsvSource]]:
    """
    Pick a source implementation from the URL scheme.

    Args:
        config: Source configuration with a non-empty url

    Returns:
        HttpCsvSource for http/https, FileCsvSource for plain paths,
        file:// URLs and Windows drive paths, None for any other scheme
    """
    scheme = urlparse(config.url).scheme.lower()
    if scheme in HTTP_SCHEMES:
        return HttpCsvSource(config)
    if scheme in FILE_SCHEMES or len(scheme) == 1:
        return FileCsvSource(config)

    logger.error(f"Unsupported CSV URL scheme {scheme!r}: {config.url}")
    return None


__all__ = [
    "FileCsvSource",
    "HttpCsvSource",
    "StaticCsvSource",
    "source_for",
]
