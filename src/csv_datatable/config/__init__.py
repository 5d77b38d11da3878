"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - DataTableConfig: Root configuration object
    - SourceConfig: CSV location, timeout, encoding
    - DisplayConfig: Placeholder, loading message, sort glyphs, CSS prefix

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. editor vs. public overrides)
"""

from csv_datatable.config.loader import ConfigLoader, load_config
from csv_datatable.config.models import DataTableConfig, DisplayConfig, SourceConfig

__all__ = [
    "ConfigLoader",
    "DataTableConfig",
    "DisplayConfig",
    "SourceConfig",
    "load_config",
]
