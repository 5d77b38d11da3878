"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from csv_datatable.adapters.file_source import StaticCsvSource
from csv_datatable.config.models import DataTableConfig, DisplayConfig, SourceConfig
from csv_datatable.domain.entities import Row
from csv_datatable.pipeline.table_pipeline import TablePipeline
from csv_datatable.pipeline.table_session import TableSession


PEOPLE_CSV = "name,age\nAlice,30\nBob,25\n"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def people_csv_path(fixtures_dir: Path) -> Path:
    """Path to sample CSV file."""
    return fixtures_dir / "people.csv"


@pytest.fixture
def people_csv() -> str:
    """Small CSV with a trailing newline."""
    return PEOPLE_CSV


@pytest.fixture
def default_config() -> DataTableConfig:
    """Default configuration (no URL)."""
    return DataTableConfig()


@pytest.fixture
def static_config() -> DataTableConfig:
    """Configuration pointing at an in-memory source."""
    return DataTableConfig(source=SourceConfig(url="memory://people"))


@pytest.fixture
def display_config() -> DisplayConfig:
    """Default display settings."""
    return DisplayConfig()


@pytest.fixture
def static_source(people_csv: str) -> StaticCsvSource:
    """In-memory CSV source."""
    return StaticCsvSource(people_csv, url="memory://people")


@pytest.fixture
def pipeline() -> TablePipeline:
    """Shared pipeline."""
    return TablePipeline()


@pytest.fixture
def sample_rows() -> List[Row]:
    """Rows with mixed case values and one ragged row."""
    return [
        Row({"name": "Alice", "city": "Paris", "team": "Red"}),
        Row({"name": "Bob", "city": "berlin", "team": "Blue"}),
        Row({"name": "Carol", "city": "Boston", "team": None}),
        Row({"name": "dave", "city": "Foo City", "team": "Red"}),
    ]


@pytest.fixture
def loaded_session(sample_rows: List[Row]) -> TableSession:
    """Session with sample rows loaded."""
    session = TableSession()
    session.set_rows(sample_rows)
    return session
