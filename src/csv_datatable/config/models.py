"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. The data
source URL is an explicit configuration value handed to each component
at construction time.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, Field, field_validator


class SourceConfig(BaseModel):
    """Where the CSV text comes from."""

    url: str = Field(default="", description="CSV location; empty disables fetching")
    timeout_seconds: float = Field(default=10.0, gt=0, le=300)
    encoding: str = Field(default="utf-8")

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


class DisplayConfig(BaseModel):
    """Text and markup settings shared by all presentation adapters."""

    filter_placeholder: str = Field(default="Filter data...")
    loading_message: str = Field(default="Loading data...")
    ascending_glyph: str = Field(default="▲", min_length=1)
    descending_glyph: str = Field(default="▼", min_length=1)
    css_prefix: str = Field(default="data-table", min_length=1)


class DataTableConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    source: SourceConfig = Field(default_factory=SourceConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    model_config = {"populate_by_name": True}
