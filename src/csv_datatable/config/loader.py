"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files and validates using Pydantic models.
Layers are applied in order: file, profile, explicit overrides. The host
page typically passes the CSV URL as an override so that no component
has to look it up from ambient state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from csv_datatable.config.models import DataTableConfig


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> DataTableConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge
            overrides: Optional nested values merged last

        Returns:
            Validated DataTableConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        config_dict = self._load_yaml(self._resolve_path(config_path))

        if profile:
            config_dict = self._merge_configs(config_dict, self._load_profile(profile))
        if overrides:
            config_dict = self._merge_configs(config_dict, overrides)

        return DataTableConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> DataTableConfig:
        """Load configuration from dictionary."""
        return DataTableConfig.model_validate(config_dict)

    def for_url(
        self,
        url: str,
        config_dict: Optional[Dict[str, Any]] = None,
    ) -> DataTableConfig:
        """
        Build a configuration bound to one CSV location.

        Args:
            url: CSV URL or path
            config_dict: Optional base settings

        Returns:
            Validated DataTableConfig with source.url set
        """
        merged = self._merge_configs(config_dict or {}, {"source": {"url": url}})
        return DataTableConfig.model_validate(merged)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    source_url: Optional[str] = None,
) -> DataTableConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths
        source_url: Optional CSV location overriding the file's value

    Returns:
        Validated DataTableConfig object
    """
    overrides = {"source": {"url": source_url}} if source_url is not None else None
    return ConfigLoader(base_path=base_path).load(config_path, profile, overrides)
