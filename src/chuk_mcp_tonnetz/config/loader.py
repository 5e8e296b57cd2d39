"""
Config loader - discovers and loads Tonnetz configuration files.

Configs can come from:
1. Built-in defaults (TonnetzConfig())
2. Project configs (YAML files in the user's project directory)

A project file only needs the keys it overrides:

    lattice:
      grid_width: 16
      triangle_size: 2.5
    playback:
      tempo: 96
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_tonnetz.models.config import TonnetzConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "tonnetz"


class ConfigLoader:
    """
    Loads TonnetzConfig from YAML files in a project directory.

    Missing files fall back to defaults. Files that exist but do not
    validate raise pydantic.ValidationError.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the config loader.

        Args:
            project_path: Directory holding <name>.yaml config files
        """
        self.project_path = project_path
        self._cache: dict[str, TonnetzConfig] = {}

    def list_configs(self) -> list[str]:
        """Names of config files available in the project."""
        if not self.project_path or not self.project_path.exists():
            return []
        return sorted(path.stem for path in self.project_path.glob("*.yaml"))

    def get_config(self, name: str = DEFAULT_CONFIG_NAME) -> TonnetzConfig:
        """
        Get a config by name.

        Args:
            name: Config name (file stem)

        Returns:
            The project config if present, otherwise the defaults
        """
        if name in self._cache:
            return self._cache[name]

        config = TonnetzConfig()
        if self.project_path:
            path = self.project_path / f"{name}.yaml"
            if path.exists():
                config = self.load_file(path)
            else:
                logger.debug(f"No config at {path}, using defaults")

        self._cache[name] = config
        return config

    def save_config(self, config: TonnetzConfig, name: str = DEFAULT_CONFIG_NAME) -> Path:
        """
        Write a config to the project directory.

        Returns:
            Path of the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{name}.yaml"
        path.write_text(yaml.safe_dump(config.to_dict(), sort_keys=False))

        self._cache.pop(name, None)
        return path

    @staticmethod
    def load_file(path: Path) -> TonnetzConfig:
        """Load and validate a single YAML config file."""
        with open(path) as f:
            data: dict[str, Any] | None = yaml.safe_load(f)

        config = TonnetzConfig.model_validate(data or {})
        logger.info(f"Loaded Tonnetz config from {path}")
        return config

    def clear_cache(self) -> None:
        """Clear the config cache."""
        self._cache.clear()
