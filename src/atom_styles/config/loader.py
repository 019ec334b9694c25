"""
Config loader - reads the optional atom.yaml at the project root.

Any field may be omitted; defaults reproduce the standard layout.
A modules list replaces the built-in manifest:

    modules:
      - entry: tokens/_primitive.scss
        output: tokens/primitives.css
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from atom_styles.constants import CONFIG_FILE, ErrorMessages
from atom_styles.errors import ConfigError
from atom_styles.models.config import ProjectConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Discovers and loads the project configuration."""

    def __init__(self, root: Path | None = None, filename: str = CONFIG_FILE):
        """
        Initialize the loader.

        Args:
            root: Project root (defaults to the working directory)
            filename: Config file name inside the root
        """
        self.root = (root or Path.cwd()).resolve()
        self.filename = filename

    @property
    def path(self) -> Path:
        return self.root / self.filename

    def load(self) -> ProjectConfig:
        """
        Load the project configuration.

        Returns:
            ProjectConfig rooted at the project root

        Raises:
            ConfigError: The file exists but is not valid
        """
        if not self.path.exists():
            logger.debug(f"No {self.filename} in {self.root}, using defaults")
            return ProjectConfig(root=self.root)

        data = self._read()
        return self._parse(data)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                ErrorMessages.INVALID_CONFIG.format(path=self.path, reason=e)
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                ErrorMessages.INVALID_CONFIG.format(
                    path=self.path, reason="top level must be a mapping"
                )
            )
        return data

    def _parse(self, data: dict[str, Any]) -> ProjectConfig:
        data = {**data, "root": self.root}
        try:
            return ProjectConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(
                ErrorMessages.INVALID_CONFIG.format(path=self.path, reason=e)
            ) from e


def load_config(root: Path | None = None) -> ProjectConfig:
    """Load atom.yaml from root, or the defaults when it is absent."""
    return ConfigLoader(root).load()
