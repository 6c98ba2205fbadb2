"""YAML configuration loader."""

from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = "serialmonitor.yaml"


class YAMLConfigLoader:
    """Load monitor configuration from YAML files."""

    def __init__(self, config_path: Path | str = DEFAULT_CONFIG_PATH) -> None:
        self._config_path = Path(config_path)

    def load(self) -> dict[str, Any]:
        """Load raw configuration data from YAML.

        Returns:
            Configuration dictionary, empty dict if file not found.

        Raises:
            ValueError: If the file does not hold a mapping.
        """
        if not self._config_path.exists():
            return {}

        with open(self._config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {self._config_path}")
        return data

    @property
    def path(self) -> Path:
        """Get configuration file path."""
        return self._config_path
