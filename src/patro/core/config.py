"""
Configuration management with YAML and environment variable support.

Environment variables take precedence over YAML configuration.
Only presentation defaults live here; the calendar table itself is compiled in.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from patro.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATRO_"

# Default configuration paths
DEFAULT_CONFIG_PATHS = [
    Path("patro.yaml"),
    Path("patro.yml"),
    Path("config/patro.yaml"),
    Path.home() / ".patro" / "config.yaml",
]

DEFAULTS: dict[str, Any] = {
    "format": {
        "pattern": "YYYY-MM-DD",
        "month_display": "numeric",
        "day_display": "numeric",
    },
    "language": "en",
}


class Config:
    """
    YAML + environment variable integrated configuration management.

    Environment variables take precedence over YAML values.
    Supports nested key access with dot notation (e.g., "format.pattern").

    Usage:
        config = Config()
        pattern = config.date_format
        lang = config.get("language", default="en")
    """

    def __init__(self, config_path: Path | str | None = None, env_file: Path | str | None = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file. If None, searches default locations.
            env_file: Path to .env file. If None, searches current directory.
        """
        env_path = Path(env_file) if env_file else None
        load_dotenv(dotenv_path=env_path, override=False)

        self._config: dict[str, Any] = {}
        self._config_path: Path | None = None

        self._load_yaml(config_path)

        logger.debug("Configuration initialized from: %s", self._config_path or "defaults only")

    def _load_yaml(self, config_path: Path | str | None = None) -> None:
        """Load YAML configuration file."""
        if config_path:
            path = Path(config_path)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            self._config_path = path
        else:
            for default_path in DEFAULT_CONFIG_PATHS:
                if default_path.exists():
                    self._config_path = default_path
                    break

        if self._config_path:
            try:
                with self._config_path.open("r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Failed to read {self._config_path}: {e}") from e

            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigurationError(
                    f"Top level of {self._config_path} must be a mapping",
                    details={"type": type(loaded).__name__},
                )
            if loaded:
                self._config = loaded
            logger.info("Loaded configuration from: %s", self._config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Lookup order: environment variable, YAML file, built-in defaults,
        then ``default``.

        Environment variable mapping:
            "format.month_display" -> PATRO_FORMAT_MONTH_DISPLAY

        Args:
            key: Configuration key (dot notation supported)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        env_key = f"{ENV_PREFIX}{key.upper().replace('.', '_')}"
        env_value = os.getenv(env_key)

        if env_value is not None:
            value = self._parse_env_value(env_value)
            logger.debug("Config %s from env: %s", key, value)
            return value

        value = self._get_nested(self._config, key)
        if value is not None:
            logger.debug("Config %s from yaml: %s", key, value)
            return value

        value = self._get_nested(DEFAULTS, key)
        if value is not None:
            return value

        return default

    @staticmethod
    def _get_nested(source: dict[str, Any], key: str) -> Any:
        """Get nested value from a dict using dot notation."""
        value: Any = source

        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None
            if value is None:
                return None

        return value

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """Parse environment variable string to appropriate type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        return value

    @property
    def date_format(self) -> str:
        """Default layout for formatted dates."""
        return str(self.get("format.pattern"))

    @property
    def month_display(self) -> str:
        """Default month rendering (numeric, short, long)."""
        return str(self.get("format.month_display"))

    @property
    def day_display(self) -> str:
        """Default day rendering (numeric, short, long)."""
        return str(self.get("format.day_display"))

    @property
    def language(self) -> str:
        """Label language for month/day names: ``en`` or ``np``."""
        return str(self.get("language"))

    def __repr__(self) -> str:
        return f"Config(path={self._config_path})"
