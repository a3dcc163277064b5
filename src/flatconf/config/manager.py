"""
Settings management module for flatconf.

This module handles loading and validating package settings from YAML files.
"""

import os
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from loguru import logger

SETTINGS_ENV_VAR = "FLATCONF_SETTINGS"


class SettingsManager:
    """Manages settings loading and validation."""

    def __init__(self, settings_path: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            settings_path: Path to settings file. If None, uses
                $FLATCONF_SETTINGS or the packaged settings.yml.
        """
        if settings_path is None:
            settings_path = os.environ.get(SETTINGS_ENV_VAR)
        if settings_path is None:
            # Default to src/flatconf/config/settings.yml
            self.settings_path = Path(__file__).parent / "settings.yml"
        else:
            self.settings_path = Path(settings_path)
        self._settings: Dict[str, Any] = {}
        self.load_settings()

    def load_settings(self) -> None:
        """Load settings from YAML file."""
        if not self.settings_path.exists():
            logger.warning(
                f"Settings file not found: {self.settings_path}. Using defaults."
            )
            self._settings = self._get_default_settings()
            return

        try:
            with open(self.settings_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.error(f"Failed to load settings from {self.settings_path}: {e}")
            logger.info("Using default settings")
            self._settings = self._get_default_settings()
            return

        if not isinstance(loaded, dict):
            logger.error(
                f"Settings in {self.settings_path} must be a mapping, got {type(loaded).__name__}"
            )
            self._settings = self._get_default_settings()
            return

        # Validate and merge with defaults
        try:
            self._settings = self._validate_settings(loaded)
        except ValueError as e:
            logger.error(f"Invalid settings in {self.settings_path}: {e}")
            logger.info("Using default settings")
            self._settings = self._get_default_settings()
            return
        logger.debug(f"Settings loaded from: {self.settings_path}")

    def _get_default_settings(self) -> Dict[str, Any]:
        """Get default settings."""
        return {
            "store": {"encoding": "utf-8", "array_separator": ","},
            "logging": {"verbose": False},
        }

    def _validate_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and merge settings with defaults."""
        merged = self._get_default_settings()

        # Deep merge
        for key, value in settings.items():
            if (
                key in merged
                and isinstance(merged[key], dict)
                and isinstance(value, dict)
            ):
                merged[key].update(value)
            else:
                merged[key] = value

        for section in ("store", "logging"):
            if not isinstance(merged[section], dict):
                raise ValueError(f"{section} must be a mapping")

        encoding = merged["store"]["encoding"]
        if not isinstance(encoding, str) or not encoding:
            raise ValueError("store.encoding must be a non-empty string")
        try:
            "".encode(encoding)
        except LookupError:
            raise ValueError(f"store.encoding is not a known codec: {encoding}")

        if not isinstance(merged["store"]["array_separator"], str):
            raise ValueError("store.array_separator must be a string")

        if not isinstance(merged["logging"]["verbose"], bool):
            raise ValueError("logging.verbose must be true or false")

        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get setting value by key (supports dot notation).

        Args:
            key: Setting key (e.g., 'store.encoding')
            default: Default value if key not found

        Returns:
            Setting value
        """
        keys = key.split(".")
        value = self._settings

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_all(self) -> Dict[str, Any]:
        """Get entire settings dictionary."""
        return {
            k: dict(v) if isinstance(v, dict) else v
            for k, v in self._settings.items()
        }

    def reload(self) -> None:
        """Reload settings from file."""
        self.load_settings()

    @property
    def encoding(self) -> str:
        return self.get("store.encoding", "utf-8")

    @property
    def array_separator(self) -> str:
        return self.get("store.array_separator", ",")


# Global settings instance
settings = SettingsManager()
