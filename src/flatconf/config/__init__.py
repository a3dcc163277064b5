"""
Config package for package settings.

This package provides settings loading and validation functionality.
"""

from .manager import SettingsManager, settings

__all__ = ["SettingsManager", "settings"]
