"""
Utils package for shared utilities.

This package provides common utility functions used across flatconf.
"""

from .helpers import Timer, safe_int, setup_logging, split_values

__all__ = ["Timer", "safe_int", "setup_logging", "split_values"]
