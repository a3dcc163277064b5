"""
Shared utilities for flatconf.

This module provides common utility functions used across the package.
"""

import re
import sys
import time
from typing import Any, List, Optional
from loguru import logger

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def safe_int(value: Any, default: int = 0) -> int:
    """
    Leniently convert a stored string to int.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and decimals are not.

    Args:
        value: Value to convert
        default: Value returned when conversion fails

    Returns:
        Parsed integer or default
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _INT_PATTERN.fullmatch(value):
        return default
    return int(value)


def split_values(value: str, sep: str) -> List[str]:
    """
    Split a value by separator.

    An empty separator splits into single characters instead of raising.

    Args:
        value: String to split
        sep: Separator

    Returns:
        List of parts (always at least one element for a separator)
    """
    if sep == "":
        return list(value)
    return value.split(sep)


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    # Remove default handler
    logger.remove()

    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )


class Timer:
    """Simple timer context manager for measuring execution time."""

    def __init__(self, name: str = "operation"):
        """
        Initialize timer.

        Args:
            name: Name of the operation being timed
        """
        self.name = name
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def __enter__(self):
        """Start timer."""
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer."""
        self.end_time = time.perf_counter()
        if self.start_time is not None:
            duration = self.end_time - self.start_time
            logger.debug(f"{self.name} took {duration:.3f} seconds")

    @property
    def duration_ms(self) -> float:
        """Get duration in milliseconds."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000
