"""
Line validators deciding which lines of a file are key=value entries.

A validator is any callable taking the raw line and returning a bool. A store
given a custom validator uses it instead of ``is_entry_line``, never in
addition to it.
"""

import re
from typing import Callable, Iterable, Union

LineValidator = Callable[[str], bool]

COMMENT_PREFIX = "#"
KEY_VALUE_SEPARATOR = "="


def is_entry_line(line: str) -> bool:
    """Default rule: not a comment, not empty, contains '='."""
    return (
        not line.startswith(COMMENT_PREFIX)
        and line != ""
        and KEY_VALUE_SEPARATOR in line
    )


def prefix_comment_validator(prefixes: Iterable[str]) -> LineValidator:
    """
    Build a validator that treats any of ``prefixes`` as a comment marker.

    Args:
        prefixes: Comment prefixes, e.g. ("#", ";")

    Returns:
        Line validator
    """
    markers = tuple(p for p in prefixes if p)
    if not markers:
        raise ValueError("At least one non-empty comment prefix is required")

    def validator(line: str) -> bool:
        return (
            not line.startswith(markers)
            and line != ""
            and KEY_VALUE_SEPARATOR in line
        )

    return validator


def strict_key_validator(
    pattern: Union[str, "re.Pattern"] = r"[A-Za-z0-9_.\-]+",
) -> LineValidator:
    """
    Build a validator that also requires the key to match ``pattern``.

    Lines whose key does not fully match are skipped, same as comments.

    Args:
        pattern: Regex the key must fully match

    Returns:
        Line validator
    """
    key_pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validator(line: str) -> bool:
        if not is_entry_line(line):
            return False
        key = line.split(KEY_VALUE_SEPARATOR, 1)[0]
        return key_pattern.fullmatch(key) is not None

    return validator
