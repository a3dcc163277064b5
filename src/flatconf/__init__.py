"""
flatconf: in-memory key=value configuration store.

Load a flat ``key=value`` text file into a case-insensitive store and read it
back as strings, ints, bools or split arrays.
"""

from .errors import ErrorKind, Lookup, StoreError
from .store import ConfigStore
from .synchronized import SynchronizedConfigStore
from .validators import is_entry_line, prefix_comment_validator, strict_key_validator

__version__ = "0.1.0"

__all__ = [
    "ConfigStore",
    "SynchronizedConfigStore",
    "ErrorKind",
    "Lookup",
    "StoreError",
    "is_entry_line",
    "prefix_comment_validator",
    "strict_key_validator",
]
