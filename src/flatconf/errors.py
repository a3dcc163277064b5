"""
Error kinds and result types for the configuration store.

Store operations never raise. They hand back a ``StoreError`` (or ``None``)
so callers can branch on ``error.kind``, or re-raise it when they prefer.
"""

from enum import Enum
from pathlib import Path
from typing import Any, NamedTuple, Optional, Union


class ErrorKind(Enum):
    """Kinds of failure a store operation can report."""

    NIL_STORE = "nil_store"
    FILE_OPEN = "file_open"
    DUPLICATE_KEY = "duplicate_key"
    KEY_NOT_FOUND = "key_not_found"


_MESSAGES = {
    ErrorKind.NIL_STORE: "configuration store is disposed",
    ErrorKind.FILE_OPEN: "can't open configuration file",
    ErrorKind.DUPLICATE_KEY: "store already contains that key",
    ErrorKind.KEY_NOT_FOUND: "key not found in configuration store",
}


class StoreError(Exception):
    """Failure reported by a store operation."""

    def __init__(
        self,
        kind: ErrorKind,
        key: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
        detail: Optional[str] = None,
    ):
        """
        Initialize store error.

        Args:
            kind: What went wrong
            key: Lowercased key involved, if any
            path: File involved, if any
            detail: Extra text, e.g. the underlying OS error
        """
        self.kind = kind
        self.key = key
        self.path = path
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"error: {_MESSAGES[self.kind]}"
        if self.key is not None:
            message += f" (key={self.key!r})"
        if self.path is not None:
            message += f" (path={str(self.path)!r})"
        if self.detail:
            message += f": {self.detail}"
        return message


class Lookup(NamedTuple):
    """Value paired with the error (if any) from a store query."""

    value: Any
    error: Optional[StoreError]

    @property
    def ok(self) -> bool:
        """True when the query succeeded."""
        return self.error is None


def nil_store() -> StoreError:
    return StoreError(ErrorKind.NIL_STORE)


def key_not_found(key: str) -> StoreError:
    return StoreError(ErrorKind.KEY_NOT_FOUND, key=key)


def duplicate_key(key: str, path: Optional[Union[str, Path]] = None) -> StoreError:
    return StoreError(ErrorKind.DUPLICATE_KEY, key=key, path=path)


def file_open(path: Union[str, Path], detail: Optional[str] = None) -> StoreError:
    return StoreError(ErrorKind.FILE_OPEN, path=path, detail=detail)
