"""
Opt-in thread-safe wrapper around ConfigStore.

Every call takes the same re-entrant lock, so one reload never interleaves
with reads or writes from other threads. Results and errors are exactly the
wrapped store's.
"""

import threading
from typing import Optional, Sequence, Union

from .errors import Lookup, StoreError
from .store import ConfigStore, PathLike


class SynchronizedConfigStore:
    """Serialises access to a single ConfigStore."""

    def __init__(self, store: ConfigStore):
        self._store = store
        self._lock = threading.RLock()

    @classmethod
    def create(cls, path: PathLike, validator=None, settings=None):
        store, error = ConfigStore.create(path, validator=validator, settings=settings)
        return cls(store), error

    @property
    def store(self) -> ConfigStore:
        """The wrapped store. Using it directly bypasses the lock."""
        return self._store

    def __repr__(self) -> str:
        return f"<SynchronizedConfigStore {self._store!r}>"

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def load_from_path(self, path: PathLike) -> Optional[StoreError]:
        with self._lock:
            return self._store.load_from_path(path)

    def reload(self) -> Optional[StoreError]:
        with self._lock:
            return self._store.reload()

    def change_path_and_reload(self, new_path: PathLike) -> Optional[StoreError]:
        with self._lock:
            return self._store.change_path_and_reload(new_path)

    def get_as_string(self, key: str, default: str = "") -> Lookup:
        with self._lock:
            return self._store.get_as_string(key, default)

    def get_as_string_array(
        self, key: str, default: str = "", sep: Optional[str] = None
    ) -> Lookup:
        with self._lock:
            return self._store.get_as_string_array(key, default, sep)

    def get_as_int(self, key: str, default: int = 0) -> Lookup:
        with self._lock:
            return self._store.get_as_int(key, default)

    def get_as_int_array(
        self,
        key: str,
        default: Union[str, Sequence[int]] = "",
        sep: Optional[str] = None,
    ) -> Lookup:
        with self._lock:
            return self._store.get_as_int_array(key, default, sep)

    def get_as_bool(self, key: str, default: bool = False) -> Lookup:
        with self._lock:
            return self._store.get_as_bool(key, default)

    def add_new(self, key: str, value: str) -> Optional[StoreError]:
        with self._lock:
            return self._store.add_new(key, value)

    def update(self, key: str, value: str) -> Optional[StoreError]:
        with self._lock:
            return self._store.update(key, value)

    def delete(self, key: str) -> Optional[StoreError]:
        with self._lock:
            return self._store.delete(key)

    def clear(self) -> Optional[StoreError]:
        with self._lock:
            return self._store.clear()

    def contains(self, key: str) -> Lookup:
        with self._lock:
            return self._store.contains(key)

    def length(self) -> Lookup:
        with self._lock:
            return self._store.length()

    def snapshot(self) -> Lookup:
        with self._lock:
            return self._store.snapshot()

    def dispose(self) -> None:
        with self._lock:
            self._store.dispose()
