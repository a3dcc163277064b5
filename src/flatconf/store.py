"""
In-memory key=value configuration store.

Loads a line-oriented text file into a case-insensitive mapping and exposes
typed getters and CRUD operations. Every operation returns its error instead
of raising, so a failed load still leaves a usable (possibly partial) store.

The store does no locking. Sharing one instance between threads without
external synchronisation is undefined; see ``flatconf.synchronized`` for an
opt-in wrapper.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union
from loguru import logger

from .config import SettingsManager, settings as default_settings
from .errors import (
    Lookup,
    StoreError,
    duplicate_key,
    file_open,
    key_not_found,
    nil_store,
)
from .utils.helpers import Timer, safe_int, split_values
from .validators import KEY_VALUE_SEPARATOR, LineValidator, is_entry_line

PathLike = Union[str, Path]

TRUE_VALUES = ("true", "1")


class ConfigStore:
    """Case-insensitive key=value store populated from a text file."""

    def __init__(
        self,
        path: PathLike,
        validator: Optional[LineValidator] = None,
        settings: Optional[SettingsManager] = None,
    ):
        """
        Initialize the store and perform the initial load.

        The outcome of the load is kept in ``load_error``.

        Args:
            path: File to load entries from
            validator: Line predicate replacing the default entry rule
            settings: Package settings; the global instance if None
        """
        self._values: Optional[Dict[str, str]] = {}
        self._validator = validator
        self._settings = settings if settings is not None else default_settings
        self.source_path: Optional[Path] = Path(path)
        self.load_error = self.load_from_path(path)

    @classmethod
    def create(
        cls,
        path: PathLike,
        validator: Optional[LineValidator] = None,
        settings: Optional[SettingsManager] = None,
    ) -> Tuple["ConfigStore", Optional[StoreError]]:
        """Build a store and return it together with its load error."""
        store = cls(path, validator=validator, settings=settings)
        return store, store.load_error

    def __repr__(self) -> str:
        if self._values is None:
            return "<ConfigStore disposed>"
        return f"<ConfigStore path={str(self.source_path)!r} entries={len(self._values)}>"

    def __len__(self) -> int:
        """Number of entries; 0 once disposed."""
        return len(self._values) if self._values is not None else 0

    @property
    def disposed(self) -> bool:
        return self._values is None

    def _is_entry(self, line: str) -> bool:
        if self._validator is not None:
            return self._validator(line)
        return is_entry_line(line)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_from_path(self, path: PathLike) -> Optional[StoreError]:
        """
        Parse ``path`` and add its entries to the store.

        Existing entries are kept. A key already present (from this file or
        earlier) stops the load with DUPLICATE_KEY; entries read before it
        stay in the store.

        Lines end at LF only. A CR right before the LF is dropped; a lone
        CR anywhere else stays part of the line.

        Args:
            path: File to read

        Returns:
            None on success, otherwise the error
        """
        if self._values is None:
            return nil_store()

        path = Path(path)
        self.source_path = path
        loaded = 0

        with Timer(f"Loading {path}") as timer:
            try:
                with open(
                    path, "r", encoding=self._settings.encoding, newline="\n"
                ) as f:
                    for line in f:
                        if line.endswith("\n"):
                            line = line[:-1]
                        if line.endswith("\r"):
                            line = line[:-1]
                        if not self._is_entry(line):
                            continue

                        parts = line.split(KEY_VALUE_SEPARATOR)
                        key = parts[0].lower()
                        if key in self._values:
                            logger.warning(f"Duplicate key '{key}' in {path}")
                            return duplicate_key(key, path)

                        self._values[key] = KEY_VALUE_SEPARATOR.join(parts[1:])
                        loaded += 1
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Can't read configuration file {path}: {e}")
                return file_open(path, str(e))

        logger.info(
            f"Loaded {loaded} entries from {path} in {timer.duration_ms:.1f} ms"
        )
        return None

    def reload(self) -> Optional[StoreError]:
        """Clear all entries and load the source file again."""
        if self._values is None:
            return nil_store()
        self.clear()
        return self.load_from_path(self.source_path)

    def change_path_and_reload(self, new_path: PathLike) -> Optional[StoreError]:
        """Point the store at ``new_path`` and reload from it."""
        if self._values is None:
            return nil_store()
        logger.debug(f"Changing source from {self.source_path} to {new_path}")
        self.source_path = Path(new_path)
        return self.reload()

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------

    def get_as_string(self, key: str, default: str = "") -> Lookup:
        """Stored value for ``key``, or ``default`` with KEY_NOT_FOUND."""
        if self._values is None:
            return Lookup("", nil_store())

        key = key.lower()
        if key not in self._values:
            return Lookup(default, key_not_found(key))
        return Lookup(self._values[key], None)

    def get_as_string_array(
        self, key: str, default: str = "", sep: Optional[str] = None
    ) -> Lookup:
        """
        Stored value split by ``sep``.

        Args:
            key: Entry key (any case)
            default: String split and returned when the key is missing
            sep: Separator; the configured array separator if None

        Returns:
            Lookup of a list of strings
        """
        if self._values is None:
            return Lookup([], nil_store())

        if sep is None:
            sep = self._settings.array_separator
        raw, error = self.get_as_string(key, default)
        return Lookup(split_values(raw, sep), error)

    def get_as_int(self, key: str, default: int = 0) -> Lookup:
        """Stored value as int. Unparseable values give 0, not an error."""
        if self._values is None:
            return Lookup(0, nil_store())

        key = key.lower()
        if key not in self._values:
            return Lookup(default, key_not_found(key))
        return Lookup(safe_int(self._values[key]), None)

    def get_as_int_array(
        self,
        key: str,
        default: Union[str, Sequence[int]] = "",
        sep: Optional[str] = None,
    ) -> Lookup:
        """
        Stored value split by ``sep`` with every part parsed as int.

        Parts that are not integers become 0.

        Args:
            key: Entry key (any case)
            default: Returned when the key is missing; a string is split and
                parsed like a stored value, a sequence is returned as a list
            sep: Separator; the configured array separator if None

        Returns:
            Lookup of a list of ints
        """
        if self._values is None:
            return Lookup([], nil_store())

        if sep is None:
            sep = self._settings.array_separator
        key = key.lower()
        if key not in self._values:
            if isinstance(default, str):
                values = self._parse_ints(default, sep)
            else:
                values = list(default)
            return Lookup(values, key_not_found(key))
        return Lookup(self._parse_ints(self._values[key], sep), None)

    @staticmethod
    def _parse_ints(raw: str, sep: str) -> List[int]:
        return [safe_int(part) for part in split_values(raw, sep)]

    def get_as_bool(self, key: str, default: bool = False) -> Lookup:
        """True iff the stored value is exactly "true" or "1"."""
        if self._values is None:
            return Lookup(False, nil_store())

        key = key.lower()
        if key not in self._values:
            return Lookup(default, key_not_found(key))
        return Lookup(self._values[key] in TRUE_VALUES, None)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_new(self, key: str, value: str) -> Optional[StoreError]:
        """Insert an entry, failing with DUPLICATE_KEY if it already exists."""
        if self._values is None:
            return nil_store()

        key = key.lower()
        if key in self._values:
            return duplicate_key(key)
        self._values[key] = value
        return None

    def update(self, key: str, value: str) -> Optional[StoreError]:
        """Insert or overwrite an entry."""
        if self._values is None:
            return nil_store()

        self._values[key.lower()] = value
        return None

    def delete(self, key: str) -> Optional[StoreError]:
        """Remove an entry, failing with KEY_NOT_FOUND if it is absent."""
        if self._values is None:
            return nil_store()

        key = key.lower()
        if key not in self._values:
            return key_not_found(key)
        del self._values[key]
        return None

    def clear(self) -> Optional[StoreError]:
        """Remove every entry."""
        if self._values is None:
            return nil_store()

        self._values.clear()
        return None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def contains(self, key: str) -> Lookup:
        if self._values is None:
            return Lookup(False, nil_store())
        return Lookup(key.lower() in self._values, None)

    def length(self) -> Lookup:
        if self._values is None:
            return Lookup(0, nil_store())
        return Lookup(len(self._values), None)

    def snapshot(self) -> Lookup:
        """Copy of the current entries; changing it leaves the store alone."""
        if self._values is None:
            return Lookup({}, nil_store())
        return Lookup(dict(self._values), None)

    def dispose(self) -> None:
        """Release entries, validator and path. The store can't be reused."""
        if self._values is None:
            return
        logger.debug(f"Disposing store for {self.source_path}")
        self._values = None
        self._validator = None
        self.source_path = None
