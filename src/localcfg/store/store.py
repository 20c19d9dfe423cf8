# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Thread-safe, write-through key/value config store."""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

from localcfg.errors import AlreadyClosedError, UnsupportedValueError
from localcfg.logging import logger
from localcfg.store.normalize import Value, ValueKind, kind_of, normalize
from localcfg.store.persistence import ConfigFile
from localcfg.store.rwlock import ReadWriteLock

if TYPE_CHECKING:
    from types import TracebackType

_MISSING = object()


class Store:
    """
    Persistent mapping of text keys to text, number or boolean values.

    Every :meth:`set` is flushed to disk before it returns. Reads are served
    from memory under a shared lock; writes, reloads and close hold the lock
    exclusively for the duration of their disk I/O.

    The file handle is owned exclusively by this instance. No inter-process
    locking is done: two stores opened on the same path will overwrite each
    other's data.

    Args:
        path (str | Path): Config file to open or create

    Raises:
        StoreIOError: If the file cannot be opened or read
        DecodeError: If the existing file content is malformed
    """

    def __init__(self, path: str | Path) -> None:
        self._lock = ReadWriteLock()
        self._file: ConfigFile | None
        self._file, self._data = ConfigFile.open(path)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Path of the backing config file."""
        return self._path

    @property
    def closed(self) -> bool:
        """True once :meth:`close` has released the file handle."""
        with self._lock.read_locked():
            return self._file is None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._data

    def __enter__(self) -> Store:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.closed:
            self.close()

    def get_text(self, key: str) -> tuple[str, bool]:
        """Return ``(value, True)`` if ``key`` holds text, else ``("", False)``."""
        value = self._lookup(key, ValueKind.TEXT)
        if value is None:
            return "", False
        return value, True

    def get_number(self, key: str) -> tuple[float, bool]:
        """Return ``(value, True)`` if ``key`` holds a number, else ``(0.0, False)``."""
        value = self._lookup(key, ValueKind.NUMBER)
        if value is None:
            return 0.0, False
        return value, True

    def get_int(self, key: str) -> tuple[int, bool]:
        """Like :meth:`get_number`, truncating toward zero; NaN and infinities are not found."""
        value, found = self.get_number(key)
        if not found or not math.isfinite(value):
            return 0, False
        return int(value), True

    def get_bool(self, key: str) -> tuple[bool, bool]:
        """Return ``(value, True)`` if ``key`` holds a boolean, else ``(False, False)``."""
        value = self._lookup(key, ValueKind.BOOLEAN)
        if value is None:
            return False, False
        return value, True

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and flush the mapping to disk.

        Args:
            key (str): Key to insert or overwrite
            value (Any): Text, boolean or any real number; numbers are
                stored as ``float``

        Raises:
            AlreadyClosedError: If the store has been closed
            UnsupportedValueError: If the key is not text or the value has an
                unsupported type; the mapping is left unchanged
            StoreIOError: If the flush fails; the new value stays in memory
                and the file may not match it until a later flush succeeds
        """
        with self._lock.write_locked():
            config_file = self._require_open()
            if not isinstance(key, str):
                msg = f"config keys must be text, got {type(key).__name__}"
                raise UnsupportedValueError(msg)
            # str.__str__ gives the plain text of str subclasses such as str enums
            key = str.__str__(key)
            normalized = normalize(value)

            previous = self._data.get(key, _MISSING)
            self._data[key] = normalized
            try:
                config_file.flush(self._data)
            except UnsupportedValueError:
                # Nothing was written; undo so memory matches the file again
                if previous is _MISSING:
                    del self._data[key]
                else:
                    self._data[key] = previous
                raise

    def get_all(self) -> dict[str, Value]:
        """Reload the mapping from disk and return a copy of it.

        The on-disk content replaces the in-memory mapping. If it cannot be
        decoded the in-memory mapping is kept as it was.

        Raises:
            AlreadyClosedError: If the store has been closed
            StoreIOError: If the file cannot be read
            DecodeError: If the file content is malformed
        """
        with self._lock.write_locked():
            config_file = self._require_open()
            self._data = config_file.reload()
            logger.debug("Reloaded %d keys from %s", len(self._data), self._path)
            return dict(self._data)

    def close(self) -> None:
        """Flush the mapping a final time and release the file handle.

        Raises:
            AlreadyClosedError: If the store was already closed; no I/O is done
            StoreIOError: If the final flush fails the store stays open and
                close can be retried. If closing the handle fails the store
                is marked closed anyway.
        """
        with self._lock.write_locked():
            config_file = self._require_open()
            config_file.flush(self._data)
            try:
                config_file.close()
            finally:
                self._file = None
            logger.debug("Closed config file %s", self._path)

    def _require_open(self) -> ConfigFile:
        if self._file is None:
            msg = f"config file {self._path} already closed"
            raise AlreadyClosedError(msg)
        return self._file

    def _lookup(self, key: str, kind: ValueKind) -> Any:
        with self._lock.read_locked():
            value = self._data.get(key)
        if value is None or kind_of(value) is not kind:
            return None
        return value


def open_store(path: str | Path) -> Store:
    """Open (creating if needed) the config store at ``path``."""
    store = Store(path)
    logger.debug("Config store ready at %s", store.path)
    return store
