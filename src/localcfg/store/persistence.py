# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""YAML-backed persistence for the config store.

The whole mapping is stored as one YAML document. Every flush truncates the
file and rewrites it in place, then syncs it to stable storage. A crash
between the truncate and the end of the write can leave the file empty or
partially written.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any

import yaml

from localcfg.errors import DecodeError, StoreIOError, UnsupportedValueError
from localcfg.logging import logger
from localcfg.store.normalize import Value, normalize

FILE_MODE = 0o644


def encode_mapping(data: dict[str, Value]) -> bytes:
    """Serialize a mapping to the on-disk representation.

    Raises:
        UnsupportedValueError: If YAML cannot represent a key or value
    """
    try:
        text = yaml.safe_dump(
            data, sort_keys=True, allow_unicode=True, default_flow_style=False
        )
    except yaml.YAMLError as e:
        msg = f"config mapping cannot be serialized: {e}"
        raise UnsupportedValueError(msg) from e
    return text.encode("utf-8")


def decode_mapping(raw: bytes) -> dict[str, Value]:
    """Deserialize non-empty file content into a mapping.

    Args:
        raw (bytes): Full file content

    Returns:
        dict[str, Value]: Decoded mapping with normalized values

    Raises:
        DecodeError: If the content is not a YAML mapping of text keys to
            text, number or boolean values
    """
    try:
        loaded = yaml.safe_load(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        msg = f"config file is not valid UTF-8: {e}"
        raise DecodeError(msg) from e
    except yaml.YAMLError as e:
        msg = f"config file is not valid YAML: {e}"
        raise DecodeError(msg) from e

    if not isinstance(loaded, dict):
        msg = f"config file does not contain a mapping (got {type(loaded).__name__})"
        raise DecodeError(msg)

    data: dict[str, Value] = {}
    for key, value in loaded.items():
        if not isinstance(key, str):
            msg = f"config key {key!r} is not text"
            raise DecodeError(msg)
        try:
            data[key] = normalize(value)
        except UnsupportedValueError as e:
            msg = f"config key {key!r} has an unsupported value: {e}"
            raise DecodeError(msg) from e
    return data


class ConfigFile:
    """
    Exclusive read/write handle on a config file.

    Use :meth:`open` to construct; it loads the current content as part of
    opening so callers never see a handle without its data.

    Args:
        path (Path): Path of the config file
        handle (IO[bytes]): Open binary read/write file object
    """

    def __init__(self, path: Path, handle: IO[bytes]) -> None:
        self.path = path
        self._handle = handle

    @classmethod
    def open(cls, path: str | Path) -> tuple[ConfigFile, dict[str, Value]]:
        """Open or create ``path`` and load its mapping.

        Returns:
            tuple[ConfigFile, dict[str, Value]]: The handle and the decoded
            mapping (empty for a new or empty file)

        Raises:
            StoreIOError: If the file cannot be opened or read
            DecodeError: If existing content is malformed; the handle is
                closed before raising
        """
        path = Path(path)
        if not path.exists():
            logger.info("Creating config file %s", path)
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
        except OSError as e:
            raise StoreIOError("open", path) from e
        handle = os.fdopen(fd, "r+b")

        config_file = cls(path, handle)
        try:
            data = config_file.reload()
        except (StoreIOError, DecodeError):
            handle.close()
            raise
        logger.debug("Opened config file %s (%d keys)", path, len(data))
        return config_file, data

    def reload(self) -> dict[str, Value]:
        """Read and decode the full file content from the start.

        The handle is left positioned at the start of the file.
        """
        try:
            size = os.fstat(self._handle.fileno()).st_size
        except OSError as e:
            raise StoreIOError("stat", self.path) from e
        if size == 0:
            return {}

        try:
            self._handle.seek(0)
            raw = self._handle.read()
        except OSError as e:
            raise StoreIOError("read", self.path) from e

        data = decode_mapping(raw)
        self._seek_start()
        return data

    def flush(self, data: dict[str, Any]) -> None:
        """Rewrite the whole file with ``data`` and sync it to disk.

        The mapping is encoded before the file is truncated, so an encoding
        failure leaves the previous content in place.
        """
        payload = encode_mapping(data)
        self._run("truncate", self._handle.truncate, 0)
        self._seek_start()
        self._run("write", self._handle.write, payload)
        self._run("flush", self._handle.flush)
        self._run("sync", os.fsync, self._handle.fileno())
        logger.debug("Flushed %d keys to %s", len(data), self.path)

    def close(self) -> None:
        """Close the underlying handle."""
        self._run("close", self._handle.close)

    def _seek_start(self) -> None:
        self._run("seek", self._handle.seek, 0)

    def _run(self, operation: str, func: Any, *args: Any) -> Any:
        try:
            return func(*args)
        except OSError as e:
            logger.error("❌ Config file %s failed: %s", operation, e)
            raise StoreIOError(operation, self.path) from e
