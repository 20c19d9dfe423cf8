# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Exception types raised by the localcfg store and UI helpers."""

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base exception for config store errors."""


class StoreIOError(StoreError):
    """
    A file operation on the backing config file failed.

    Args:
        operation (str): Short description of the failing operation
            (e.g. ``"truncate"``, ``"sync"``)
        path (str | Path): Path of the config file
    """

    def __init__(self, operation: str, path: str | Path) -> None:
        self.operation = operation
        self.path = Path(path)
        super().__init__(f"unable to {operation} config file {self.path}")

    def __str__(self) -> str:
        msg = self.args[0]
        if self.__cause__ is not None:
            return f"{msg}: {self.__cause__}"
        return msg


class DecodeError(StoreError, ValueError):
    """The config file content is not a valid serialized mapping."""


class UnsupportedValueError(StoreError, TypeError):
    """A key or value passed to the store has an unsupported type."""


class AlreadyClosedError(StoreError):
    """The store has been closed and its file handle released."""


class AlreadyCompletedError(Exception):
    """A progress step was completed more than once."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"step {name!r} already completed")
