# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Disk-backed, write-through key/value store for small configuration state."""

from localcfg.__about__ import __version__
from localcfg.errors import (
    AlreadyClosedError,
    AlreadyCompletedError,
    DecodeError,
    StoreError,
    StoreIOError,
    UnsupportedValueError,
)
from localcfg.store import Store, open_store

__all__ = [
    "AlreadyClosedError",
    "AlreadyCompletedError",
    "DecodeError",
    "Store",
    "StoreError",
    "StoreIOError",
    "UnsupportedValueError",
    "__version__",
    "open_store",
]
