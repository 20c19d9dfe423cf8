# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Persistent key/value store for localcfg."""

from __future__ import annotations

from localcfg.store.normalize import Value, ValueKind, kind_of, normalize
from localcfg.store.paths import resolve_config_path
from localcfg.store.store import Store, open_store  # re-export

__all__ = [
    "Store",
    "Value",
    "ValueKind",
    "kind_of",
    "normalize",
    "open_store",
    "resolve_config_path",
]
