# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Canonicalization of values admitted into the config store.

The store holds exactly three kinds of values: text, numbers and booleans.
Every number is kept as a ``float`` regardless of the type it was supplied
as, so readers only ever see one numeric representation.
"""

from __future__ import annotations

import enum
import numbers
from typing import Any, Union

from localcfg.errors import UnsupportedValueError

Value = Union[str, float, bool]


class ValueKind(enum.Enum):
    """Tag of a stored value."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "bool"


def normalize(value: Any) -> Value:
    """Return the canonical stored form of ``value``.

    Args:
        value (Any): Value supplied by the caller

    Returns:
        Value: ``str`` and ``bool`` unchanged; any integral or real number
        converted to ``float``

    Raises:
        UnsupportedValueError: If the value is not text, boolean or a real
            number, or is an integer too large for a double
    """
    # bool is a subclass of int and must not become 1.0/0.0
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str(value)
    # numbers.Real covers int, float, Fraction and numpy integer/floating types
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError as e:
            msg = f"number out of range for storage: {value!r}"
            raise UnsupportedValueError(msg) from e
    msg = f"unsupported type: {type(value).__name__}"
    raise UnsupportedValueError(msg)


def kind_of(value: Value) -> ValueKind:
    """Classify an already-normalized value."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    msg = f"not a normalized value: {type(value).__name__}"
    raise UnsupportedValueError(msg)
