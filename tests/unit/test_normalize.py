# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Tests for value normalization."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from localcfg.errors import UnsupportedValueError
from localcfg.store.normalize import ValueKind, kind_of, normalize


class TestNormalize:
    """Canonicalization of supported inputs."""

    @pytest.mark.parametrize("value", [0, 1, -7, 2**40, -(2**62)])
    def test_integers_become_float(self, value):
        """Integers of any size that fit a double become floats."""
        result = normalize(value)
        assert isinstance(result, float)
        assert result == float(value)

    def test_float_unchanged(self):
        """Floats stay floats."""
        assert normalize(1.5) == 1.5

    def test_fraction_becomes_float(self):
        """Rational numbers are converted as well."""
        assert normalize(Fraction(3, 4)) == 0.75

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_stays_bool(self, value):
        """Booleans are not turned into 1.0 / 0.0."""
        result = normalize(value)
        assert result is value

    def test_text_unchanged(self):
        """Text passes through."""
        assert normalize("hello") == "hello"

    def test_str_subclass_becomes_plain_str(self):
        """String subclasses are stored as plain str."""

        class Name(str):
            pass

        result = normalize(Name("demo"))
        assert type(result) is str
        assert result == "demo"

    @pytest.mark.parametrize(
        "value",
        [None, [1, 2], {"a": 1}, (1,), b"bytes", 1 + 2j, Decimal("1.5"), object()],
    )
    def test_unsupported_types_rejected(self, value):
        """Anything that is not text, boolean or a real number is rejected."""
        with pytest.raises(UnsupportedValueError, match="unsupported type"):
            normalize(value)

    def test_huge_integer_rejected(self):
        """Integers beyond double range cannot be stored."""
        with pytest.raises(UnsupportedValueError, match="out of range"):
            normalize(10**400)


class TestKindOf:
    """Classification of normalized values."""

    def test_kinds(self):
        """Each stored shape maps to its tag."""
        assert kind_of("x") is ValueKind.TEXT
        assert kind_of(1.0) is ValueKind.NUMBER
        assert kind_of(True) is ValueKind.BOOLEAN

    def test_unnormalized_value_rejected(self):
        """Raw integers are not a stored shape."""
        with pytest.raises(UnsupportedValueError):
            kind_of(1)
