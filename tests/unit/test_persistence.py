# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Tests for the YAML persistence layer."""

from __future__ import annotations

from enum import Enum
from unittest.mock import MagicMock, patch

import pytest

from localcfg.errors import DecodeError, StoreIOError, UnsupportedValueError
from localcfg.store.persistence import ConfigFile, decode_mapping, encode_mapping


def test_encode_sorted_yaml():
    """Mappings are written as block YAML with sorted keys."""
    raw = encode_mapping({"b": 1.0, "a": "x", "c": True})
    assert raw == b"a: x\nb: 1.0\nc: true\n"


def test_encode_quotes_ambiguous_text():
    """Text that looks like another type keeps its type on reload."""
    data = {"flag": "true", "num": "42", "empty": ""}
    assert decode_mapping(encode_mapping(data)) == data


def test_encode_unrepresentable_raises_unsupported_value():
    """Serializer failures surface as UnsupportedValueError."""

    class Color(str, Enum):
        RED = "red"

    with pytest.raises(UnsupportedValueError, match="cannot be serialized"):
        encode_mapping({"color": Color.RED})


def test_decode_normalizes_integers():
    """Integers written by hand are read back as numbers."""
    assert decode_mapping(b"retries: 3\n") == {"retries": 3.0}


@pytest.mark.parametrize(
    "raw",
    [
        b"\xff\xfe\x00",
        b"key: [unterminated",
        b"- a\n- b\n",
        b"# only a comment\n",
        b"1: one\n",
        b"key: null\n",
    ],
)
def test_decode_rejects_malformed(raw):
    """Anything but a mapping of text to scalar values is a DecodeError."""
    with pytest.raises(DecodeError):
        decode_mapping(raw)


class TestConfigFile:
    """File handle operations."""

    def test_open_empty_then_flush_and_reload(self, config_path):
        """A flushed mapping is what reload returns."""
        config_file, data = ConfigFile.open(config_path)
        try:
            assert data == {}
            config_file.flush({"a": "b"})
            assert config_path.read_bytes() == b"a: b\n"
            assert config_file.reload() == {"a": "b"}
        finally:
            config_file.close()

    def test_flush_rewrites_whole_file(self, config_path):
        """A shorter mapping leaves no trailing bytes from the previous one."""
        config_file, _ = ConfigFile.open(config_path)
        try:
            config_file.flush({"long_key_name": "a fairly long value"})
            config_file.flush({"k": "v"})
            assert config_path.read_bytes() == b"k: v\n"
        finally:
            config_file.close()

    def test_flush_empty_mapping(self, config_path):
        """An empty mapping is written as an explicit empty YAML mapping."""
        config_file, _ = ConfigFile.open(config_path)
        try:
            config_file.flush({})
            assert config_path.read_bytes() == b"{}\n"
            assert config_file.reload() == {}
        finally:
            config_file.close()

    def test_flush_syncs_to_disk(self, config_path):
        """Every flush ends with an fsync of the file descriptor."""
        config_file, _ = ConfigFile.open(config_path)
        try:
            with patch("localcfg.store.persistence.os.fsync") as mock_fsync:
                config_file.flush({"a": 1.0})
            mock_fsync.assert_called_once()
        finally:
            config_file.close()

    def test_truncate_failure_names_operation(self, config_path):
        """I/O failures are wrapped with the failing operation."""
        handle = MagicMock()
        handle.truncate.side_effect = OSError("read-only")
        config_file = ConfigFile(config_path, handle)

        with pytest.raises(StoreIOError) as excinfo:
            config_file.flush({"a": 1.0})

        assert excinfo.value.operation == "truncate"
        assert "read-only" in str(excinfo.value)
        handle.write.assert_not_called()

    def test_encode_failure_leaves_file_untouched(self, config_path):
        """Nothing is truncated when the mapping cannot be serialized."""
        config_file, _ = ConfigFile.open(config_path)
        try:
            config_file.flush({"keep": "me"})
            with pytest.raises(UnsupportedValueError):
                config_file.flush({"keep": "me", "bad": object()})
            assert config_path.read_bytes() == b"keep: me\n"
            assert config_file.reload() == {"keep": "me"}
        finally:
            config_file.close()

    def test_write_failure_names_operation(self, config_path):
        """A failed write is reported after the file was truncated."""
        handle = MagicMock()
        handle.write.side_effect = OSError("no space left on device")
        config_file = ConfigFile(config_path, handle)

        with pytest.raises(StoreIOError, match="unable to write") as excinfo:
            config_file.flush({"a": 1.0})

        assert excinfo.value.operation == "write"
        handle.truncate.assert_called_once_with(0)
        handle.flush.assert_not_called()

    def test_open_decode_error(self, write_config):
        """Malformed existing content fails the open."""
        path = write_config("not: [valid")
        with pytest.raises(DecodeError):
            ConfigFile.open(path)
