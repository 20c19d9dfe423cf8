"""Test configuration and global fixtures for localcfg tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import io
import logging

import pytest
from rich.console import Console

from localcfg.store.store import open_store


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own config and log level out of tests."""
    monkeypatch.delenv("LOCALCFG_CONFIG", raising=False)
    monkeypatch.delenv("LOCALCFG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging setup done by the CLI or logging tests."""
    root = logging.getLogger()
    package = logging.getLogger("localcfg")
    saved = (list(root.handlers), root.level, package.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.setLevel(saved[2])


@pytest.fixture
def config_path(tmp_path):
    """Path of a config file that does not exist yet."""
    return tmp_path / "config.yaml"


@pytest.fixture
def store(config_path):
    """An open store on a fresh file, closed after the test if still open."""
    s = open_store(config_path)
    yield s
    if not s.closed:
        s.close()


@pytest.fixture
def recording_console():
    """A non-terminal console that records everything printed to it."""
    return Console(file=io.StringIO(), force_terminal=False, record=True, width=120)


@pytest.fixture
def write_config(config_path):
    """Write raw bytes or text to the config path before opening it."""

    def _write(content):
        if isinstance(content, str):
            content = content.encode("utf-8")
        config_path.write_bytes(content)
        return config_path

    return _write
