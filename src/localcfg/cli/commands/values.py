# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Commands for reading and writing config values.

This module provides the get, set, list and path commands of the localcfg CLI.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import rich_click as click
from rich.console import Console

from localcfg.errors import StoreError
from localcfg.eyecandy.stepper import Step
from localcfg.eyecandy.table_renderer import TableRenderer, format_value
from localcfg.logging import logger
from localcfg.store.store import Store, open_store

if TYPE_CHECKING:
    from pathlib import Path

    from localcfg.store.normalize import Value

TRUE_WORDS = ("true", "yes", "on")
FALSE_WORDS = ("false", "no", "off")


def parse_value(raw: str, value_type: str) -> Value:
    """Parse a command-line value according to ``value_type``.

    Args:
        raw (str): Value as typed by the user
        value_type (str): One of ``auto``, ``text``, ``number`` or ``bool``

    Returns:
        Value: Parsed value

    Raises:
        click.BadParameter: If ``raw`` cannot be parsed as the requested type
    """
    if value_type == "text":
        return raw
    if value_type == "bool":
        lowered = raw.strip().lower()
        if lowered in TRUE_WORDS:
            return True
        if lowered in FALSE_WORDS:
            return False
        msg = f"not a boolean: {raw!r}"
        raise click.BadParameter(msg, param_hint="VALUE")
    if value_type == "number":
        try:
            return float(raw)
        except ValueError as e:
            msg = f"not a number: {raw!r}"
            raise click.BadParameter(msg, param_hint="VALUE") from e

    # auto: booleans and finite numeric literals, anything else is text
    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        number = float(raw)
    except ValueError:
        return raw
    return number if math.isfinite(number) else raw


def _config_path(ctx: click.Context) -> Path:
    path: Path = ctx.obj["config_path"]
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _open_or_exit(ctx: click.Context) -> Store:
    path = _config_path(ctx)
    try:
        return open_store(path)
    except StoreError as e:
        logger.error("❌ Unable to open config %s: %s", path, e)
        raise SystemExit(1) from e


def _close_or_exit(store: Store) -> None:
    try:
        store.close()
    except StoreError as e:
        logger.error("❌ Unable to close config %s: %s", store.path, e)
        raise SystemExit(1) from e


@click.command()
@click.argument("key")
@click.option(
    "--type",
    "-t",
    "value_type",
    type=click.Choice(["text", "number", "int", "bool"]),
    default=None,
    help="Only report the value if it has this type",
)
@click.pass_context
def get_cmd(ctx: click.Context, key: str, value_type: str | None) -> None:
    """Print the value stored under KEY."""
    store = _open_or_exit(ctx)
    try:
        value, found = _lookup(store, key, value_type)
    finally:
        _close_or_exit(store)

    if not found:
        logger.error("❌ Key not found: %s", key)
        raise SystemExit(1)
    click.echo(format_value(value))


def _lookup(store: Store, key: str, value_type: str | None) -> tuple[Value | int, bool]:
    """Look up ``key`` with the getter matching ``value_type`` (any type if None)."""
    getters = {
        "text": store.get_text,
        "number": store.get_number,
        "int": store.get_int,
        "bool": store.get_bool,
    }
    if value_type is not None:
        return getters[value_type](key)
    for getter in (store.get_text, store.get_number, store.get_bool):
        value, found = getter(key)
        if found:
            return value, True
    return "", False


@click.command()
@click.argument("key")
@click.argument("value")
@click.option(
    "--type",
    "-t",
    "value_type",
    type=click.Choice(["auto", "text", "number", "bool"]),
    default="auto",
    show_default=True,
    help="How to interpret VALUE",
)
@click.pass_context
def set_cmd(ctx: click.Context, key: str, value: str, value_type: str) -> None:
    """Store VALUE under KEY and write the config file."""
    parsed = parse_value(value, value_type)
    store = _open_or_exit(ctx)
    try:
        with Step(f"Saving {key}", console=Console()):
            store.set(key, parsed)
    except StoreError as e:
        raise SystemExit(1) from e
    finally:
        _close_or_exit(store)


@click.command()
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Show every key stored in the config file."""
    store = _open_or_exit(ctx)
    try:
        entries = store.get_all()
    except StoreError as e:
        logger.error("❌ Unable to read config %s: %s", store.path, e)
        raise SystemExit(1) from e
    finally:
        _close_or_exit(store)

    TableRenderer(Console()).render_entries(entries, title=str(store.path))


@click.command()
@click.pass_context
def path_cmd(ctx: click.Context) -> None:
    """Print the config file path in use."""
    click.echo(str(ctx.obj["config_path"]))
