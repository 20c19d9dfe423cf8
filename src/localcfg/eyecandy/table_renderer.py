# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Table renderer for config store contents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from localcfg.store.normalize import ValueKind, kind_of

if TYPE_CHECKING:
    from localcfg.store.normalize import Value


def _style_kind(kind: ValueKind) -> str:
    if kind is ValueKind.BOOLEAN:
        return "magenta"
    if kind is ValueKind.NUMBER:
        return "green"
    return "white"


def format_value(value: Value | int) -> str:
    """Format a stored value for display."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class TableRenderer:
    """
    Render config entries as tables.

    Args:
        console (Console | None): Rich console instance for output
            (optional, creates default if None)
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_entries(self, entries: dict[str, Value], title: str | None = None) -> None:
        """Render key, type and value for every entry, sorted by key."""
        if not entries:
            self.console.print("[dim]No entries to display[/dim]")
            return

        table = Table(show_header=True, header_style="bold blue", box=None)
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Type", style="white")
        table.add_column("Value", style="white")

        for key in sorted(entries):
            value = entries[key]
            kind = kind_of(value)
            style = _style_kind(kind)
            table.add_row(
                Text(key, style="bold cyan"),
                Text(kind.value, style=style),
                Text(format_value(value), style=style),
            )

        if title:
            self.console.print(
                Panel(table, title=f"[bold blue]{title}[/bold blue]", border_style="blue")
            )
        else:
            self.console.print(table)
