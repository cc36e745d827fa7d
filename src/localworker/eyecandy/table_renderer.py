# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Table renderer interface for localworker CLI UI."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def _format_value(value: Any) -> Text:
    if value is None:
        return Text("(unset)", style="dim")
    if isinstance(value, Sequence) and not isinstance(value, str):
        if not value:
            return Text("(none)", style="dim")
        return Text(" ".join(str(item) for item in value), style="white")
    return Text(str(value), style="white")


class TableRenderer:
    """
    Declarative interface to render tabular data.

    Args:
        console (Console | None): Rich console instance for output
            (optional, creates default if None)
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_list(self, headers: list[str], rows: list[dict[str, Any]]) -> None:
        """Render a list of rows given headers."""
        if not rows:
            self.console.print("[dim]No data to display[/dim]")
            return

        table = Table(show_header=True, header_style="bold blue", box=None)

        for header in headers:
            table.add_column(header, style="cyan", no_wrap=True)

        for row in rows:
            table.add_row(*[str(row.get(header, "")) for header in headers])

        self.console.print(table)

    def render_key_values(self, title: str, data: dict[str, Any]) -> None:
        """Render a key/value panel view."""
        table = Table(show_header=False, box=None, pad_edge=False)

        for key, value in data.items():
            table.add_row(Text(key, style="bold cyan"), _format_value(value))

        panel = Panel(
            table, title=f"[bold blue]{title}[/bold blue]", border_style="blue", padding=(1, 2)
        )

        self.console.print(panel)
