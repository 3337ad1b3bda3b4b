"""Summary of a validated invocation.

Shown when ``immortal`` runs without a supervisor runtime attached: the
flags that were given and the command that would be supervised.  Renders
a Rich table, or plain text when Rich is not installed.
"""

from __future__ import annotations

import shlex
import sys

from immortal_cli.cli.console import console
from immortal_cli.core.models import Invocation
from immortal_cli.core.schema import FLAGS

_OPTION_BY_FIELD: dict[str, str] = {flag.field: flag.option_strings[0] for flag in FLAGS}


def summary_rows(invocation: Invocation) -> list[tuple[str, str]]:
    """Return ``(option, value)`` rows for the given flags and the command."""
    rows: list[tuple[str, str]] = []
    for field, value in invocation.record.given().items():
        option = _OPTION_BY_FIELD.get(field, field)
        rows.append((option, "on" if value is True else str(value)))
    if invocation.has_command:
        rows.append(("command", shlex.join(invocation.command)))
    elif invocation.record.configfile:
        rows.append(("command", f"(from {invocation.record.configfile})"))
    return rows


def _print_plain_summary(rows: list[tuple[str, str]]) -> None:
    print("\nimmortal invocation", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for option, value in rows:
        print(f"{option:<12} {value}", file=sys.stderr)
    print(file=sys.stderr)


def render_summary(invocation: Invocation) -> None:
    """Print the summary table for *invocation* to stderr."""
    rows = summary_rows(invocation)

    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        return

    table = Table(
        title="immortal invocation",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Flag", style="bold", min_width=10)
    table.add_column("Value", min_width=20)
    for option, value in rows:
        table.add_row(option, Text(value))

    console.print()
    console.print(table, markup=False)
    console.print("[dim]No supervisor runtime attached; nothing was started.[/dim]")
