"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``-h`` and ``-v`` keep working on a
host where it is missing.
"""

from __future__ import annotations

import sys
from typing import Any

from immortal_cli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def escape_markup(text: str) -> str:
    """Escape *text* so Rich prints square brackets literally.

    Without Rich nothing interprets markup, so *text* is returned as is.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        Pass ``markup=False`` for text containing square brackets that
        must not be read as Rich markup (usage lines, user paths).
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup, highlight=markup)


console = _ConsoleProxy()
