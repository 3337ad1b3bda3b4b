"""Logging setup for the CLI.

Records go to stderr through Rich's ``RichHandler`` when Rich is
installed, otherwise through a plain stream handler.  The level is read
from the ``IMMORTAL_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

LOG_LEVEL_ENV: str = "IMMORTAL_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "WARNING"


def resolve_level(environ: Mapping[str, str] | None = None) -> int:
    """Map ``IMMORTAL_LOG_LEVEL`` to a :mod:`logging` level.

    Unknown names fall back to :data:`DEFAULT_LOG_LEVEL`.
    """
    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s - %(message)s"),
        )
        return handler

    from immortal_cli.cli.console import get_rich_console

    return RichHandler(console=get_rich_console(), show_path=False)


def configure_logging(environ: Mapping[str, str] | None = None) -> None:
    """Attach a stderr handler to the ``immortal_cli`` logger (idempotent)."""
    root = logging.getLogger("immortal_cli")
    root.setLevel(resolve_level(environ))
    if not root.handlers:
        root.addHandler(_build_handler())
