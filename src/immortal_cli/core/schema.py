"""Flag schema — the options ``immortal`` recognizes.

Declares every flag once, with its spellings, the
:class:`~immortal_cli.core.models.InvocationRecord` field it binds to and
its help text, and builds the :mod:`argparse` parser from that table.
No validation happens here.

Flags follow the single-dash convention of the supervisor (``-ctrl``,
``-logger``); the double-dash spelling of every flag is accepted too.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import NoReturn

from immortal_cli.exceptions import HELP_HINT, MalformedArgumentsError

DEFAULT_PROG: str = "immortal"

USAGE: str = (
    "%(prog)s [-v -ctrl] [-c file] [-d dir] [-e dir] [-f pidfile] "
    "[-l logfile] [-logger logger] [-p child_pidfile] "
    "[-P supervisor_pidfile] [-u user] command"
)

HELP_OPTIONS: tuple[str, ...] = ("-h", "--h", "-help", "--help")
HELP_NAMES: frozenset[str] = frozenset({"h", "help"})


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Flag:
    """One recognized option."""

    name: str
    """Flag name without dashes (``"c"``, ``"logger"``)."""

    field: str
    """``InvocationRecord`` attribute the value is stored in."""

    help: str

    metavar: str | None = None
    """Placeholder for the value; ``None`` marks a boolean switch."""

    @property
    def is_switch(self) -> bool:
        return self.metavar is None

    @property
    def option_strings(self) -> tuple[str, str]:
        return f"-{self.name}", f"--{self.name}"


FLAGS: tuple[Flag, ...] = (
    Flag("v", "version", "Print version"),
    Flag("ctrl", "ctrl", "Create supervise and control directory"),
    Flag("c", "configfile", "Path to YAML configuration file", "file"),
    Flag("d", "wrkdir", "Change to dir before starting the command", "dir"),
    Flag("e", "envdir", "Set environment variables specified by files in the dir", "dir"),
    Flag("f", "follow_pid", "Follow PID in pidfile", "pidfile"),
    Flag("l", "logfile", "Write stdout/stderr to logfile", "logfile"),
    Flag("logger", "logger", "A command to pipe stdout/stderr to stdin", "logger"),
    Flag("p", "child_pid", "Path to write the child pid", "child_pidfile"),
    Flag("P", "parent_pid", "Path to write the supervisor pid", "supervisor_pidfile"),
    Flag("u", "user", "Execute command on behalf of user", "user"),
)


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------

_TRUE: frozenset[str] = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE: frozenset[str] = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def parse_bool(value: str) -> bool:
    """Convert the ``=value`` of a switch (``-v=false``).

    Raises
    ------
    ValueError
        If *value* is not one of the accepted spellings.
    """
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean value {value!r}")


class FlagParser(argparse.ArgumentParser):
    """Argument parser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise MalformedArgumentsError(message, hint=HELP_HINT)


# ---------------------------------------------------------------------------
# Parser construction
# ---------------------------------------------------------------------------

def build_parser(prog: str = DEFAULT_PROG) -> FlagParser:
    """Build the argument parser that documents :data:`FLAGS`.

    It renders the help text and binds canonical ``--name=value`` tokens.
    Raw argument vectors go through :func:`immortal_cli.core.parser.scan`
    instead, which keeps values such as ``--`` or ``-x`` verbatim.
    """
    parser = FlagParser(
        prog=prog,
        usage=USAGE,
        epilog="command  The command with arguments if any, to supervise",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(*HELP_OPTIONS, action="help", help="Show this help and exit")

    for flag in FLAGS:
        if flag.is_switch:
            parser.add_argument(
                *flag.option_strings,
                dest=flag.field,
                action="store_true",
                default=False,
                help=flag.help,
            )
        else:
            parser.add_argument(
                *flag.option_strings,
                dest=flag.field,
                default="",
                metavar=flag.metavar,
                help=flag.help,
            )
    return parser


def help_text(prog: str = DEFAULT_PROG) -> str:
    """Return the full help text for the flag table."""
    return build_parser(prog).format_help()
