"""Argument parser — drives the flag schema over an argument vector.

Splitting follows the supervisor's flag conventions:

* a flag is ``-name`` or ``--name``, optionally ``=value``; names must
  match exactly (``-vctrl`` and ``-uroot`` are unknown flags, not
  glued short options);
* a value flag without ``=value`` takes the next token verbatim, even
  when it starts with ``-``;
* ``--`` ends the flags and is dropped; the first token that is not a
  flag (including a lone ``-``) starts the command.

The argument vector is always passed in explicitly; nothing here reads
``sys.argv``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from immortal_cli.core.models import Invocation, InvocationRecord
from immortal_cli.core.schema import FLAGS, HELP_NAMES, Flag, parse_bool
from immortal_cli.exceptions import HELP_HINT, MalformedArgumentsError

_FLAGS_BY_NAME: dict[str, Flag] = {flag.name: flag for flag in FLAGS}


@dataclass(frozen=True, slots=True)
class FlagScan:
    """Result of splitting an argument vector into flags and command."""

    values: tuple[tuple[str, str | bool], ...]
    """``(field, value)`` pairs, last occurrence of each flag only."""

    command: tuple[str, ...]
    help_requested: bool = False
    problem: str | None = None
    """First malformed flag found, if any."""


def scan(argv: Sequence[str]) -> FlagScan:
    """Split *argv* into canonical option tokens and the trailing command.

    Scanning continues past a malformed flag so that a later help flag
    still wins; only the first problem is kept.
    """
    values: dict[str, str | bool] = {}
    problem: str | None = None
    help_requested = False

    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            index += 1
            break
        if len(token) < 2 or not token.startswith("-"):
            break
        index += 1

        body = token[2:] if token.startswith("--") else token[1:]
        name, sep, value = body.partition("=")
        if not name or name.startswith("-"):
            problem = problem or f"bad flag syntax: {token}"
            continue
        if name in HELP_NAMES:
            help_requested = True
            continue

        flag = _FLAGS_BY_NAME.get(name)
        if flag is None:
            problem = problem or f"flag provided but not defined: -{name}"
            continue

        if flag.is_switch:
            if not sep:
                values[flag.field] = True
                continue
            try:
                values[flag.field] = parse_bool(value)
            except ValueError:
                problem = problem or f"invalid boolean value {value!r} for -{name}"
            continue

        if not sep:
            if index >= len(argv):
                problem = problem or f"flag needs an argument: -{name}"
                continue
            value = argv[index]
            index += 1
        values[flag.field] = value

    return FlagScan(
        values=tuple(values.items()),
        command=tuple(argv[index:]),
        help_requested=help_requested,
        problem=problem,
    )


def parse(
    argv: Sequence[str],
    usage: Callable[[], None],
) -> Invocation | None:
    """Parse *argv* (without the program name) into an :class:`Invocation`.

    A flag given twice keeps its last value.

    Returns
    -------
    Invocation | None
        ``None`` when a help flag was given; *usage* has then been
        called exactly once.

    Raises
    ------
    MalformedArgumentsError
        For an unrecognized flag, bad flag syntax or a value-flag without
        its value.  *usage* is not called in that case.
    """
    result = scan(argv)
    if result.help_requested:
        usage()
        return None
    if result.problem is not None:
        raise MalformedArgumentsError(result.problem, hint=HELP_HINT)

    record = InvocationRecord(**dict(result.values))
    return Invocation(record=record, command=result.command)
