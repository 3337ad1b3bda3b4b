"""Invocation validator — decides whether an invocation may proceed.

Runs the parser, then applies the precondition table in order and
stops at the first failure.  The filesystem and user-database lookups
go through a :class:`~immortal_cli.core.protocols.SystemProbe` injected
at construction time, keeping this module free of OS imports.

Decision order
--------------
1. help flag        → ``None`` (not an error)
2. malformed flags  → :class:`MalformedArgumentsError`
3. ``-v``           → the invocation, unvalidated
4. ``PRECONDITIONS`` in order (configfile, wrkdir, envdir, user)
5. command present, unless a config file supplies one
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from immortal_cli.core.models import Invocation
from immortal_cli.core.parser import parse
from immortal_cli.core.protocols import SystemProbe
from immortal_cli.exceptions import (
    ConfigFileNotFoundError,
    InvalidDirectoryError,
    InvocationError,
    MissingCommandError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Precondition table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Precondition:
    """A check applied to one record field when that field is non-empty."""

    field: str
    check: Callable[[SystemProbe, str], bool]
    error: Callable[..., InvocationError]
    """Called as ``error(value, field=field)`` when *check* fails."""

    def verify(self, probe: SystemProbe, value: str) -> None:
        if not value:
            return
        if not self.check(probe, value):
            raise self.error(value, field=self.field)
        logger.debug("precondition %s=%r passed", self.field, value)


PRECONDITIONS: tuple[Precondition, ...] = (
    Precondition(
        "configfile",
        lambda probe, value: probe.path_exists(value),
        ConfigFileNotFoundError,
    ),
    Precondition(
        "wrkdir",
        lambda probe, value: probe.path_is_directory(value),
        InvalidDirectoryError,
    ),
    Precondition(
        "envdir",
        lambda probe, value: probe.path_is_directory(value),
        InvalidDirectoryError,
    ),
    Precondition(
        "user",
        lambda probe, value: probe.user_exists(value),
        UserNotFoundError,
    ),
)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class InvocationValidator:
    """Stateless service that parses and validates one argument vector.

    Parameters
    ----------
    probe:
        Any object satisfying the :class:`SystemProbe` protocol.
    """

    def __init__(self, probe: SystemProbe) -> None:
        self._probe: SystemProbe = probe

    def parse_args(
        self,
        argv: Sequence[str],
        usage: Callable[[], None],
    ) -> Invocation | None:
        """Parse *argv* and validate the result.

        Returns
        -------
        Invocation | None
            The validated invocation, or ``None`` when help was requested.

        Raises
        ------
        MalformedArgumentsError
            If the flags could not be parsed.
        InvocationError
            If a precondition failed; the subclass names the failure kind.
        """
        invocation = parse(argv, usage)
        if invocation is None:
            logger.debug("help requested")
            return None

        if invocation.record.version:
            logger.debug("version requested, skipping validation")
            return invocation

        self.validate(invocation)
        return invocation

    def validate(self, invocation: Invocation) -> None:
        """Apply every precondition to an already parsed *invocation*."""
        record = invocation.record
        for precondition in PRECONDITIONS:
            precondition.verify(self._probe, getattr(record, precondition.field))

        # a config file supplies what to supervise on its own
        if not record.configfile and not invocation.has_command:
            raise MissingCommandError()

        logger.debug(
            "invocation accepted: flags=%s command=%s",
            record.given(),
            list(invocation.command),
        )


def parse_args(
    argv: Sequence[str],
    usage: Callable[[], None],
    probe: SystemProbe,
) -> Invocation | None:
    """Convenience wrapper around :meth:`InvocationValidator.parse_args`."""
    return InvocationValidator(probe).parse_args(argv, usage)
