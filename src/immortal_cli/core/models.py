"""Domain models for immortal-cli.

Both models are **frozen** dataclasses.  Once the orchestrator returns
an :class:`Invocation` it is the sole hand-off artifact to the supervisor
runtime and is never mutated again.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


# ---------------------------------------------------------------------------
# Parsed flags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationRecord:
    """Values bound from the command-line flags.

    Every field defaults to ``False`` or the empty string, meaning the
    flag was not given.
    """

    version: bool = False
    """``-v``: print version and exit, bypassing all other checks."""

    ctrl: bool = False
    """``-ctrl``: send a control command to a running instance."""

    configfile: str = ""
    """``-c``: path to a supervisor configuration file."""

    wrkdir: str = ""
    """``-d``: working directory for the supervised process."""

    envdir: str = ""
    """``-e``: directory holding environment-variable files."""

    follow_pid: str = ""
    """``-f``: pid file of an already running process to follow."""

    logfile: str = ""
    """``-l``: path of the log output file."""

    logger: str = ""
    """``-logger``: external log-processing pipe."""

    child_pid: str = ""
    """``-p``: where the child's pid is recorded."""

    parent_pid: str = ""
    """``-P``: where the supervisor's own pid is recorded."""

    user: str = ""
    """``-u``: account the child process runs as."""

    def given(self) -> dict[str, bool | str]:
        """Return only the fields that differ from their defaults."""
        result: dict[str, bool | str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value != f.default:
                result[f.name] = value
        return result


# ---------------------------------------------------------------------------
# Record + positional arguments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """A parsed invocation: the flag record plus the trailing command."""

    record: InvocationRecord
    command: tuple[str, ...] = ()
    """Positional tokens after the flags, verbatim and in order."""

    @property
    def has_command(self) -> bool:
        return len(self.command) > 0
