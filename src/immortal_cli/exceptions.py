"""Custom exception hierarchy for immortal-cli.

Every user-visible failure of an invocation maps to a subclass of
:class:`ImmortalError` so the CLI error boundary can render a clean
message instead of a stack trace.  Help and version requests are not
errors and never raise.

Hierarchy
---------
ImmortalError
├── MalformedArgumentsError
├── EnvironmentError
└── InvocationError
    ├── ConfigFileNotFoundError
    ├── InvalidDirectoryError
    ├── UserNotFoundError
    └── MissingCommandError
"""

from __future__ import annotations

HELP_HINT: str = 'Use "immortal -h" for help.'


class ImmortalError(Exception):
    """Base exception for all immortal-cli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class MalformedArgumentsError(ImmortalError):
    """Raised for an unrecognized flag or a value-flag missing its value."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ImmortalError):
    """Raised when a required runtime dependency is not available."""


# --- Precondition failures -------------------------------------------------

class InvocationError(ImmortalError):
    """A parsed invocation failed one of its preconditions.

    Attributes
    ----------
    field : str
        Name of the :class:`~immortal_cli.core.models.InvocationRecord`
        field the failure refers to (``"command"`` for a missing command).
    value : str
        The offending path or account name, empty when not applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: str = "",
        hint: str | None = HELP_HINT,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field: str = field
        self.value: str = value


class ConfigFileNotFoundError(InvocationError):
    """Raised when the ``-c`` configuration file does not exist."""

    def __init__(self, path: str, *, field: str = "configfile") -> None:
        super().__init__(
            f"Cannot read file: {path!r}",
            field=field,
            value=path,
        )


class InvalidDirectoryError(InvocationError):
    """Raised when a path that must be a directory is missing or is not one."""

    def __init__(self, path: str, *, field: str) -> None:
        super().__init__(
            f"{path!r} is not a directory ({field})",
            field=field,
            value=path,
        )


class UserNotFoundError(InvocationError):
    """Raised when ``-u`` names an account the system does not know."""

    def __init__(self, name: str, *, field: str = "user") -> None:
        super().__init__(
            f"User {name!r} not found",
            field=field,
            value=name,
        )


class MissingCommandError(InvocationError):
    """Raised when neither a config file nor a command was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Missing command",
            field="command",
            hint=f"Pass a command to supervise or a config file with -c. {HELP_HINT}",
        )
