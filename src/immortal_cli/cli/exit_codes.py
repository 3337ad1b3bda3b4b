"""Process exit codes returned by ``immortal``.

Every exit path of the CLI uses one of these values.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Help shown, version printed, or the invocation was handed off."""

GENERAL_ERROR: int = 1
"""Malformed flags or a failed precondition.  The error was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
