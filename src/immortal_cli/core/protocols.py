"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols; the concrete implementations
live in ``infra`` (system lookups) or outside this package altogether
(the supervisor runtime).
"""

from __future__ import annotations

from typing import Protocol

from immortal_cli.core.models import Invocation


class SystemProbe(Protocol):
    """Read-only lookups against the filesystem and the user database.

    Implementations must be pure predicates: no side effects and no
    exceptions for a missing path or unknown account.
    """

    def path_exists(self, path: str) -> bool:
        """Return ``True`` if *path* is a reachable file or directory."""
        ...  # pragma: no cover

    def path_is_directory(self, path: str) -> bool:
        """Return ``True`` only if *path* exists and is a directory."""
        ...  # pragma: no cover

    def user_exists(self, name: str) -> bool:
        """Return ``True`` if *name* resolves to a system account."""
        ...  # pragma: no cover


class SupervisorRuntime(Protocol):
    """Contract for the runtime that takes over a validated invocation.

    The runtime owns spawning, monitoring, the control socket and
    logging from this point on.
    """

    def run(self, invocation: Invocation) -> int:
        """Supervise *invocation* and return the process exit code."""
        ...  # pragma: no cover
