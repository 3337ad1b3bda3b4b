"""Infrastructure: filesystem and user-database predicates.

The three checks used to validate an invocation.  Absence is a normal
outcome, reported as ``False``; none of these functions raise for a
missing path or an unknown account.

Rules
-----
* Read-only lookups — no file is created, opened or modified.
* No ``print()`` — callers decide how to report a failed check.
"""

from __future__ import annotations

import os
import pwd


def path_exists(path: str) -> bool:
    """Return ``True`` if *path* is a reachable file or directory.

    A broken symlink counts as missing.
    """
    if not path:
        return False
    return os.path.exists(path)


def path_is_directory(path: str) -> bool:
    """Return ``True`` only if *path* exists and is a directory.

    Regular files and device nodes (``/dev/null``) yield ``False``.
    """
    if not path:
        return False
    return os.path.isdir(path)


def user_exists(name: str) -> bool:
    """Return ``True`` if *name* resolves in the system account database.

    Names ``pwd`` refuses outright (an embedded NUL) count as unknown.
    """
    if not name:
        return False
    try:
        pwd.getpwnam(name)
    except (KeyError, ValueError):
        return False
    return True


class OsSystemProbe:
    """:class:`~immortal_cli.core.protocols.SystemProbe` backed by the host OS."""

    def path_exists(self, path: str) -> bool:
        return path_exists(path)

    def path_is_directory(self, path: str) -> bool:
        return path_is_directory(path)

    def user_exists(self, name: str) -> bool:
        return user_exists(name)
