"""Infrastructure layer — lookups against the host operating system.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from immortal_cli.infra.system_probe import (
    OsSystemProbe,
    path_exists,
    path_is_directory,
    user_exists,
)

__all__: list[str] = [
    "OsSystemProbe",
    "path_exists",
    "path_is_directory",
    "user_exists",
]
