"""immortal-cli — command-line front-end of the immortal process supervisor.

Parses invocation flags and validates their preconditions before
anything is handed to the supervisor runtime.
"""

from immortal_cli.version import __version__

__all__: list[str] = ["__version__"]
