"""Allow ``python -m immortal_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m immortal_cli`` behaves identically to the ``immortal``
console script.
"""

from __future__ import annotations

from immortal_cli.cli.app import cli

if __name__ == "__main__":
    cli()
