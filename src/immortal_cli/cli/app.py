"""CLI application entry point for ``immortal``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~immortal_cli.exceptions.ImmortalError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message and returns a well-defined exit code.

Outcomes of :func:`main`
------------------------
* help flag          → usage on stderr, ``SUCCESS``
* ``-v``             → version on stdout, ``SUCCESS``
* failed validation  → the error propagates to :func:`cli`
* valid invocation   → handed to the supervisor runtime
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from immortal_cli.cli import exit_codes
from immortal_cli.cli.console import console, escape_markup
from immortal_cli.cli.log import configure_logging
from immortal_cli.core.orchestrator import InvocationValidator
from immortal_cli.core.protocols import SupervisorRuntime, SystemProbe
from immortal_cli.core.schema import DEFAULT_PROG, help_text
from immortal_cli.exceptions import ImmortalError
from immortal_cli.infra.system_probe import OsSystemProbe
from immortal_cli.version import __version__

logger = logging.getLogger(__name__)


def _print_usage() -> None:
    console.print(help_text(DEFAULT_PROG), markup=False)


def _print_version() -> None:
    print(f"{DEFAULT_PROG} {__version__}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    runtime: SupervisorRuntime | None = None,
    probe: SystemProbe | None = None,
) -> int:
    """Run the immortal CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    runtime:
        Supervisor runtime that takes over a validated invocation.  When
        ``None`` the validated invocation is only summarised.
    probe:
        Filesystem/user-database lookups; the host OS by default.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    validator = InvocationValidator(probe if probe is not None else OsSystemProbe())

    invocation = validator.parse_args(args, _print_usage)
    if invocation is None:
        return exit_codes.SUCCESS

    if invocation.record.version:
        _print_version()
        return exit_codes.SUCCESS

    if runtime is None:
        from immortal_cli.cli.summary import render_summary

        render_summary(invocation)
        return exit_codes.SUCCESS

    logger.info("handing off to %s", type(runtime).__name__)
    return runtime.run(invocation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    configure_logging()
    try:
        code = main()
        sys.exit(code)
    except ImmortalError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
