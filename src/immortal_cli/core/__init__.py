"""Core layer — flag schema, parsing and the validation decision.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or user-database access; lookups go through the
  :class:`~immortal_cli.core.protocols.SystemProbe` protocol.
* No imports from ``cli`` or ``infra``.
"""

from immortal_cli.core.models import Invocation, InvocationRecord
from immortal_cli.core.orchestrator import InvocationValidator, parse_args
from immortal_cli.core.parser import parse
from immortal_cli.core.protocols import SupervisorRuntime, SystemProbe

__all__: list[str] = [
    "Invocation",
    "InvocationRecord",
    "InvocationValidator",
    "SupervisorRuntime",
    "SystemProbe",
    "parse",
    "parse_args",
]
