"""Shared pytest fixtures for the immortal-cli test suite.

Guidelines
----------
* Core tests use :class:`FakeProbe` — no filesystem or account lookups.
* Infra tests use ``tmp_path`` and mock ``pwd``; no dependence on the
  accounts that exist on the host.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass
class FakeProbe:
    """In-memory :class:`~immortal_cli.core.protocols.SystemProbe`."""

    files: set[str] = field(default_factory=set)
    directories: set[str] = field(default_factory=set)
    users: set[str] = field(default_factory=set)

    def path_exists(self, path: str) -> bool:
        return path in self.files or path in self.directories

    def path_is_directory(self, path: str) -> bool:
        return path in self.directories

    def user_exists(self, name: str) -> bool:
        return name in self.users


class UsageRecorder:
    """Usage callback that counts how often it was called."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def probe() -> FakeProbe:
    return FakeProbe(
        files={"/etc/immortal/run.yml", "/dev/null"},
        directories={"/", "/var/app", "/etc/app/env"},
        users={"www"},
    )


@pytest.fixture
def usage() -> UsageRecorder:
    return UsageRecorder()
