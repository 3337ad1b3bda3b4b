"""Tests for domain models (core/models.py).

Both models are frozen dataclasses — these tests verify defaults,
immutability and the small convenience helpers.
"""

from __future__ import annotations

import pytest

from immortal_cli.core.models import Invocation, InvocationRecord


class TestInvocationRecord:
    def test_defaults(self) -> None:
        record = InvocationRecord()
        assert record.version is False
        assert record.ctrl is False
        assert record.configfile == ""
        assert record.user == ""

    def test_frozen(self) -> None:
        record = InvocationRecord()
        with pytest.raises(AttributeError):
            record.wrkdir = "/tmp"  # type: ignore[misc]

    def test_given_is_empty_for_defaults(self) -> None:
        assert InvocationRecord().given() == {}

    def test_given_lists_set_fields_in_order(self) -> None:
        record = InvocationRecord(user="www", ctrl=True, logfile="out.log")
        assert list(record.given().items()) == [
            ("ctrl", True),
            ("logfile", "out.log"),
            ("user", "www"),
        ]

    def test_equality(self) -> None:
        assert InvocationRecord(user="www") == InvocationRecord(user="www")
        assert InvocationRecord(user="www") != InvocationRecord(user="db")


class TestInvocation:
    def test_has_command(self) -> None:
        assert Invocation(InvocationRecord(), ("sleep", "1")).has_command is True

    def test_no_command(self) -> None:
        assert Invocation(InvocationRecord()).has_command is False

    def test_empty_token_counts_as_command(self) -> None:
        assert Invocation(InvocationRecord(), ("",)).has_command is True

    def test_frozen(self) -> None:
        invocation = Invocation(InvocationRecord())
        with pytest.raises(AttributeError):
            invocation.command = ("x",)  # type: ignore[misc]
