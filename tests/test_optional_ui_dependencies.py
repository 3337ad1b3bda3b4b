"""Regression tests for the optional Rich dependency.

Help, version, error reporting and the summary must keep working when
Rich cannot be imported.
"""

from __future__ import annotations

import logging
import sys

import pytest

from immortal_cli.cli import exit_codes
from immortal_cli.cli.app import cli, main
from immortal_cli.cli.log import _build_handler
from immortal_cli.cli.summary import render_summary
from immortal_cli.core.models import Invocation, InvocationRecord


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], probe,
) -> None:
    _hide_rich(monkeypatch)

    assert main(["-h"], probe=probe) == exit_codes.SUCCESS
    assert "usage: immortal" in capsys.readouterr().err


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch, probe) -> None:
    _hide_rich(monkeypatch)

    assert main(["-v"], probe=probe) == exit_codes.SUCCESS


def test_summary_falls_back_to_plain_text(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    render_summary(Invocation(InvocationRecord(user="www"), ("sleep", "1")))
    err = capsys.readouterr().err
    assert "immortal invocation" in err
    assert "-u" in err
    assert "sleep 1" in err


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    handler = _build_handler()
    assert type(handler) is logging.StreamHandler


def test_errors_print_plain_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["immortal", "-d", "/tmp/[/x]", "cmd"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    err = capsys.readouterr().err
    assert "/tmp/[/x]" in err
    assert "Hint:" in err
