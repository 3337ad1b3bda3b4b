"""Tests for logging setup (cli/log.py)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from immortal_cli.cli.log import LOG_LEVEL_ENV, configure_logging, resolve_level


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    log = logging.getLogger("immortal_cli")
    saved_handlers = list(log.handlers)
    saved_level = log.level
    log.handlers.clear()
    yield log
    log.handlers[:] = saved_handlers
    log.setLevel(saved_level)


class TestResolveLevel:
    def test_default(self) -> None:
        assert resolve_level({}) == logging.WARNING

    def test_case_insensitive(self) -> None:
        assert resolve_level({LOG_LEVEL_ENV: "debug"}) == logging.DEBUG

    def test_unknown_name_falls_back(self) -> None:
        assert resolve_level({LOG_LEVEL_ENV: "LOUD"}) == logging.WARNING

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        assert resolve_level() == logging.INFO


class TestConfigureLogging:
    def test_sets_level(self, package_logger: logging.Logger) -> None:
        configure_logging({LOG_LEVEL_ENV: "DEBUG"})
        assert package_logger.level == logging.DEBUG

    def test_idempotent(self, package_logger: logging.Logger) -> None:
        configure_logging({})
        configure_logging({})
        assert len(package_logger.handlers) == 1

    def test_precondition_records(
        self, probe, usage, caplog: pytest.LogCaptureFixture,
    ) -> None:
        from immortal_cli.core.orchestrator import parse_args

        with caplog.at_level(logging.DEBUG, logger="immortal_cli"):
            parse_args(["-d", "/var/app", "cmd"], usage, probe)
        assert "precondition wrkdir='/var/app' passed" in caplog.text
