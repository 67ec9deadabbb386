"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from isbnctl.config.logging import PACKAGE_LOGGER, configure_logging
from isbnctl.domain.isbn import is_valid
from isbnctl.services.isbn import IsbnService
from tests.conftest import FixedSegmenter


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("isbnctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("isbnctl").level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("isbnctl.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "isbnctl.test"
        assert "timestamp" in parsed

    def test_stdlib_module_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        """Debug records from domain modules go through the JSON renderer."""
        configure_logging(verbose=True, log_json=True)
        assert is_valid("012345678X") is False
        lines = [line for line in capfd.readouterr().err.splitlines() if line.strip()]
        parsed = json.loads(lines[-1])
        assert parsed["logger"] == "isbnctl.domain.isbn"
        assert parsed["level"] == "debug"
        assert "Rejected" in parsed["event"]

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        is_valid("012345678X")
        assert capfd.readouterr().err == ""

    def test_verbose_leaves_other_loggers_quiet(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("somelib").debug("noise")
        logging.getLogger(PACKAGE_LOGGER).debug("signal")
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line.strip()]
        assert [entry["event"] for entry in lines] == ["signal"]

    def test_service_failures_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        IsbnService(FixedSegmenter((1, 2, 6))).convert("012345672X", "bogus")
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line.strip()]
        assert lines[-1]["logger"] == "isbnctl.services.isbn"
        assert "unknown form" in lines[-1]["event"]
