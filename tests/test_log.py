"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from npm_scripts import PackageScriptRunner, RunnerSettings
from npm_scripts.log import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("npm_scripts")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("npm_scripts").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("npm_scripts").level == logging.WARNING

    def test_runner_debug_records_as_json(
        self, make_project, recorded_calls, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        project = make_project({"scripts": {"build": "tsc"}})
        PackageScriptRunner(project, RunnerSettings()).run_script("build")

        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        loggers = {line["logger"] for line in lines}
        assert "npm_scripts.parsers.package_json" in loggers
        assert "npm_scripts.process" in loggers
        assert all(line["level"] == "debug" for line in lines)

    def test_routes_structlog_through_stdlib(self) -> None:
        configure_logging(log_json=True)
        processors = structlog.get_config()["processors"]
        assert processors[-1] is structlog.stdlib.ProcessorFormatter.wrap_for_formatter
