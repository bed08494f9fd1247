"""Shared pytest fixtures and test helpers for npm_scripts tests."""

from __future__ import annotations

import json
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from npm_scripts import process
from npm_scripts.settings import CHECK_EXIT_ENV_VAR, REQUIRE_SCRIPT_ENV_VAR, TOOL_ENV_VAR


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings overrides from the outer environment out of tests."""
    for name in (TOOL_ENV_VAR, REQUIRE_SCRIPT_ENV_VAR, CHECK_EXIT_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a project directory, optionally with a package.json.

    ``descriptor`` may be a dict (dumped as JSON), a raw string, or None for a
    directory without package.json.
    """

    def _make(descriptor: dict[str, Any] | str | None = None, name: str = "project") -> Path:
        project = tmp_path / name
        project.mkdir(parents=True)
        if descriptor is not None:
            text = descriptor if isinstance(descriptor, str) else json.dumps(descriptor)
            (project / "package.json").write_text(text, encoding="utf-8")
        return project

    return _make


class RecordedCalls:
    """Stand-in for subprocess.run that records command lines."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, command: Sequence[str], cwd: Path, **kwargs: Any) -> subprocess.CompletedProcess:
        self.calls.append((list(command), Path(cwd)))
        return subprocess.CompletedProcess(list(command), self.returncode, b"", b"")


@pytest.fixture
def recorded_calls(monkeypatch: pytest.MonkeyPatch) -> RecordedCalls:
    """Replace process launching with a recorder returning exit status 0."""
    recorder = RecordedCalls()
    monkeypatch.setattr(process.subprocess, "run", recorder)
    return recorder


@pytest.fixture
def python_tool() -> str:
    """A real executable that exits nonzero for ``install`` and ``run <name>``."""
    return sys.executable
