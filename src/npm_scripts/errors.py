"""Error hierarchy for package script detection and invocation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class PackageScriptError(RuntimeError):
    """Base error for failures while inspecting or running package scripts."""


class NotAvailableError(PackageScriptError):
    """Raised when the project directory or its descriptor does not exist."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Project not available: {path}")


class DescriptorNotFoundError(NotAvailableError):
    """Raised when the project directory exists but holds no package.json."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"No package.json found at {path}")


class DescriptorReadError(PackageScriptError):
    """Raised when package.json cannot be opened or read."""


class DescriptorParseError(PackageScriptError, ValueError):
    """Raised when package.json is not valid JSON or has an unexpected shape."""


class ScriptNotFoundError(PackageScriptError):
    """Raised when a script is run that the descriptor does not declare."""

    def __init__(self, script: str, path: Path) -> None:
        self.script = script
        self.path = path
        super().__init__(f"Script '{script}' is not declared in {path}")


class ExternalToolError(PackageScriptError):
    """Raised when the package manager executable cannot be launched."""

    def __init__(self, command: Sequence[str], message: str) -> None:
        self.command = list(command)
        super().__init__(message)


class ExternalToolFailedError(ExternalToolError):
    """Raised when exit codes are checked and the package manager exits nonzero."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.returncode = returncode
        super().__init__(
            command,
            f"Command {' '.join(command)!r} exited with status {returncode}",
        )


class ConfigError(PackageScriptError):
    """Raised when runner settings or their environment overrides are invalid."""
