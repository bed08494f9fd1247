"""Invocation of the external package manager.

Output is captured and dropped; only the launch itself can fail unless the
caller asks for exit status checking.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .errors import ExternalToolError, ExternalToolFailedError

logger = logging.getLogger(__name__)


def invoke(
    tool: str,
    args: Sequence[str],
    cwd: Path,
    check: bool = False,
) -> subprocess.CompletedProcess[bytes]:
    """Run ``tool`` with ``args`` inside ``cwd`` and wait for it to exit.

    The executable is looked up on PATH. No timeout is applied.

    Raises:
        ExternalToolError: If the executable is missing or cannot be started.
        ExternalToolFailedError: If ``check`` is set and the exit status is nonzero.
    """
    command = [tool, *args]
    logger.debug("Running %s in %s", command, cwd)

    try:
        completed = subprocess.run(command, cwd=cwd, capture_output=True, check=False)
    except OSError as exc:
        raise ExternalToolError(command, f"Failed to launch {tool!r}: {exc}") from exc

    logger.debug(
        "%s exited with status %s (stdout %d bytes, stderr %d bytes)",
        command,
        completed.returncode,
        len(completed.stdout or b""),
        len(completed.stderr or b""),
    )

    if check and completed.returncode != 0:
        raise ExternalToolFailedError(command, completed.returncode)

    return completed


def install(tool: str, cwd: Path, check: bool = False) -> subprocess.CompletedProcess[bytes]:
    """Run ``<tool> install`` in ``cwd``."""
    return invoke(tool, ["install"], cwd, check=check)


def run(
    tool: str, script: str, cwd: Path, check: bool = False
) -> subprocess.CompletedProcess[bytes]:
    """Run ``<tool> run <script>`` in ``cwd``."""
    return invoke(tool, ["run", script], cwd, check=check)
