"""Core entrypoint: detect and run the scripts of one npm project.

Every operation re-reads package.json; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from . import process
from .errors import DescriptorNotFoundError, NotAvailableError, ScriptNotFoundError
from .models import PackageDescriptor
from .parsers.package_json import DESCRIPTOR_FILENAME, load_descriptor
from .settings import RunnerSettings, load_settings

logger = logging.getLogger(__name__)


class PackageScriptRunner:
    """Inspect and run the package scripts of the project rooted at ``path``.

    Construction performs no I/O; the path is only checked when an operation
    is invoked.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        settings: RunnerSettings | None = None,
    ) -> None:
        self._path = Path(path)
        self._settings = settings if settings is not None else load_settings()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def descriptor_path(self) -> Path:
        return self._path / DESCRIPTOR_FILENAME

    @property
    def settings(self) -> RunnerSettings:
        return self._settings

    def is_available(self) -> bool:
        """Return True if the project path exists."""
        return self._path.exists()

    def _require_project(self) -> None:
        if not self.is_available():
            raise NotAvailableError(self._path)

    def _require_directory(self) -> None:
        self._require_project()
        if not self._path.is_dir():
            raise NotAvailableError(self._path, f"Project path is not a directory: {self._path}")

    def load(self) -> PackageDescriptor:
        """Read and parse the project's package.json.

        Raises:
            NotAvailableError: If the project directory or its package.json
                does not exist.
            DescriptorReadError: If package.json cannot be read.
            DescriptorParseError: If package.json is malformed.
        """
        self._require_project()
        if not self.descriptor_path.exists():
            raise DescriptorNotFoundError(self.descriptor_path)
        return load_descriptor(self.descriptor_path)

    def has_script(self, name: str) -> bool:
        """Return True if package.json declares a script named exactly ``name``."""
        return self.load().has_script(name)

    def has_scripts(self) -> bool:
        """Return True if package.json declares at least one script."""
        return self.load().has_scripts()

    def scripts(self) -> dict[str, str]:
        """Return the declared scripts, empty when there are none."""
        return dict(self.load().scripts or {})

    def install(self) -> None:
        """Run ``<tool> install`` in the project directory.

        The exit status is ignored unless ``settings.check_exit`` is set.
        """
        self._require_directory()
        process.install(self._settings.tool, self._path, check=self._settings.check_exit)

    def run_script(self, name: str) -> None:
        """Run ``<tool> run <name>`` in the project directory.

        When ``settings.require_script`` is set (the default), an undeclared
        script raises :class:`ScriptNotFoundError` and nothing is launched.
        Otherwise the tool is invoked regardless and left to reject the name.
        """
        self._require_directory()
        if not self.has_script(name):
            if self._settings.require_script:
                raise ScriptNotFoundError(name, self.descriptor_path)
            logger.debug("Script %r not declared in %s; running anyway", name, self._path)

        process.run(self._settings.tool, name, self._path, check=self._settings.check_exit)
