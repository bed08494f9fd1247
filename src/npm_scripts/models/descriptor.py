"""Package descriptor model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PackageDescriptor:
    """The parts of a package.json this library cares about.

    ``scripts`` is ``None`` when the field is absent and an empty mapping when
    it is present but declares nothing.
    """

    path: Path
    scripts: dict[str, str] | None = None

    def has_script(self, name: str) -> bool:
        return self.scripts is not None and name in self.scripts

    def has_scripts(self) -> bool:
        return bool(self.scripts)
