"""Project discovery utilities."""

from __future__ import annotations

from pathlib import Path

from .parsers.package_json import DESCRIPTOR_FILENAME


EXCLUDES = {"node_modules", ".git", ".venv"}


def discover_projects(root: Path) -> list[Path]:
    """Find project directories holding a package.json under root.

    Vendor directories (node_modules, .git, .venv) are skipped. The result is
    sorted so callers get a stable order.
    """
    root = Path(root).resolve()
    found: list[Path] = []

    def should_skip(p: Path) -> bool:
        parts = set(p.parts)
        return any(ex in parts for ex in EXCLUDES)

    for path in root.rglob(DESCRIPTOR_FILENAME):
        if not path.is_file():
            continue
        if should_skip(path.relative_to(root)):
            continue
        found.append(path.parent)

    return sorted(found)
