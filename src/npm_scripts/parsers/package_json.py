"""Parse package.json and extract the scripts mapping."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..errors import DescriptorParseError, DescriptorReadError
from ..models import PackageDescriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "package.json"

# Only the fields read here are constrained; everything else is ignored.
# A null "scripts" counts as absent.
DESCRIPTOR_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "scripts": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "string"},
        },
    },
}

_VALIDATOR = Draft202012Validator(DESCRIPTOR_SCHEMA)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def parse_descriptor(text: str, path: Path) -> PackageDescriptor:
    """Decode and validate descriptor content read from ``path``.

    Raises:
        DescriptorParseError: If the content is not JSON, or is not an object
            whose optional ``scripts`` field maps strings to strings.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DescriptorParseError(f"Invalid JSON in {path}: {exc}") from exc

    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise DescriptorParseError(
            f"Unexpected package.json shape in {path}:\n" + _format_errors(errors)
        )

    scripts = data.get("scripts")
    return PackageDescriptor(path=path, scripts=dict(scripts) if scripts is not None else None)


def load_descriptor(path: Path | str) -> PackageDescriptor:
    """Read and parse the descriptor file at ``path``.

    ``path`` names the file itself, not the project directory. A file that
    cannot be opened, including one that does not exist, is reported as a
    read error.

    Raises:
        DescriptorReadError: If the file cannot be opened or read.
        DescriptorParseError: If the content is invalid.
    """
    path = Path(path)
    try:
        with path.open("rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise DescriptorReadError(f"Failed to read {path}: {exc}") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DescriptorParseError(f"Invalid UTF-8 in {path}: {exc}") from exc

    descriptor = parse_descriptor(text, path)
    logger.debug(
        "Loaded %s (%d scripts)",
        path,
        len(descriptor.scripts) if descriptor.scripts is not None else 0,
    )
    return descriptor
