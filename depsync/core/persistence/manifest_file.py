"""
Manifest file persistence — read and write package.json documents.

Reads keep key order (``json`` loads objects into ordered dicts).
Writes overwrite the file in place with the rendered text; there is no
backup and no temp-file swap, the file is written once at the end of a
successful run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from depsync.core.errors import ManifestError

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> dict[str, Any]:
    """Load a manifest as a dict.

    Raises:
        ManifestError: If the file cannot be read, is not valid JSON,
            or its top level is not an object.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    return data


def render_manifest(document: dict[str, Any], indent: str | int = "\t") -> str:
    """Render a manifest the way it is written to disk (no trailing newline)."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def write_manifest(path: Path, document: dict[str, Any], indent: str | int = "\t") -> str:
    """Overwrite ``path`` with the rendered manifest and return the text."""
    content = render_manifest(document, indent=indent)
    path.write_text(content, encoding="utf-8")
    logger.debug("Manifest written to %s (%d bytes)", path, len(content))
    return content
