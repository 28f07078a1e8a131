"""
Pin use case — resolve installed versions and rewrite the manifest.

validate → resolve → splice → write.  The manifest is written once, at
the end, and only when every dependency resolved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from depsync.adapters.base import Reporter
from depsync.core.errors import DepsyncError
from depsync.core.models.run_config import RunConfig
from depsync.core.persistence.manifest_file import render_manifest, write_manifest
from depsync.core.services.pin_ops import (
    ResolvedVersions,
    changed_entries,
    declared_entries,
    pin_manifest,
    resolve_versions,
    validate_project,
)

logger = logging.getLogger(__name__)


@dataclass
class PinResult:
    """Outcome of a pin run."""

    manifest_path: Path | None = None
    resolved: ResolvedVersions = field(default_factory=dict)
    changes: list[dict] = field(default_factory=list)
    document: dict[str, Any] | None = None
    content: str = ""
    written: bool = False
    error: str | None = None

    @property
    def total(self) -> int:
        return sum(len(v) for v in self.resolved.values())

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}
        return {
            "manifest": str(self.manifest_path) if self.manifest_path else "",
            "written": self.written,
            "total": self.total,
            "resolved": {
                category.field: dict(versions)
                for category, versions in self.resolved.items()
            },
            "changed": self.changes,
        }


def run_pin(config: RunConfig, reporter: Reporter | None = None) -> PinResult:
    """Pin every declared dependency of the configured project.

    Args:
        config: Resolved run configuration.
        reporter: Progress sink (default: silent).

    Returns:
        PinResult.  ``error`` is set when the project is invalid or a
        dependency cannot be resolved; the manifest is untouched then.
    """
    result = PinResult(manifest_path=config.manifest_path)

    try:
        manifest = validate_project(config)
        entries = declared_entries(manifest)
        resolved = resolve_versions(entries, config.install_dir, reporter)
    except DepsyncError as e:
        logger.debug("Pin aborted: %s", e)
        result.error = str(e)
        return result

    document = pin_manifest(manifest, resolved)
    result.resolved = resolved
    result.changes = changed_entries(entries, resolved)
    result.document = document

    if config.dry_run:
        result.content = render_manifest(document, indent=config.indent)
        logger.info("Dry run: %d dependencies resolved, nothing written", result.total)
        return result

    result.content = write_manifest(config.manifest_path, document, indent=config.indent)
    result.written = True
    logger.info(
        "Pinned %d dependencies (%d changed) in %s",
        result.total, len(result.changes), config.manifest_path,
    )
    return result
