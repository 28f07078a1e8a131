"""
Pin operations — validate a project, resolve installed versions and
splice them back into the manifest.

Each step takes its inputs explicitly (the RunConfig, the loaded
manifest, a Reporter) and returns plain data, so the pipeline can be
driven from the CLI or from tests without a terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from depsync.adapters.base import NullReporter, Reporter
from depsync.core.errors import InstalledPackageError, ManifestError, ProjectError
from depsync.core.models.manifest import (
    RESOLUTION_ORDER,
    DependencyCategory,
    DependencyEntry,
    InstalledPackage,
    PackageName,
)
from depsync.core.models.run_config import RunConfig
from depsync.core.persistence.manifest_file import load_manifest

logger = logging.getLogger(__name__)

ResolvedVersions = dict[DependencyCategory, dict[str, str]]


# ═══════════════════════════════════════════════════════════════════
#  Validate
# ═══════════════════════════════════════════════════════════════════


def validate_project(config: RunConfig) -> dict[str, Any]:
    """Check the project layout and load its manifest.

    The manifest must be a regular file and the installed-packages
    directory must be a directory, checked in that order.

    Raises:
        ProjectError: If either check fails.
        ManifestError: If the manifest is not a JSON object.
    """
    manifest_path = config.manifest_path
    if not manifest_path.exists():
        raise ProjectError(f"No {config.manifest_name} found in {config.project_path}")
    if not manifest_path.is_file():
        raise ProjectError(f"{manifest_path} is not a file")

    install_dir = config.install_dir
    if not install_dir.exists():
        raise ProjectError(
            f"No {config.install_dir_name} directory in {config.project_path}. "
            "Install dependencies first."
        )
    if not install_dir.is_dir():
        raise ProjectError(f"{install_dir} is not a directory")

    manifest = load_manifest(manifest_path)
    logger.debug("Loaded manifest %s (%d fields)", manifest_path, len(manifest))
    return manifest


# ═══════════════════════════════════════════════════════════════════
#  Resolve
# ═══════════════════════════════════════════════════════════════════


def declared_entries(manifest: dict[str, Any]) -> list[DependencyEntry]:
    """List declared dependencies, development first, in manifest order.

    Raises:
        ManifestError: If a dependency field is not an object or a name
            is malformed.
    """
    entries: list[DependencyEntry] = []
    for category in RESOLUTION_ORDER:
        declared = manifest.get(category.field)
        if declared is None:
            continue
        if not isinstance(declared, dict):
            raise ManifestError(
                f"'{category.field}' must be an object, got {type(declared).__name__}"
            )
        for raw_name, specifier in declared.items():
            entries.append(DependencyEntry(
                category=category,
                name=PackageName.parse(raw_name),
                specifier=specifier if isinstance(specifier, str) else str(specifier),
            ))
    return entries


def locate_installed(name: PackageName, install_dir: Path) -> Path:
    """Return the installed manifest path for ``name``.

    Raises:
        InstalledPackageError: If no candidate directory holds a manifest.
    """
    candidates = [d / "package.json" for d in name.candidate_dirs(install_dir)]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise InstalledPackageError(
        str(name),
        f"Dependency '{name}' is not installed (looked for {candidates[0]})",
    )


def read_installed(name: PackageName, install_dir: Path) -> InstalledPackage:
    """Read the installed version of a dependency.

    Raises:
        InstalledPackageError: If the package is missing, its manifest is
            unreadable, or it has no version.
    """
    path = locate_installed(name, install_dir)
    try:
        data = load_manifest(path)
    except ManifestError as e:
        raise InstalledPackageError(str(name), f"Dependency '{name}': {e}") from e

    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise InstalledPackageError(str(name), f"Dependency '{name}' has no version in {path}")

    return InstalledPackage(name=str(name), version=version, manifest_path=path)


def resolve_versions(
    entries: list[DependencyEntry],
    install_dir: Path,
    reporter: Reporter | None = None,
) -> ResolvedVersions:
    """Resolve the installed version of every entry, in order.

    Returns:
        {category: {name: installed_version}} — only categories with at
        least one entry appear.

    Raises:
        InstalledPackageError: On the first entry that cannot be resolved;
            nothing resolved so far is kept.
    """
    reporter = reporter or NullReporter()
    resolved: ResolvedVersions = {}

    reporter.start(len(entries))
    try:
        for entry in entries:
            installed = read_installed(entry.name, install_dir)
            resolved.setdefault(entry.category, {})[installed.name] = installed.version
            logger.debug(
                "%s %s → %s (%s)",
                entry.category.field, installed.name, installed.version, installed.manifest_path,
            )
            reporter.advance(installed.name)
    finally:
        reporter.finish()

    return resolved


# ═══════════════════════════════════════════════════════════════════
#  Rewrite
# ═══════════════════════════════════════════════════════════════════


def pin_manifest(manifest: dict[str, Any], resolved: ResolvedVersions) -> dict[str, Any]:
    """Return a copy of ``manifest`` with dependency maps replaced.

    Categories with no resolved entries are dropped from the copy; every
    other field keeps its value and position.
    """
    pinned = dict(manifest)
    for category in DependencyCategory:
        versions = resolved.get(category)
        if versions:
            pinned[category.field] = dict(versions)
        else:
            pinned.pop(category.field, None)
    return pinned


def changed_entries(entries: list[DependencyEntry], resolved: ResolvedVersions) -> list[dict]:
    """Entries whose declared specifier differs from the installed version.

    Returns:
        [{category, name, declared, installed}, ...] in resolution order.
    """
    changes = []
    for entry in entries:
        name = str(entry.name)
        installed = resolved.get(entry.category, {}).get(name)
        if installed is not None and installed != entry.specifier:
            changes.append({
                "category": entry.category.field,
                "name": name,
                "declared": entry.specifier,
                "installed": installed,
            })
    return changes
