"""
Manifest models — declared dependencies and their installed counterparts.

A manifest itself stays a plain ``dict`` so that fields depsync does not
know about survive the rewrite untouched.  Only the pieces depsync reasons
about get a type.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from depsync.core.errors import ManifestError


class DependencyCategory(str, Enum):
    """Dependency map inside a manifest; the value is the manifest key."""

    RUNTIME = "dependencies"
    DEVELOPMENT = "devDependencies"

    @property
    def field(self) -> str:
        return self.value


# Development entries are resolved (and reported) before runtime ones.
RESOLUTION_ORDER: tuple[DependencyCategory, ...] = (
    DependencyCategory.DEVELOPMENT,
    DependencyCategory.RUNTIME,
)


class PackageName(BaseModel):
    """A declared package name, split into its scope and bare name.

    ``@babel/core`` parses to ``scope="babel", name="core"``;
    ``lodash`` parses to ``scope=None, name="lodash"``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    scope: str | None = None

    @classmethod
    def parse(cls, raw: str) -> PackageName:
        """Parse a declared name, rejecting malformed scoped names."""
        if not raw:
            raise ManifestError("Empty dependency name")

        if not raw.startswith("@"):
            return cls(name=raw)

        scope, sep, name = raw[1:].partition("/")
        if not sep or not scope or not name:
            raise ManifestError(f"Invalid scoped dependency name: {raw!r}")
        return cls(scope=scope, name=name)

    @property
    def is_scoped(self) -> bool:
        return self.scope is not None

    def __str__(self) -> str:
        if self.scope is None:
            return self.name
        return f"@{self.scope}/{self.name}"

    def candidate_dirs(self, install_dir: Path) -> list[Path]:
        """Directories that may hold this package, in lookup order.

        Scoped packages live under ``<install>/<scope>/<name>``; the npm
        layout ``<install>/@<scope>/<name>`` is the second candidate, so
        packages installed by npm itself are still found.
        """
        if not self.is_scoped:
            return [install_dir / self.name]
        return [
            install_dir / self.scope / self.name,
            install_dir / f"@{self.scope}" / self.name,
        ]


class DependencyEntry(BaseModel):
    """One declared dependency: category, name and declared specifier."""

    model_config = ConfigDict(frozen=True)

    category: DependencyCategory
    name: PackageName
    specifier: str


class InstalledPackage(BaseModel):
    """The installed copy of a dependency, as read from its own manifest."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    manifest_path: Path
