"""
Domain models — Pydantic types for depsync.

    from depsync.core.models import PackageName, DependencyEntry, RunConfig
"""

from depsync.core.models.manifest import (
    RESOLUTION_ORDER,
    DependencyCategory,
    DependencyEntry,
    InstalledPackage,
    PackageName,
)
from depsync.core.models.run_config import FileSettings, RunConfig

__all__ = [
    "RESOLUTION_ORDER",
    "DependencyCategory",
    "DependencyEntry",
    "FileSettings",
    "InstalledPackage",
    "PackageName",
    "RunConfig",
]
