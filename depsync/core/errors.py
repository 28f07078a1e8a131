"""
Error hierarchy — every fatal condition of a pin run.

The CLI catches ``DepsyncError`` and turns it into a message plus a
non-zero exit code.  Anything else (disk full, permission denied on
write) propagates unchanged.
"""

from __future__ import annotations


class DepsyncError(Exception):
    """Base class for all expected, operator-fixable failures."""


class ConfigError(DepsyncError):
    """Raised when depsync.yml or the CLI invocation is invalid."""


class ProjectError(DepsyncError):
    """Raised when the target directory is not a usable project."""


class ManifestError(DepsyncError):
    """Raised when a manifest cannot be read or is not a JSON object."""


class InstalledPackageError(DepsyncError):
    """Raised when a declared dependency has no usable installed manifest."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
