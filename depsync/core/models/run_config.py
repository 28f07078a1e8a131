"""
Run configuration — everything one pin run needs to know.

Built once at start-up from CLI values and the optional ``depsync.yml``,
then passed explicitly into each step.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_MANIFEST = "package.json"
DEFAULT_INSTALL_DIR = "node_modules"
DEFAULT_INDENT = "\t"


class FileSettings(BaseModel):
    """Settings accepted in ``depsync.yml``."""

    model_config = ConfigDict(extra="forbid")

    manifest: str = DEFAULT_MANIFEST
    install_dir: str = DEFAULT_INSTALL_DIR
    indent: str | int = DEFAULT_INDENT

    @field_validator("indent")
    @classmethod
    def _check_indent(cls, value: str | int) -> str | int:
        """Digit strings mean a space count; any other string must be whitespace."""
        if isinstance(value, str):
            if value.isdigit():
                return int(value)
            if value.strip():
                raise ValueError(f"indent must be whitespace or a number, got {value!r}")
        elif value < 0:
            raise ValueError("indent must not be negative")
        return value


class RunConfig(BaseModel):
    """Resolved configuration for a single run."""

    model_config = ConfigDict(frozen=True)

    project_path: Path
    manifest_name: str = DEFAULT_MANIFEST
    install_dir_name: str = DEFAULT_INSTALL_DIR
    indent: str | int = DEFAULT_INDENT
    dry_run: bool = False
    config_file: Path | None = None

    @property
    def manifest_path(self) -> Path:
        return self.project_path / self.manifest_name

    @property
    def install_dir(self) -> Path:
        return self.project_path / self.install_dir_name
