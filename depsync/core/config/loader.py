"""
Configuration loader — builds the RunConfig for one invocation.

CLI values decide *where* the project is; an optional ``depsync.yml``
inside the project can rename the manifest or the installed-packages
directory, or change the output indentation.  The YAML is validated
against a Pydantic schema before anything touches the project.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from depsync.core.errors import ConfigError, ProjectError
from depsync.core.models.run_config import FileSettings, RunConfig

logger = logging.getLogger(__name__)

# Optional per-project settings file
CONFIG_FILE = "depsync.yml"


def load_file_settings(project_path: Path) -> tuple[FileSettings, Path | None]:
    """Read ``depsync.yml`` from the project directory, if present.

    Returns:
        (settings, path) — path is None when no file exists and the
        defaults were used.

    Raises:
        ConfigError: If the file exists but is unreadable or invalid.
    """
    path = project_path / CONFIG_FILE
    if not path.is_file():
        return FileSettings(), None

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = FileSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    return settings, path


def build_run_config(
    project_path: str | Path | None = None,
    dry_run: bool = False,
) -> RunConfig:
    """Build the configuration for a run.

    Args:
        project_path: Target project directory (default: cwd).  An empty
            string also means cwd.
        dry_run: Resolve and render without writing the manifest.

    Raises:
        ProjectError: If the path is not a directory.
        ConfigError: If depsync.yml is invalid.
    """
    root = Path(project_path).expanduser() if project_path else Path.cwd()

    if not root.is_dir():
        raise ProjectError(f"Project path is not a directory: {root}")

    settings, config_file = load_file_settings(root)

    config = RunConfig(
        project_path=root,
        manifest_name=settings.manifest,
        install_dir_name=settings.install_dir,
        indent=settings.indent,
        dry_run=dry_run,
        config_file=config_file,
    )
    logger.info(
        "Project %s (manifest=%s, install_dir=%s, settings=%s)",
        root, config.manifest_name, config.install_dir_name,
        config.config_file or "defaults",
    )
    return config
