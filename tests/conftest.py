"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest


def write_json(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def install(project: Path, name: str, version: str | None, layout: str = "plain") -> Path:
    """Create ``node_modules/<...>/package.json`` for an installed package.

    ``layout="npm"`` keeps the ``@`` on the scope directory.
    """
    if name.startswith("@") and layout == "plain":
        rel = Path(name[1:])
    else:
        rel = Path(name)
    data = {"name": name}
    if version is not None:
        data["version"] = version
    return write_json(project / "node_modules" / rel / "package.json", data)


@pytest.fixture
def make_project(tmp_path: Path):
    """Factory: build a project dir with a manifest and installed packages.

    ``installed`` maps names to versions; ``node_modules`` is always
    created unless ``with_modules=False``.
    """

    def _make(
        manifest: dict,
        installed: dict[str, str] | None = None,
        with_modules: bool = True,
    ) -> Path:
        project = tmp_path / "project"
        project.mkdir(exist_ok=True)
        write_json(project / "package.json", manifest)
        if with_modules:
            (project / "node_modules").mkdir(exist_ok=True)
        for name, version in (installed or {}).items():
            install(project, name, version)
        return project

    return _make


@pytest.fixture
def install_package():
    """Expose ``install`` to tests that lay out node_modules themselves."""
    return install
