"""
Tests for the pin use case — the full validate → resolve → write run.
"""

import json
from pathlib import Path

from depsync.adapters.base import NullReporter
from depsync.core.models import RunConfig
from depsync.core.use_cases.pin import run_pin


class TestRunPin:
    def test_pins_to_installed_version(self, make_project):
        project = make_project(
            {"name": "app", "dependencies": {"lodash": "^4.0.0"}},
            installed={"lodash": "4.17.21"},
        )
        result = run_pin(RunConfig(project_path=project))

        assert result.error is None
        assert result.written
        data = json.loads((project / "package.json").read_text())
        assert data == {"name": "app", "dependencies": {"lodash": "4.17.21"}}

    def test_other_fields_untouched(self, make_project):
        manifest = {
            "name": "app",
            "version": "1.0.0",
            "scripts": {"build": "tsc"},
            "dependencies": {"a": "^1.0.0"},
            "devDependencies": {"@types/node": "^20"},
            "engines": {"node": ">=18"},
            "private": True,
        }
        project = make_project(manifest, installed={"a": "1.2.3", "@types/node": "20.11.5"})
        run_pin(RunConfig(project_path=project))

        data = json.loads((project / "package.json").read_text())
        for key in ("name", "version", "scripts", "engines", "private"):
            assert data[key] == manifest[key]
        assert list(data) == list(manifest)
        assert data["dependencies"] == {"a": "1.2.3"}
        assert data["devDependencies"] == {"@types/node": "20.11.5"}

    def test_same_name_set(self, make_project):
        deps = {"a": "^1", "b": "~2", "@s/c": "*"}
        project = make_project(
            {"dependencies": deps},
            installed={"a": "1.0.0", "b": "2.1.0", "@s/c": "3.0.0"},
        )
        run_pin(RunConfig(project_path=project))
        data = json.loads((project / "package.json").read_text())
        assert list(data["dependencies"]) == list(deps)

    def test_no_dev_dependencies_field_added(self, make_project):
        project = make_project({"dependencies": {"a": "^1"}}, installed={"a": "1.0.0"})
        run_pin(RunConfig(project_path=project))
        data = json.loads((project / "package.json").read_text())
        assert "devDependencies" not in data

    def test_no_dependencies_at_all(self, make_project):
        project = make_project({"name": "empty"})
        result = run_pin(RunConfig(project_path=project))
        assert result.error is None
        assert result.total == 0
        assert (project / "package.json").read_text() == '{\n\t"name": "empty"\n}'

    def test_idempotent(self, make_project):
        project = make_project(
            {"dependencies": {"a": "^1"}, "devDependencies": {"b": "^2"}},
            installed={"a": "1.0.0", "b": "2.0.0"},
        )
        run_pin(RunConfig(project_path=project))
        first = (project / "package.json").read_bytes()
        second_result = run_pin(RunConfig(project_path=project))
        assert (project / "package.json").read_bytes() == first
        assert second_result.changes == []

    def test_missing_install_dir_leaves_manifest(self, make_project):
        project = make_project({"dependencies": {"a": "^1"}}, with_modules=False)
        before = (project / "package.json").read_bytes()
        result = run_pin(RunConfig(project_path=project))
        assert result.error is not None
        assert not result.written
        assert (project / "package.json").read_bytes() == before

    def test_missing_package_leaves_manifest(self, make_project):
        project = make_project(
            {"dependencies": {"a": "^1", "b": "^1"}},
            installed={"a": "1.0.0"},
        )
        before = (project / "package.json").read_bytes()
        result = run_pin(RunConfig(project_path=project))
        assert "'b' is not installed" in result.error
        assert (project / "package.json").read_bytes() == before

    def test_dry_run_writes_nothing(self, make_project):
        project = make_project({"dependencies": {"a": "^1"}}, installed={"a": "1.0.0"})
        before = (project / "package.json").read_bytes()
        result = run_pin(RunConfig(project_path=project, dry_run=True))
        assert not result.written
        assert json.loads(result.content) == {"dependencies": {"a": "1.0.0"}}
        assert (project / "package.json").read_bytes() == before

    def test_changes_and_summary(self, make_project):
        project = make_project(
            {"dependencies": {"a": "^1", "b": "2.0.0"}},
            installed={"a": "1.0.0", "b": "2.0.0"},
        )
        reporter = NullReporter()
        result = run_pin(RunConfig(project_path=project), reporter=reporter)
        assert reporter.seen == ["a", "b"]
        assert [c["name"] for c in result.changes] == ["a"]
        d = result.to_dict()
        assert d["written"] is True
        assert d["total"] == 2
        assert d["resolved"] == {"dependencies": {"a": "1.0.0", "b": "2.0.0"}}

    def test_error_to_dict(self, tmp_path: Path):
        result = run_pin(RunConfig(project_path=tmp_path))
        assert set(result.to_dict()) == {"error"}
