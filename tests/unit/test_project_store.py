"""ProjectStore and Workspace unit tests.

Uses a temporary workspace for every test; nothing touches the real
projects/ folder.
"""

import pytest
from datetime import datetime
from pathlib import Path

from design_review.config import Settings
from design_review.exceptions import (
    InvalidProjectNameError,
    ProjectExistsError,
    ProjectNotFoundError,
    StorageError,
)
from design_review.models import ArtifactKey
from design_review.services import ProjectStore, Workspace
from design_review.services.project_store import COMMENTS_FILENAME, REVIEW_FILENAME


# ===================================================================
# Project creation
# ===================================================================

class TestCreateProject:
    def test_creates_templates_and_folders(self, store):
        slug = store.create("Botim Quest", created_at=datetime(2024, 1, 1, 12, 0, 0))
        project_dir = store.project_path(slug)

        assert slug == "botim-quest"
        for key in ArtifactKey:
            assert (project_dir / key.filename).is_file()
        assert (project_dir / "raw").is_dir()
        assert (project_dir / "prompts").is_dir()

    def test_front_matter_header(self, store):
        slug = store.create("  Botim Quest ", created_at=datetime(2024, 1, 1, 12, 0, 0))
        prd = (store.project_path(slug) / "prd.md").read_text(encoding="utf-8")

        assert prd.startswith(
            "---\nProject: Botim Quest\nCreated: 2024-01-01T12:00:00\n---\n\n# Product Requirements Document\n"
        )

    def test_creates_projects_dir_when_missing(self, tmp_path):
        store = ProjectStore(Workspace(tmp_path))
        store.create("First")
        assert (tmp_path / "projects" / "first").is_dir()

    def test_rejects_existing_project(self, store):
        store.create("Botim Quest")
        with pytest.raises(ProjectExistsError) as exc_info:
            store.create("botim quest")
        assert exc_info.value.details["slug"] == "botim-quest"

    def test_rejects_invalid_name(self, store):
        with pytest.raises(InvalidProjectNameError):
            store.create("!!!")
        assert store.list_projects() == []


# ===================================================================
# Listing and lookup
# ===================================================================

class TestListProjects:
    def test_sorted_and_skips_hidden_and_files(self, store, workspace):
        for name in ("zeta", "alpha", ".git"):
            (workspace.projects_dir / name).mkdir()
        (workspace.projects_dir / "README.md").write_text("x")

        assert store.list_projects() == ["alpha", "zeta"]

    def test_missing_projects_dir(self, tmp_path):
        assert ProjectStore(Workspace(tmp_path)).list_projects() == []

    def test_require_lists_available_projects(self, store):
        store.create("Alpha")
        with pytest.raises(ProjectNotFoundError) as exc_info:
            store.require("beta")
        assert exc_info.value.details == {"slug": "beta", "available": ["alpha"]}

    @pytest.mark.parametrize("slug", ["..", ".", "../projects", "Alpha", "alpha/raw", ""])
    def test_require_rejects_non_slug_paths(self, store, slug):
        store.create("Alpha")
        assert store.exists(slug) is False
        with pytest.raises(ProjectNotFoundError):
            store.require(slug)

    def test_write_output_cannot_escape_projects_dir(self, store, workspace):
        with pytest.raises(ProjectNotFoundError):
            store.write_output("..", REVIEW_FILENAME, "x")
        assert not (workspace.root / REVIEW_FILENAME).exists()

    def test_skips_folders_that_are_not_slugs(self, store, workspace):
        (workspace.projects_dir / "My Project").mkdir()
        (workspace.projects_dir / "beta").mkdir()
        assert store.list_projects() == ["beta"]


# ===================================================================
# Artifacts and outputs
# ===================================================================

class TestArtifactsAndOutputs:
    def test_missing_artifacts_read_as_empty(self, store):
        slug = store.create("Alpha")
        (store.project_path(slug) / "research.md").unlink()

        artifacts = store.read_artifacts(slug)
        assert artifacts.research == ""
        assert artifacts.prd != ""

    def test_project_name_from_front_matter(self, store, signup_project):
        assert store.project_name(signup_project) == "Sign Up Flow"

    def test_project_name_falls_back_to_slug(self, store):
        slug = store.create("Alpha")
        (store.project_path(slug) / "prd.md").write_text("# PRD\n", encoding="utf-8")
        assert store.project_name(slug) == "alpha"

    def test_write_and_read_output(self, store):
        slug = store.create("Alpha")
        path = store.write_output(slug, "prompts/nested/file.md", "content")

        assert path == store.project_path(slug) / "prompts" / "nested" / "file.md"
        assert store.read_output(slug, "prompts/nested/file.md") == "content"
        assert store.read_output(slug, REVIEW_FILENAME) == ""

    def test_write_output_requires_project(self, store):
        with pytest.raises(ProjectNotFoundError):
            store.write_output("missing", COMMENTS_FILENAME, "x")

    def test_write_file_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError) as exc_info:
            ProjectStore.write_file(blocker / "child.md", "x")
        assert exc_info.value.error_code == "ERR_STORE_001"


# ===================================================================
# Workspace discovery
# ===================================================================

class TestWorkspaceDiscover:
    def test_settings_override(self, tmp_path):
        settings = Settings(workspace_root=str(tmp_path / "custom"))
        ws = Workspace.discover(start=tmp_path, settings=settings)
        assert ws.root == (tmp_path / "custom").resolve()

    def test_finds_projects_dir_in_parent(self, tmp_path):
        (tmp_path / "projects").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        ws = Workspace.discover(start=nested, settings=Settings())
        assert ws.root == tmp_path.resolve()

    def test_finds_pyproject_with_dependency(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "team-designs"\ndependencies = ["design-review>=0.1"]\n',
            encoding="utf-8",
        )
        nested = tmp_path / "docs"
        nested.mkdir()

        ws = Workspace.discover(start=nested, settings=Settings())
        assert ws.root == tmp_path.resolve()

    def test_ignores_unrelated_or_broken_pyproject(self, tmp_path):
        outer = tmp_path / "outer"
        inner = outer / "inner"
        inner.mkdir(parents=True)
        (outer / "projects").mkdir()
        (inner / "pyproject.toml").write_text("this is [not toml", encoding="utf-8")

        ws = Workspace.discover(start=inner, settings=Settings())
        assert ws.root == outer.resolve()

    def test_projects_dir_paths(self, tmp_path):
        ws = Workspace(tmp_path)
        assert ws.projects_dir == tmp_path.resolve() / "projects"
        assert not ws.has_projects_dir()
        ws.ensure_projects_dir()
        assert ws.has_projects_dir()
