"""Tests for template installation, feature folders and .gitignore updates."""

from __future__ import annotations

from pathlib import Path

import pytest

from bauspec.schemas.config import BUNDLED_TEMPLATES
from bauspec.shared.project_reader import ProjectReader
from bauspec.shared.scaffold import (
    GITIGNORE_HEADER,
    TEMPLATE_DIR,
    FeatureExistsError,
    InvalidFeatureNameError,
    SpecsDirExistsError,
    SpecsDirNotFoundError,
    add_feature,
    find_specs_dir,
    install_templates,
    update_gitignore,
)

FEATURE_TEMPLATES = ["01-braindump.md", "02-prd.md", "04-stories.md"]


class TestInstallTemplates:

    def test_bundled_templates_exist(self) -> None:
        for name in BUNDLED_TEMPLATES:
            assert (TEMPLATE_DIR / name).is_file()

    def test_copies_templates_and_creates_folders(self, tmp_path: Path) -> None:
        specs = install_templates(tmp_path / "specs")
        for name in BUNDLED_TEMPLATES:
            assert (specs / name).read_text() == (TEMPLATE_DIR / name).read_text()
        assert (specs / "features").is_dir()
        assert (specs / "drafts").is_dir()

    def test_nested_target(self, tmp_path: Path) -> None:
        specs = install_templates(tmp_path / "docs" / "specs")
        assert (specs / "constitution.md").exists()

    def test_refuses_existing_directory(self, tmp_path: Path) -> None:
        (tmp_path / "specs").mkdir()
        (tmp_path / "specs" / "mine.md").write_text("keep me")
        with pytest.raises(SpecsDirExistsError, match="already exists"):
            install_templates(tmp_path / "specs")
        assert (tmp_path / "specs" / "mine.md").read_text() == "keep me"


class TestFindSpecsDir:

    def test_first_candidate_with_constitution(self, make_project) -> None:
        root = make_project({
            "spec/constitution.md": "",
            "specifications/constitution.md": "",
            "specs/readme.md": "",
        })
        assert find_specs_dir(root, ["specs", "spec", "specifications"]) == root / "spec"

    def test_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SpecsDirNotFoundError, match="bauspec init"):
            find_specs_dir(tmp_path, ["specs"])


class TestAddFeature:

    def test_copies_feature_templates(self, tmp_path: Path) -> None:
        specs = install_templates(tmp_path / "specs")
        feature = add_feature(specs, "user-auth", FEATURE_TEMPLATES)
        assert feature == specs / "features" / "user-auth"
        assert sorted(p.name for p in feature.iterdir()) == FEATURE_TEMPLATES

    def test_existing_feature(self, tmp_path: Path) -> None:
        specs = install_templates(tmp_path / "specs")
        add_feature(specs, "search", FEATURE_TEMPLATES)
        with pytest.raises(FeatureExistsError, match="search"):
            add_feature(specs, "search", FEATURE_TEMPLATES)

    @pytest.mark.parametrize("name", ["", "  ", ".", "..", "a/b", "..\\up"])
    def test_invalid_names(self, name: str, tmp_path: Path) -> None:
        specs = install_templates(tmp_path / "specs")
        with pytest.raises(InvalidFeatureNameError):
            add_feature(specs, name, FEATURE_TEMPLATES)

    def test_features_folder_recreated_if_deleted(self, tmp_path: Path) -> None:
        specs = install_templates(tmp_path / "specs")
        (specs / "features").rmdir()
        assert add_feature(specs, "x", ["02-prd.md"]).is_dir()


class TestUpdateGitignore:

    def test_creates_file(self, tmp_path: Path) -> None:
        assert update_gitignore(tmp_path, tmp_path / "specs") is True
        assert (tmp_path / ".gitignore").read_text() == f"{GITIGNORE_HEADER}\nspecs/drafts/\n"

    def test_appends_to_existing(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("node_modules/\n")
        assert update_gitignore(tmp_path, tmp_path / "specs") is True
        assert (tmp_path / ".gitignore").read_text() == (
            f"node_modules/\n\n{GITIGNORE_HEADER}\nspecs/drafts/\n"
        )

    def test_second_run_is_noop(self, tmp_path: Path) -> None:
        update_gitignore(tmp_path, tmp_path / "specs")
        before = (tmp_path / ".gitignore").read_text()
        assert update_gitignore(tmp_path, tmp_path / "specs") is False
        assert (tmp_path / ".gitignore").read_text() == before

    def test_already_ignored_by_pattern(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("drafts/\n")
        assert update_gitignore(tmp_path, tmp_path / "specs") is False
        assert (tmp_path / ".gitignore").read_text() == "drafts/\n"

    def test_deeper_path_with_same_suffix_does_not_count(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("docs/specs/drafts/\n")
        assert update_gitignore(tmp_path, tmp_path / "specs") is True
        assert (tmp_path / ".gitignore").read_text().endswith("\nspecs/drafts/\n")
        assert ProjectReader(tmp_path).is_ignored("specs/drafts/")

    def test_commented_entry_does_not_count(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("# specs/drafts/ used to be ignored\n")
        assert update_gitignore(tmp_path, tmp_path / "specs") is True
        assert ProjectReader(tmp_path).is_ignored("specs/drafts/")

    def test_file_pattern_does_not_cover_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_text("*.md\n")
        assert update_gitignore(tmp_path, tmp_path / "specs") is True
        assert "specs/drafts/\n" in (tmp_path / ".gitignore").read_text()

    def test_nested_specs_dir(self, tmp_path: Path) -> None:
        update_gitignore(tmp_path, tmp_path / "docs" / "specs")
        assert "docs/specs/drafts/\n" in (tmp_path / ".gitignore").read_text()

    def test_write_failure_propagates(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").mkdir()
        with pytest.raises(OSError):
            update_gitignore(tmp_path, tmp_path / "specs")
