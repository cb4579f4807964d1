"""Template installation, feature folders and .gitignore upkeep."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from bauspec.shared.project_reader import ProjectReader

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

FEATURES_DIRNAME = "features"
DRAFTS_DIRNAME = "drafts"
GITIGNORE_HEADER = "# Bauspec drafts (braindumps before review)"


class ScaffoldError(Exception):
    """Base error for anything that stops the scaffolder."""


class SpecsDirExistsError(ScaffoldError):
    """The target specs directory is already there."""


class SpecsDirNotFoundError(ScaffoldError):
    """No installed specs directory could be found."""


class FeatureExistsError(ScaffoldError):
    """A feature folder with that name already exists."""


class InvalidFeatureNameError(ScaffoldError, ValueError):
    """Feature names are single directory names."""


def install_templates(specs_dir: str | Path) -> Path:
    """Copy every bundled template into ``specs_dir`` and create the working folders."""
    specs_dir = Path(specs_dir)
    if specs_dir.exists():
        raise SpecsDirExistsError(f"Directory {specs_dir} already exists")

    shutil.copytree(TEMPLATE_DIR, specs_dir, ignore=shutil.ignore_patterns("__pycache__"))
    (specs_dir / FEATURES_DIRNAME).mkdir(parents=True, exist_ok=True)
    (specs_dir / DRAFTS_DIRNAME).mkdir(parents=True, exist_ok=True)
    logger.debug("Installed templates from %s into %s", TEMPLATE_DIR, specs_dir)
    return specs_dir


def find_specs_dir(project_root: str | Path, candidates: list[str]) -> Path:
    """Return the first candidate directory that holds a constitution."""
    root = Path(project_root)
    for candidate in candidates:
        if (root / candidate / "constitution.md").exists():
            return root / candidate
    raise SpecsDirNotFoundError(
        f"No specs directory found (looked for {', '.join(candidates)}). Run `bauspec init` first."
    )


def add_feature(specs_dir: str | Path, name: str, templates: list[str]) -> Path:
    """Create ``features/<name>/`` holding copies of the given templates."""
    name = name.strip()
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise InvalidFeatureNameError(f"Invalid feature name: {name!r}")

    feature_dir = Path(specs_dir) / FEATURES_DIRNAME / name
    if feature_dir.exists():
        raise FeatureExistsError(f"Feature {name} already exists at {feature_dir}")

    feature_dir.mkdir(parents=True)
    for template in templates:
        shutil.copyfile(TEMPLATE_DIR / template, feature_dir / template)
    logger.debug("Created feature %s with %s", feature_dir, templates)
    return feature_dir


def drafts_entry(project_root: str | Path, specs_dir: str | Path) -> str:
    """The drafts directory as a gitignore path, relative to the project root when possible."""
    drafts = Path(specs_dir) / DRAFTS_DIRNAME
    try:
        return drafts.relative_to(project_root).as_posix()
    except ValueError:
        return drafts.as_posix()


def update_gitignore(project_root: str | Path, specs_dir: str | Path) -> bool:
    """Make sure the drafts directory is git-ignored.

    Returns False when nothing had to change.  Write errors propagate.
    """
    root = Path(project_root)
    gitignore = root / ".gitignore"
    relative_drafts = drafts_entry(root, specs_dir)
    entry = f"\n{GITIGNORE_HEADER}\n{relative_drafts}/\n"

    if gitignore.exists():
        if ProjectReader(root).is_ignored(f"{relative_drafts}/"):
            return False
        with gitignore.open("a") as fh:
            fh.write(entry)
    else:
        gitignore.write_text(entry.lstrip())
    logger.debug("Added %s/ to %s", relative_drafts, gitignore)
    return True
