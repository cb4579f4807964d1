"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

ProjectFactory = Callable[[dict[str, Any]], Path]


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Return a factory that lays out a fake project under ``tmp_path``.

    Keys are relative paths.  Dict values are written as JSON, strings as
    text, and a key ending in ``/`` creates a directory.
    """

    def _make(files: dict[str, Any]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            if rel.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, dict):
                content = json.dumps(content)
            path.write_text(content or "")
        return tmp_path

    return _make


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    cfg = tmp_path / "bauspec.yml"
    cfg.write_text(
        """\
specs_dir: "docs/specs"
update_gitignore: false
"""
    )
    return cfg


@pytest.fixture
def unsearchable_claude_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make anything below ``.claude/`` fail to stat, like a mode-000 directory."""
    real_exists, real_is_file = Path.exists, Path.is_file

    def _guard(real):
        def check(self, *args, **kwargs):
            if ".claude" in self.parts[:-1]:
                raise PermissionError(13, "Permission denied", str(self))
            return real(self, *args, **kwargs)
        return check

    monkeypatch.setattr(Path, "exists", _guard(real_exists))
    monkeypatch.setattr(Path, "is_file", _guard(real_is_file))
