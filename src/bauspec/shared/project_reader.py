"""Read-only access to marker files in a project root."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import pathspec
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class DocumentStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    UNPARSABLE = "unparsable"


class JsonDocument(BaseModel):
    """A structured file as seen by the detectors.

    ``data`` is always a dict: it is empty unless ``status`` is ``FOUND``,
    so callers that only look at ``data`` treat an unparsable file exactly
    like a missing one.
    """

    path: str
    status: DocumentStatus
    data: dict[str, Any] = {}

    @property
    def found(self) -> bool:
        return self.status is DocumentStatus.FOUND

    def mapping(self, key: str) -> dict[str, Any]:
        """Return ``data[key]`` when it is a JSON object, else an empty dict."""
        value = self.data.get(key)
        return value if isinstance(value, dict) else {}


class ProjectReader:
    """Existence checks and whole-file reads relative to a project root.

    Nothing here raises for missing or malformed files; absence of
    evidence is a normal answer.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    def exists(self, subpath: str) -> bool:
        """True if a file or directory exists at ``subpath``."""
        target = self.root / subpath
        try:
            return target.exists()
        except OSError as exc:
            logger.debug("Could not stat %s: %s", target, exc)
            return False

    def read_text(self, subpath: str) -> str | None:
        """Return a file's contents, or None if it is missing or unreadable."""
        target = self.root / subpath
        try:
            if not target.is_file():
                return None
            return target.read_text(errors="replace")
        except OSError as exc:
            logger.debug("Could not read %s: %s", target, exc)
            return None

    def read_json(self, subpath: str) -> JsonDocument:
        """Parse a JSON object file into a :class:`JsonDocument`."""
        text = self.read_text(subpath)
        if text is None:
            return JsonDocument(path=subpath, status=DocumentStatus.ABSENT)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug("Ignoring unparsable %s: %s", subpath, exc)
            return JsonDocument(path=subpath, status=DocumentStatus.UNPARSABLE)
        if not isinstance(data, dict):
            logger.debug("Ignoring %s: top level is %s, not an object", subpath, type(data).__name__)
            return JsonDocument(path=subpath, status=DocumentStatus.UNPARSABLE)
        return JsonDocument(path=subpath, status=DocumentStatus.FOUND, data=data)

    def is_ignored(self, subpath: str) -> bool:
        """True if the project's .gitignore rules match ``subpath``."""
        text = self.read_text(".gitignore")
        if text is None:
            return False
        spec = pathspec.PathSpec.from_lines("gitignore", text.splitlines())
        return spec.match_file(subpath)
