"""Pydantic model for the stack detector's output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Language(str, Enum):
    """Languages the stack detector can report."""

    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"
    GO = "Go"
    RUST = "Rust"


class DetectedStack(BaseModel):
    """Everything the detector inferred about a project.

    Built once per detection pass and frozen afterwards.  Each singular
    field holds at most one label; ``stack`` collects auxiliary tools
    (validation, testing) in detection order.
    """

    model_config = ConfigDict(frozen=True)

    language: Language | None = None
    framework: str | None = None
    styling: str | None = None
    database: str | None = None
    auth: str | None = None
    deployment: str | None = None
    package_manager: str | None = None
    stack: tuple[str, ...] = ()

    def summary_items(self) -> list[str]:
        """Human-readable ``Label: value`` lines for every detected field."""
        items = [
            f"Language: {self.language.value}" if self.language else None,
            f"Framework: {self.framework}" if self.framework else None,
            f"Styling: {self.styling}" if self.styling else None,
            f"Database: {self.database}" if self.database else None,
            f"Auth: {self.auth}" if self.auth else None,
            f"Deploy: {self.deployment}" if self.deployment else None,
            f"Package manager: {self.package_manager}" if self.package_manager else None,
        ]
        items.extend(f"Tool: {tool}" for tool in self.stack)
        return [item for item in items if item]

    @property
    def is_empty(self) -> bool:
        return not self.summary_items()
