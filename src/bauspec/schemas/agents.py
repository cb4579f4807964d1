"""Pydantic models for agent-config detection and the suggestions built from it."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Agent(str, Enum):
    """AI coding agents with a known configuration convention.

    The value is the display name shown to users.
    """

    CLAUDE_CODE = "Claude Code"
    CURSOR = "Cursor"
    WINDSURF = "Windsurf"
    GITHUB_COPILOT = "GitHub Copilot"
    GEMINI_ANTIGRAVITY = "Gemini / Antigravity"
    GEMINI = "Gemini"
    ANTIGRAVITY = "Antigravity"
    AGENT_OS = "Agent OS"
    AGENT_OS_LEGACY = "Agent OS (legacy)"
    SPEC_KIT = "GitHub Spec Kit"
    OPENSPEC = "OpenSpec"
    BMAD = "BMAD-METHOD"
    ROO_CODE = "Roo Code"
    CONTINUE = "Continue"


class AgentConfigMatch(BaseModel):
    """A catalog path that exists in the project."""

    model_config = ConfigDict(frozen=True)

    path: str  # relative to the project root
    agent: Agent
    kind: str  # e.g. "instructions", "rules directory", "installation"


class AgentSuggestion(BaseModel):
    """A recommended edit to an agent's config so it knows about the specs."""

    agent: Agent
    file: str
    action: str
    snippet: str  # may span several lines
