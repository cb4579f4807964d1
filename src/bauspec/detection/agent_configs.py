"""Detect configuration left behind by AI coding agents."""

from __future__ import annotations

import logging
from pathlib import Path

from bauspec.schemas.agents import Agent, AgentConfigMatch
from bauspec.shared.project_reader import ProjectReader

logger = logging.getLogger(__name__)

# (path relative to project root, owning agent, what the path is)
AGENT_CONFIG_CATALOG: tuple[AgentConfigMatch, ...] = (
    AgentConfigMatch(path="CLAUDE.md", agent=Agent.CLAUDE_CODE, kind="instructions"),
    AgentConfigMatch(path=".claude/settings.json", agent=Agent.CLAUDE_CODE, kind="settings"),
    AgentConfigMatch(path=".claude/skills", agent=Agent.CLAUDE_CODE, kind="skills directory"),
    AgentConfigMatch(path=".cursorrules", agent=Agent.CURSOR, kind="rules"),
    AgentConfigMatch(path=".cursor/rules", agent=Agent.CURSOR, kind="rules directory"),
    AgentConfigMatch(path=".windsurfrules", agent=Agent.WINDSURF, kind="rules"),
    AgentConfigMatch(path=".github/copilot-instructions.md", agent=Agent.GITHUB_COPILOT, kind="instructions"),
    AgentConfigMatch(path=".github/agents", agent=Agent.GITHUB_COPILOT, kind="agents directory"),
    AgentConfigMatch(path="AGENTS.md", agent=Agent.GEMINI_ANTIGRAVITY, kind="instructions"),
    AgentConfigMatch(path=".gemini", agent=Agent.GEMINI, kind="config directory"),
    AgentConfigMatch(path=".antigravity", agent=Agent.ANTIGRAVITY, kind="config directory"),
    AgentConfigMatch(path="agent-os", agent=Agent.AGENT_OS, kind="installation"),
    AgentConfigMatch(path=".agent-os", agent=Agent.AGENT_OS_LEGACY, kind="installation"),
    AgentConfigMatch(path=".specify", agent=Agent.SPEC_KIT, kind="installation"),
    AgentConfigMatch(path="openspec", agent=Agent.OPENSPEC, kind="installation"),
    AgentConfigMatch(path=".bmad", agent=Agent.BMAD, kind="installation"),
    AgentConfigMatch(path=".roomodes", agent=Agent.ROO_CODE, kind="config"),
    AgentConfigMatch(path=".continuerules", agent=Agent.CONTINUE, kind="rules"),
)


def detect_agent_configs(project_root: str | Path) -> list[AgentConfigMatch]:
    """Return every catalog entry present under ``project_root``, in catalog order."""
    reader = ProjectReader(project_root)
    matches = [entry for entry in AGENT_CONFIG_CATALOG if reader.exists(entry.path)]
    logger.debug("Agent configs in %s: %s", reader.root, [m.path for m in matches])
    return matches


def distinct_agents(matches: list[AgentConfigMatch]) -> list[Agent]:
    """Agents owning at least one match, first-seen order."""
    return list(dict.fromkeys(match.agent for match in matches))
