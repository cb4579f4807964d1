"""Tests for agent config detection."""

from __future__ import annotations

from pathlib import Path

from bauspec.detection.agent_configs import (
    AGENT_CONFIG_CATALOG,
    detect_agent_configs,
    distinct_agents,
)
from bauspec.schemas.agents import Agent, AgentConfigMatch


class TestCatalog:

    def test_paths_are_unique(self) -> None:
        paths = [entry.path for entry in AGENT_CONFIG_CATALOG]
        assert len(paths) == len(set(paths)) == 18

    def test_every_agent_has_an_entry(self) -> None:
        assert {entry.agent for entry in AGENT_CONFIG_CATALOG} == set(Agent)


class TestDetectAgentConfigs:

    def test_claude_instructions(self, make_project) -> None:
        root = make_project({"CLAUDE.md": "# Rules"})
        assert detect_agent_configs(root) == [
            AgentConfigMatch(path="CLAUDE.md", agent=Agent.CLAUDE_CODE, kind="instructions"),
        ]

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert detect_agent_configs(tmp_path) == []

    def test_unsearchable_directory_counts_as_absent(self, make_project, unsearchable_claude_dir) -> None:
        root = make_project({".claude/settings.json": {}, ".claude/skills/": None, "CLAUDE.md": ""})
        assert [m.path for m in detect_agent_configs(root)] == ["CLAUDE.md"]

    def test_result_follows_catalog_order(self, make_project) -> None:
        root = make_project({
            ".continuerules": "",
            ".specify/": None,
            "CLAUDE.md": "",
            ".cursorrules": "",
        })
        assert [m.path for m in detect_agent_configs(root)] == [
            "CLAUDE.md",
            ".cursorrules",
            ".specify",
            ".continuerules",
        ]

    def test_directories_and_nested_files(self, make_project) -> None:
        root = make_project({
            ".claude/settings.json": {},
            ".claude/skills/": None,
            ".cursor/rules/": None,
            ".github/copilot-instructions.md": "",
        })
        matches = detect_agent_configs(root)
        assert [(m.agent, m.kind) for m in matches] == [
            (Agent.CLAUDE_CODE, "settings"),
            (Agent.CLAUDE_CODE, "skills directory"),
            (Agent.CURSOR, "rules directory"),
            (Agent.GITHUB_COPILOT, "instructions"),
        ]

    def test_a_file_where_a_directory_is_expected_still_counts(self, make_project) -> None:
        root = make_project({".gemini": "legacy file"})
        assert [m.agent for m in detect_agent_configs(root)] == [Agent.GEMINI]

    def test_unrelated_paths_ignored(self, make_project) -> None:
        root = make_project({"claude.txt": "", ".github/workflows/ci.yml": ""})
        assert detect_agent_configs(root) == []


class TestDistinctAgents:

    def test_deduplicates_in_first_seen_order(self) -> None:
        matches = [
            AgentConfigMatch(path="CLAUDE.md", agent=Agent.CLAUDE_CODE, kind="instructions"),
            AgentConfigMatch(path=".cursorrules", agent=Agent.CURSOR, kind="rules"),
            AgentConfigMatch(path=".claude/skills", agent=Agent.CLAUDE_CODE, kind="skills directory"),
        ]
        assert distinct_agents(matches) == [Agent.CLAUDE_CODE, Agent.CURSOR]
