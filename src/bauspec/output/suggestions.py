"""Turn detected agent configs into suggested edits that point agents at the specs."""

from __future__ import annotations

from pathlib import Path

from bauspec.schemas.agents import Agent, AgentConfigMatch, AgentSuggestion


def relative_specs_path(specs_dir: str | Path, cwd: str | Path | None = None) -> str:
    """Express ``specs_dir`` relative to the working directory when it lies inside it."""
    specs = Path(specs_dir)
    base = Path(cwd) if cwd is not None else Path.cwd()
    try:
        return specs.relative_to(base).as_posix()
    except ValueError:
        return specs.as_posix()


def suggest_for(config: AgentConfigMatch, specs: str) -> AgentSuggestion:
    """Build the suggestion for a single match.

    ``specs`` is the already-relativized specs path.  Agents without a
    bespoke message fall through to a generic "add a reference" suggestion.
    """
    constitution = f"{specs}/constitution.md"
    stories = f"{specs}/04-stories.md"

    match config.agent:
        case Agent.CLAUDE_CODE if config.kind == "instructions":
            action = "Add Bauspec context to CLAUDE.md"
            snippet = (
                "\n# Bauspec Specs\n"
                f"Project specifications live in `{specs}/`. "
                f"Always read `{constitution}` before making changes. "
                f"When implementing features, follow the stories in `{stories}` "
                f"or the relevant feature folder under `{specs}/features/`."
            )
        case Agent.CLAUDE_CODE if config.kind == "skills directory":
            action = "Consider adding a Bauspec skill"
            snippet = (
                "Create `.claude/skills/bauspec.md` that teaches Claude to read "
                "and follow your specs directory structure."
            )
        case Agent.CURSOR:
            action = f"Add Bauspec awareness to {config.path}"
            snippet = (
                f"\nAlways read `{constitution}` for project principles before generating code. "
                f"Implementation stories are in `{stories}`."
            )
        case Agent.GITHUB_COPILOT:
            action = f"Add Bauspec context to {config.path}"
            snippet = (
                f"\nProject specs and architecture decisions are documented in `{specs}/`. "
                f"Refer to `{constitution}` for coding standards and constraints."
            )
        case Agent.GEMINI_ANTIGRAVITY:
            action = f"Add Bauspec context to {config.path}"
            snippet = (
                "\n# Project Specifications\n"
                "All product requirements, architecture decisions, and implementation "
                f"stories are in `{specs}/`. Start with `{constitution}` for project principles."
            )
        case Agent.AGENT_OS | Agent.AGENT_OS_LEGACY:
            action = "Bauspec can coexist with Agent OS"
            snippet = (
                "Agent OS manages coding standards; Bauspec manages product specs and stories. "
                "They complement each other. Consider adding your Bauspec constitution "
                "principles as Agent OS standards."
            )
        case Agent.SPEC_KIT | Agent.OPENSPEC | Agent.BMAD:
            name = config.agent.value
            action = f"Existing SDD framework detected: {name}"
            snippet = (
                f"You already have {name} installed. Bauspec can replace it (simpler, lighter) "
                "or coexist alongside it. If replacing, you may want to migrate any existing "
                "specs into the Bauspec format."
            )
        case _:
            action = f"Add Bauspec reference to {config.path}"
            snippet = f"Add a note pointing to `{constitution}` for project principles and constraints."

    return AgentSuggestion(agent=config.agent, file=config.path, action=action, snippet=snippet)


def generate_agent_suggestions(
    matches: list[AgentConfigMatch],
    specs_dir: str | Path,
    *,
    cwd: str | Path | None = None,
) -> list[AgentSuggestion]:
    """One suggestion per match, in the same order."""
    specs = relative_specs_path(specs_dir, cwd)
    return [suggest_for(config, specs) for config in matches]
