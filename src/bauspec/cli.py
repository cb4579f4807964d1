"""Typer CLI: ``bauspec init``, ``bauspec add`` and ``bauspec detect`` commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml
from dotenv import load_dotenv

from bauspec.config import resolve_config
from bauspec.detection.agent_configs import detect_agent_configs, distinct_agents
from bauspec.detection.stack import detect_stack
from bauspec.output.constitution import prefill_constitution_file
from bauspec.output.suggestions import generate_agent_suggestions
from bauspec.schemas.config import BauspecConfig
from bauspec.shared import scaffold
from bauspec.shared.console import (
    console,
    error,
    info,
    print_header,
    print_phase,
    print_suggestion,
    success,
    warn,
)

# Load .env file from the working directory (if it exists), e.g. BAUSPEC_DIR
load_dotenv()

app = typer.Typer(
    name="bauspec",
    help="Bauspec: install spec-driven development templates into a project.",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_config(project_root: Path, config: Path | None, **overrides: object) -> BauspecConfig:
    """Resolve the config file, then apply command-line overrides through the same validators."""
    try:
        cfg = resolve_config(project_root, config)
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            cfg = BauspecConfig.model_validate({**cfg.model_dump(), **overrides})
        return cfg
    except (OSError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)


@app.command()
def init(
    dir_name: str = typer.Option(None, "--dir", "-d", envvar="BAUSPEC_DIR", help="Specs directory name (default: specs)."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to a .bauspec.yml config file."),
    no_gitignore: bool = typer.Option(False, "--no-gitignore", help="Leave .gitignore untouched."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Install the spec templates, pre-fill the constitution and scan for agent configs."""
    _setup_logging(verbose)

    project_root = Path.cwd().resolve()
    cfg = _load_config(project_root, config, specs_dir=dir_name)
    specs_name = cfg.specs_dir
    specs_dir = (project_root / specs_name).resolve()

    print_header()

    # ── Templates ──────────────────────────────────────────────
    print_phase("Setting up templates...")
    try:
        scaffold.install_templates(specs_dir)
    except scaffold.SpecsDirExistsError:
        warn(f"Directory [bold]{specs_name}/[/] already exists.")
        info("Use a different name with --dir <name>, or delete the existing directory.")
        raise typer.Exit(code=1)
    success(f"Created [bold]{specs_name}/[/] with all templates")
    success(f"Created [bold]{specs_name}/features/[/] for future feature specs")
    success(f"Created [bold]{specs_name}/drafts/[/] for work-in-progress braindumps")

    # ── Stack detection ────────────────────────────────────────
    print_phase("Detecting project stack...")
    detected = detect_stack(project_root)
    if detected.is_empty:
        info("No project files detected. constitution.md left as blank template")
    else:
        for item in detected.summary_items():
            success(item)
        prefill_constitution_file(specs_dir / "constitution.md", detected)
        success("Pre-filled constitution.md with detected stack")

    # ── .gitignore ─────────────────────────────────────────────
    if cfg.update_gitignore and not no_gitignore:
        print_phase("Updating .gitignore...")
        if scaffold.update_gitignore(project_root, specs_dir):
            success(f"Added [bold]{specs_name}/drafts/[/] to .gitignore")
        else:
            info("Already in .gitignore")

    # ── Agent configs ──────────────────────────────────────────
    print_phase("Scanning for AI agent configurations...")
    matches = detect_agent_configs(project_root)
    if not matches:
        info(
            f"No AI agent configs found. Bauspec works with any agent: "
            f"just point it at your {specs_name}/ folder."
        )
    else:
        agents = distinct_agents(matches)
        success(f"Found {len(agents)} agent config(s): {', '.join(a.value for a in agents)}")
        print_phase("Recommended agent config updates:")
        console.print("")
        for suggestion in generate_agent_suggestions(matches, specs_dir):
            print_suggestion(suggestion)

    # ── Next steps ─────────────────────────────────────────────
    console.print("\n  [bold]─────────────────────────────────────[/]")
    console.print("  [bold]Next steps:[/]\n")
    console.print(f"  1. [green]Fill in[/] [bold]{specs_name}/constitution.md[/]: your project's non-negotiable rules")
    console.print(f"  2. [green]Braindump[/] into [bold]{specs_name}/01-braindump.md[/]: messy is fine")
    console.print("  3. [green]Hand off[/] to your AI agent to generate the PRD, architecture, and stories")
    console.print("\n  [dim]For new features:[/]")
    console.print("     bauspec add [dim]feature-name[/]\n")


@app.command()
def add(
    feature: str = typer.Argument(..., help="Feature folder name, e.g. user-auth."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to a .bauspec.yml config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Scaffold a feature folder with its own braindump, PRD and stories."""
    _setup_logging(verbose)

    project_root = Path.cwd().resolve()
    cfg = _load_config(project_root, config)

    try:
        specs_dir = scaffold.find_specs_dir(project_root, cfg.specs_dir_candidates)
        feature_dir = scaffold.add_feature(specs_dir, feature, cfg.feature_templates)
    except scaffold.ScaffoldError as exc:
        error(str(exc))
        raise typer.Exit(code=1)

    print_phase(f"Adding feature: {feature}")
    success(f"Created [bold]features/{feature_dir.name}/[/]")
    success(f"Copied: {', '.join(cfg.feature_templates)}")
    if "03-architecture.md" not in cfg.feature_templates:
        info("Architecture doc skipped: use the project-level one.")
    if cfg.feature_templates:
        console.print(f"\n  Start by filling in [bold]features/{feature_dir.name}/{cfg.feature_templates[0]}[/]\n")


@app.command()
def detect(
    path: Path = typer.Argument(Path("."), exists=True, file_okay=False, help="Project root to inspect."),
    as_json: bool = typer.Option(False, "--json", help="Print the detection results as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Report the detected stack and agent configs without installing anything."""
    _setup_logging(verbose)

    detected = detect_stack(path)
    matches = detect_agent_configs(path)

    if as_json:
        payload = {
            "stack": detected.model_dump(mode="json"),
            "agent_configs": [m.model_dump(mode="json") for m in matches],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    print_phase("Detected stack")
    if detected.is_empty:
        info("Nothing detected")
    for item in detected.summary_items():
        success(item)

    print_phase("Agent configs")
    if not matches:
        info("None found")
    for match in matches:
        success(f"{match.agent.value}: {match.path} ({match.kind})")
