"""Rich console output for the scaffolder's status lines and reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from bauspec.schemas.agents import AgentSuggestion

console = Console()


def success(message: str) -> None:
    console.print(f"  [green]✓[/] {message}")


def warn(message: str) -> None:
    console.print(f"  [yellow]⚠[/] {message}")


def info(message: str) -> None:
    console.print(f"  [cyan]ℹ[/] {message}")


def error(message: str) -> None:
    console.print(f"  [red]✗[/] {message}")


def print_header() -> None:
    console.print(Panel("[bold]Bauspec[/bold]\n[dim]Spec-driven development, no lock-in[/dim]", style="blue"))


def print_phase(label: str) -> None:
    """Print a bold section heading preceded by a blank line."""
    console.print(f"\n  [bold]{label}[/]")


def print_suggestion(suggestion: AgentSuggestion) -> None:
    """Print one agent suggestion; multi-line snippets are shown as an indented block."""
    console.print(
        f"  [cyan]─[/] [bold]{suggestion.agent.value}[/] [dim]({escape(suggestion.file)})[/]"
    )
    console.print(f"    {escape(suggestion.action)}")
    if "\n" in suggestion.snippet:
        console.print("")
        for line in suggestion.snippet.split("\n"):
            console.print(f"    [dim]{escape(line)}[/]")
    else:
        console.print(f"    [dim]{escape(suggestion.snippet)}[/]")
    console.print("")
