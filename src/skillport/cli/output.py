"""Rich output formatting helpers for the skillport CLI.

Status lines use a consistent glyph and color per kind:
success = green check, error = red cross (stderr), info = cyan dot,
warning = yellow.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from skillport.install.agents import AGENT_TABLE, AgentProfile
from skillport.install.store import InstalledSkill
from skillport.installer import AddReport
from skillport.registry.models import SearchPage
from skillport.skill_md import parse_frontmatter

console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def warning(message: str) -> None:
    err_console.print(f"[yellow]![/yellow] {message}")


def error(message: str) -> None:
    err_console.print(f"[red]✗[/red] {message}")


def _display_path(path: Path) -> str:
    """Shorten paths under the home directory to ``~/...``."""
    home = str(Path.home())
    text = str(path)
    return "~" + text[len(home):] if text.startswith(home + "/") else text


def print_add_report(report: AddReport) -> None:
    """Print the outcome of ``skillport add``.

    Args:
        report: Result of ``SkillInstaller.add``.
    """
    resolved = report.resolved
    meta = parse_frontmatter(resolved.text)
    success(f"Found skill: [bold]{resolved.skill_id}[/bold] ({resolved.source_repo})")
    if meta.description:
        console.print(f"  [dim]{meta.description}[/dim]")

    for outcome in report.outcomes:
        verb = "Updated" if outcome.updated else "Installed"
        success(f"{verb} for {outcome.profile.type}: {_display_path(outcome.path)}")
        if outcome.files_written > 1:
            info(f"{outcome.files_written} file(s) written")
        if outcome.files_failed:
            warning(f"{outcome.files_failed} file(s) could not be downloaded")

    for profile, exc in report.failures:
        error(f"Install for {profile.type} failed: {exc}")

    if report.outcomes:
        if report.recorded:
            info("Install recorded")
        else:
            info("Could not record install (registry may be unavailable)")


def print_installed(profile: AgentProfile, skills: Sequence[InstalledSkill]) -> None:
    """Print the skills installed in one agent store."""
    info(f"Agent: [bold]{profile.type}[/bold]")
    info(f"Store: {_display_path(profile.base_path)}")
    if not skills:
        console.print("[dim]No skills installed yet.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Skill", style="bold")
    table.add_column("Source", style="dim")
    table.add_column("Description")
    for skill in skills:
        table.add_row(skill.skill_id, skill.source or "-", skill.description or "")
    console.print(table)


def print_search_results(query: str, page: SearchPage) -> None:
    """Print one page of registry search results."""
    if not page.skills:
        info(f"No skills found for '{query}'")
        return

    console.print(
        f"Found [bold]{page.total}[/bold] skills (showing {len(page.skills)}):"
    )
    console.print("")
    for skill in page.skills:
        console.print(f"[green]●[/green] [bold]{skill.name}[/bold]")
        console.print(f"  [dim]{skill.install_ref}[/dim]")
        if skill.description:
            console.print(f"  {skill.description}")
        if skill.author:
            console.print(f"  [cyan]Author:[/cyan] {skill.author}")
        if skill.tags:
            console.print(f"  [cyan]Tags:[/cyan] {', '.join(skill.tags)}")
        console.print(f"  [yellow]★[/yellow] {skill.stars} stars")
        console.print("")

    if page.has_more:
        console.print(f"[dim]Showing page {page.page} of {page.total_pages}[/dim]")
    console.print("[dim]To install: skillport add <source/skillId>[/dim]")


def print_agents_table(detected: str) -> None:
    """Print every known agent and its storage locations."""
    table = Table(title="Supported Agents", show_header=True, header_style="bold")
    table.add_column("Agent", style="bold")
    table.add_column("Name")
    table.add_column("Storage")
    table.add_column("Project path")
    table.add_column("Global path")
    for agent_id, paths in AGENT_TABLE.items():
        label = f"{agent_id} *" if agent_id == detected else agent_id
        table.add_row(
            label, paths.name, paths.storage_kind.value, paths.project_path, f"~/{paths.global_path}",
        )
    console.print(table)
    console.print("[dim]* detected in this environment[/dim]")
