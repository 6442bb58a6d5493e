"""``skillport add <reference>`` - Resolve a skill and install it.

Accepted references:
    owner/repo                       Default (or only) skill of a repository
    owner/repo/skill                 A named skill inside a repository
    https://github.com/o/r/tree/...  A URL pointing at the skill directory
    skill-id                         A registry identifier

Exit Codes:
    0 - Installed into every requested agent.
    1 - Skill not found, ambiguous, or a local write failed.
    2 - The reference is malformed or unsupported.
"""

from __future__ import annotations

import sys

import click

from skillport.cli import output
from skillport.cli.common import AGENT_CHOICE, click_picker, interactive, resolve_profiles, run_async
from skillport.config import SkillportConfig
from skillport.exceptions import (
    AmbiguousMatchError,
    ClassificationError,
    NotFoundError,
    SkillportError,
)
from skillport.install.agents import AgentProfile
from skillport.installer import AddReport, SkillInstaller
from skillport.remote.http_client import HttpClient
from skillport.resolver.tree_scan import Picker


async def _add(
    config: SkillportConfig,
    reference: str,
    profiles: list[AgentProfile],
    skill_name: str | None,
    picker: Picker | None,
) -> AddReport:
    async with HttpClient(config) as http:
        installer = SkillInstaller(http, picker=picker)
        return await installer.add(reference, profiles, skill_name=skill_name)


@click.command("add")
@click.argument("reference")
@click.option(
    "--agent", "-a", "agents",
    multiple=True,
    type=AGENT_CHOICE,
    help="Target agent (repeatable). Detected when omitted.",
)
@click.option("--global", "-g", "global_scope", is_flag=True, default=False,
              help="Install into the home directory instead of the project.")
@click.option("--skill", "-s", "skill_name", default=None,
              help="Skill to pick when the repository contains several.")
@click.option("--yes", "-y", is_flag=True, default=False,
              help="Never prompt; fail when the choice is ambiguous.")
@click.pass_obj
def add_command(
    config: SkillportConfig,
    reference: str,
    agents: tuple[str, ...],
    global_scope: bool,
    skill_name: str | None,
    yes: bool,
) -> None:
    """Install a skill from GitHub or the skills registry.

    Examples:

        skillport add vercel-labs/agent-skills/react-best-practices

        skillport add anthropics/skills --skill frontend-design -a claude -a cursor
    """
    profiles = resolve_profiles(agents, global_scope)
    if not agents:
        output.info(f"Detected agent: [bold]{profiles[0].type}[/bold]")
    output.info(f"Installing skill: [bold]{reference}[/bold]")

    picker = click_picker if not yes and interactive() else None
    try:
        report = run_async(_add(config, reference, profiles, skill_name, picker))
    except ClassificationError as exc:
        output.error(str(exc))
        sys.exit(2)
    except AmbiguousMatchError as exc:
        output.error(str(exc))
        for choice in exc.choices:
            click.echo(f"  • {choice}")
        output.info("Re-run with --skill <name> to choose one.")
        sys.exit(1)
    except NotFoundError as exc:
        output.error(str(exc))
        if exc.available:
            output.info("Re-run with --skill <name> using one of the names above.")
        sys.exit(1)
    except SkillportError as exc:
        output.error(str(exc))
        sys.exit(1)

    output.print_add_report(report)
    sys.exit(0 if report.ok else 1)
