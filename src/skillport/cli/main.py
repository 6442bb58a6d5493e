"""skillport CLI - Install agent skills from GitHub and the skills registry.

Entry point for the ``skillport`` command-line tool. Registers all
subcommands under a single Click group and builds the shared
``SkillportConfig`` from the global options.

Commands:
    add      - Resolve a skill reference and install it (alias: install).
    list     - List installed skills (alias: ls).
    remove   - Remove an installed skill (alias: rm).
    search   - Search the skills registry.
    agents   - List supported agents and their skill locations.

Usage::

    skillport add vercel-labs/agent-skills/react-best-practices
    skillport add anthropics/skills --skill frontend-design --agent claude
    skillport add https://github.com/acme/widgets/tree/main/skills/react-tips
    skillport search react
    skillport list --global
    skillport remove react-tips --yes

Environment:
    SKILLS_API_URL    Registry base URL (default: https://skills.lc)
    SKILLS_API_TOKEN  Optional bearer token for the registry
    GITHUB_TOKEN      Optional GitHub token (higher API rate limits)
"""

from __future__ import annotations

import logging

import click

from skillport import __version__
from skillport.cli.add_cmd import add_command
from skillport.cli.agents_cmd import agents_command
from skillport.cli.list_cmd import list_command
from skillport.cli.remove_cmd import remove_command
from skillport.cli.search_cmd import search_command
from skillport.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT, SkillportConfig


@click.group()
@click.version_option(version=__version__)
@click.option("--api-url", envvar="SKILLS_API_URL", default=DEFAULT_API_BASE, show_default=True,
              help="Skills registry base URL.")
@click.option("--api-token", envvar="SKILLS_API_TOKEN", default=None,
              help="Bearer token for the registry.")
@click.option("--github-token", envvar="GITHUB_TOKEN", default=None,
              help="GitHub token for higher API rate limits.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, type=click.FloatRange(min=0.1), show_default=True,
              help="Per-request timeout in seconds.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every request.")
@click.pass_context
def cli(
    ctx: click.Context,
    api_url: str,
    api_token: str | None,
    github_token: str | None,
    timeout: float,
    verbose: bool,
) -> None:
    """skillport: Install AI agent skills from GitHub.

    Resolves owner/repo, owner/repo/skill, GitHub URLs and registry ids to
    a SKILL.md and its assets, and installs them for Claude Code, Cursor,
    Codex and 25+ other agents.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = SkillportConfig(
        api_base=api_url,
        api_token=api_token or None,
        github_token=github_token or None,
        timeout=timeout,
    )


# Register all subcommands
cli.add_command(add_command)
cli.add_command(add_command, name="install")
cli.add_command(list_command)
cli.add_command(list_command, name="ls")
cli.add_command(remove_command)
cli.add_command(remove_command, name="rm")
cli.add_command(search_command)
cli.add_command(agents_command)
