"""``skillport list`` - Show the skills installed for an agent.

Exit Codes:
    0 - Always (informational command).
"""

from __future__ import annotations

import click

from skillport.cli import output
from skillport.cli.common import AGENT_CHOICE, resolve_profiles
from skillport.install.store import list_installed


@click.command("list")
@click.option("--agent", "-a", default=None, type=AGENT_CHOICE,
              help="Agent whose store to list. Detected when omitted.")
@click.option("--global", "-g", "global_scope", is_flag=True, default=False,
              help="List the home-directory store instead of the project one.")
def list_command(agent: str | None, global_scope: bool) -> None:
    """List installed skills."""
    profile = resolve_profiles([agent] if agent else [], global_scope)[0]
    output.print_installed(profile, list_installed(profile))
