"""``skillport remove <skill-id>`` - Delete an installed skill.

Exit Codes:
    0 - Skill removed.
    1 - Skill not installed, removal declined, or the store could not be
        modified.
"""

from __future__ import annotations

import sys

import click

from skillport.cli import output
from skillport.cli.common import AGENT_CHOICE, resolve_profiles
from skillport.exceptions import SkillportError
from skillport.install.store import remove


@click.command("remove")
@click.argument("skill_id")
@click.option("--agent", "-a", default=None, type=AGENT_CHOICE,
              help="Agent whose store to modify. Detected when omitted.")
@click.option("--global", "-g", "global_scope", is_flag=True, default=False,
              help="Use the home-directory store instead of the project one.")
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation.")
def remove_command(skill_id: str, agent: str | None, global_scope: bool, yes: bool) -> None:
    """Remove an installed skill."""
    profile = resolve_profiles([agent] if agent else [], global_scope)[0]
    if not yes and not click.confirm(f"Remove '{skill_id}' from {profile.type}?", default=False):
        output.info("Aborted.")
        sys.exit(1)

    try:
        removed = remove(skill_id, profile)
    except SkillportError as exc:
        output.error(str(exc))
        sys.exit(1)

    if not removed:
        output.error(f"Skill '{skill_id}' is not installed for {profile.type}")
        sys.exit(1)
    output.success(f"Removed {skill_id} from {profile.type}")
