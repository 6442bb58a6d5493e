"""``skillport agents`` - List supported agents and where skills go.

Exit Codes:
    0 - Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from skillport.cli import output
from skillport.install.agents import detect_agent


@click.command("agents")
def agents_command() -> None:
    """List supported agents and their skill locations."""
    output.print_agents_table(detect_agent())
