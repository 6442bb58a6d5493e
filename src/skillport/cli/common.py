"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Coroutine, Sequence
from typing import Any, TypeVar

import click

from skillport.install.agents import AGENT_TABLE, AgentProfile, detect_agent, get_profile

T = TypeVar("T")

AGENT_CHOICE = click.Choice(sorted(AGENT_TABLE))


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine in a synchronous context."""
    return asyncio.run(coro)


def resolve_profiles(agents: Sequence[str], global_scope: bool) -> list[AgentProfile]:
    """Build one profile per requested agent, or for the detected one."""
    selected = list(dict.fromkeys(agents)) or [detect_agent()]
    return [get_profile(agent, global_scope=global_scope) for agent in selected]


def click_picker(prompt: str, options: list[str]) -> str:
    """Ask the user to choose one option by number."""
    click.echo(prompt + ":", err=True)
    for index, option in enumerate(options, start=1):
        click.echo(f"  {index}) {option}", err=True)
    choice = click.prompt("Number", type=click.IntRange(1, len(options)), err=True)
    return options[choice - 1]


def interactive() -> bool:
    """True when prompts can be answered."""
    return sys.stdin.isatty()
