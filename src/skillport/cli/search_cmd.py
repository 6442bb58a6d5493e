"""``skillport search <query>`` - Search the skills registry.

Exit Codes:
    0 - Search completed (possibly with no results).
"""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from skillport.cli import output
from skillport.cli.common import run_async
from skillport.config import SkillportConfig
from skillport.registry.client import RegistryClient
from skillport.registry.models import SearchPage
from skillport.remote.http_client import HttpClient


async def _search(config: SkillportConfig, query: str, limit: int, page: int) -> SearchPage:
    async with HttpClient(config) as http:
        return await RegistryClient(http).search(query, limit=limit, page=page)


@click.command("search")
@click.argument("query")
@click.option("--limit", default=20, type=click.IntRange(1, 100), help="Results per page (default 20).")
@click.option("--page", default=1, type=click.IntRange(1), help="Page number (default 1).")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def search_command(
    config: SkillportConfig,
    query: str,
    limit: int,
    page: int,
    output_format: str,
) -> None:
    """Search the registry for skills.

    Examples:

        skillport search react

        skillport search testing --limit 5 --format json
    """
    result = run_async(_search(config, query, limit, page))
    if output_format == "json":
        click.echo(json.dumps(asdict(result), indent=2))
        return
    output.info(f"Searching for: [bold]{query}[/bold]")
    output.print_search_results(query, result)
