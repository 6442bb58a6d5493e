"""End-to-end ``add`` pipeline: resolve, install per agent, report.

Each agent profile is an independent install: a failure writing to one
store is recorded and the next profile is still attempted. The install
is reported to the registry once, after at least one store succeeded,
and that report can never fail the operation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from skillport.exceptions import SkillIOError
from skillport.install.agents import AgentProfile
from skillport.install.materializer import DirectoryMaterializer
from skillport.install.store import InstallOutcome, install
from skillport.remote.http_client import HttpClient
from skillport.resolver.engine import SkillResolver
from skillport.resolver.models import ResolvedSkill
from skillport.resolver.reference import SkillReference
from skillport.resolver.tree_scan import Picker

logger = logging.getLogger(__name__)


@dataclass
class AddReport:
    """Result of ``SkillInstaller.add``.

    Attributes:
        resolved: The skill that was located.
        outcomes: One entry per store written successfully.
        failures: ``(profile, error)`` for every store that failed.
        recorded: Whether the registry accepted the install report.
    """

    resolved: ResolvedSkill
    outcomes: list[InstallOutcome] = field(default_factory=list)
    failures: list[tuple[AgentProfile, SkillIOError]] = field(default_factory=list)
    recorded: bool = False

    @property
    def ok(self) -> bool:
        return bool(self.outcomes) and not self.failures


class SkillInstaller:
    """Ties the resolver, the materializer and the stores together."""

    def __init__(self, http: HttpClient, *, picker: Picker | None = None) -> None:
        self.resolver = SkillResolver(http, picker=picker)
        self.materializer = DirectoryMaterializer(
            self.resolver.tree, max_concurrency=http.config.max_concurrency,
        )

    async def add(
        self,
        reference: str | SkillReference,
        profiles: Sequence[AgentProfile],
        *,
        skill_name: str | None = None,
        record: bool = True,
    ) -> AddReport:
        """Resolve *reference* and install it into every profile in turn.

        Raises:
            SkillportError: Resolution failures (classification, not
                found, ambiguity). Store failures are collected instead.
        """
        resolved = await self.resolver.resolve(reference, skill_name=skill_name)
        report = AddReport(resolved=resolved)

        for profile in profiles:
            try:
                outcome = await install(resolved, profile, self.materializer)
            except SkillIOError as exc:
                logger.error("Install into %s failed: %s", profile.type, exc)
                report.failures.append((profile, exc))
                continue
            report.outcomes.append(outcome)

        if report.outcomes and record:
            report.recorded = await self.resolver.registry.record_install(
                skill_id=resolved.skill_id, github_url=resolved.origin_url,
            )
        return report
