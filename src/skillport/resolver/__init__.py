"""Skill reference resolution.

Classifies user input, then locates the skill through the registry, the
repository tree listing, or brute-force probing, in that order.

Public API::

    from skillport.resolver import SkillResolver, ResolvedSkill, classify

    async with HttpClient(config) as http:
        skill = await SkillResolver(http).resolve("owner/repo/skill")
"""

from __future__ import annotations

from skillport.resolver.candidates import SKILL_DIRECTORIES, Candidate, build_candidates
from skillport.resolver.engine import SkillResolver
from skillport.resolver.models import DiscoveredSkill, ResolvedSkill, TreeScan
from skillport.resolver.prober import RepositoryProber
from skillport.resolver.reference import (
    GitUrl,
    LocalPath,
    RegistryId,
    RepoShorthand,
    RepoUrl,
    SkillReference,
    classify,
)
from skillport.resolver.tree_scan import Picker, scan_tree, select_skill

__all__ = [
    "Candidate",
    "DiscoveredSkill",
    "GitUrl",
    "LocalPath",
    "Picker",
    "RegistryId",
    "RepoShorthand",
    "RepoUrl",
    "RepositoryProber",
    "ResolvedSkill",
    "SKILL_DIRECTORIES",
    "SkillReference",
    "SkillResolver",
    "TreeScan",
    "build_candidates",
    "classify",
    "scan_tree",
    "select_skill",
]
