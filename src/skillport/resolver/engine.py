"""Resolution engine: from free-form input to a ``ResolvedSkill``.

Strategy cascade, cheapest and most precise first:

1. Registry lookup for identifier-shaped input (a bare id, or the
   three-segment ``owner/repo/skill`` form). A returned URL short-circuits
   all path guessing.
2. Tree scan: one listing call per branch, then disambiguation.
3. Brute-force probing of candidate paths on each branch.

Transport failures never escape a strategy; they only move resolution on
to the next one. ``NotFoundError`` is raised once every strategy is
exhausted.
"""

from __future__ import annotations

import dataclasses
import logging
import posixpath

from skillport.exceptions import ClassificationError, NotFoundError, UnsupportedSourceError
from skillport.registry.client import RegistryClient
from skillport.registry.models import RegistryRecord
from skillport.remote.http_client import HttpClient
from skillport.remote.tree import TreeClient
from skillport.resolver.candidates import SKILL_FILENAME, build_candidates
from skillport.resolver.models import ResolvedSkill
from skillport.resolver.prober import RepositoryProber, skill_id_from_path
from skillport.resolver.reference import (
    GITHUB_HOST,
    GitUrl,
    LocalPath,
    RegistryId,
    RepoShorthand,
    RepoUrl,
    SkillReference,
    classify,
    is_url,
)
from skillport.resolver.tree_scan import Picker, scan_tree, select_skill

logger = logging.getLogger(__name__)


class SkillResolver:
    """Resolves skill references against the registry and GitHub.

    Usage::

        async with HttpClient(config) as http:
            resolver = SkillResolver(http)
            skill = await resolver.resolve("anthropics/skills/frontend-design")
    """

    def __init__(self, http: HttpClient, *, picker: Picker | None = None) -> None:
        self.tree = TreeClient(http)
        self.registry = RegistryClient(http)
        self._branches = http.config.branches
        self._prober = RepositoryProber(self.tree, self._branches)
        self._picker = picker

    async def resolve(
        self,
        reference: str | SkillReference,
        *,
        skill_name: str | None = None,
    ) -> ResolvedSkill:
        """Resolve a reference to a skill and its ``SKILL.md`` content.

        Args:
            reference: Raw user input or an already classified reference.
            skill_name: Explicit skill selection, used when the reference
                itself names none (e.g. ``owner/repo --skill foo``).

        Raises:
            ClassificationError: Malformed input.
            UnsupportedSourceError: Local paths, git URLs, non-GitHub hosts.
            NotFoundError: No strategy located the skill.
            AmbiguousMatchError: Several skills found and none selected.
        """
        ref = classify(reference) if isinstance(reference, str) else reference
        _reject_unsupported(ref)

        if isinstance(ref, RegistryId):
            resolved = await self._resolve_from_registry(ref.identifier)
            if resolved is None:
                raise NotFoundError(
                    f"Skill '{ref.identifier}' was not found in the registry. "
                    "Use owner/repo/skill to install directly from GitHub.",
                    target=ref.identifier,
                )
            return resolved

        if isinstance(ref, RepoShorthand):
            if ref.skill_id is not None:
                resolved = await self._resolve_from_registry(ref.skill_id)
                if resolved is not None:
                    return resolved
            return await self._discover(ref.owner, ref.repo, ref.skill_name or skill_name)

        if not isinstance(ref, RepoUrl):
            raise ClassificationError(f"Unsupported skill reference: {ref!r}")
        origin_url = reference.strip() if isinstance(reference, str) else None
        if ref.tree_path:
            return await self._resolve_tree_path(ref, origin_url=origin_url)
        return await self._discover(ref.owner, ref.repo, skill_name, origin_url=origin_url)

    async def _resolve_from_registry(self, identifier: str) -> ResolvedSkill | None:
        record = await self.registry.lookup_by_id(identifier)
        if record is None:
            logger.info("Registry has no entry for %s", identifier)
            return None
        try:
            return await self._resolve_record(record, identifier)
        except (ClassificationError, NotFoundError) as exc:
            logger.warning("Registry URL for %s could not be resolved: %s", identifier, exc)
            return None

    async def _resolve_record(self, record: RegistryRecord, identifier: str) -> ResolvedSkill:
        ref = classify(record.origin_url)
        if not isinstance(ref, RepoUrl):
            raise ClassificationError(f"Registry returned a non-repository URL: {record.origin_url}")
        _reject_unsupported(ref)

        skill_id = _short_id(record.skill_id) or _short_id(identifier)
        if ref.tree_path:
            return await self._resolve_tree_path(ref, origin_url=record.origin_url, skill_id=skill_id)
        return await self._discover(ref.owner, ref.repo, skill_id, origin_url=record.origin_url)

    async def _resolve_tree_path(
        self,
        ref: RepoUrl,
        *,
        origin_url: str | None,
        skill_id: str | None = None,
    ) -> ResolvedSkill:
        """Resolve a URL that already points into the repository."""
        tree_path = ref.tree_path or ""
        branch = ref.branch or self._branches[0]
        leaf = posixpath.basename(tree_path)

        if tree_path.endswith(".md"):
            file_path = tree_path
            is_skill_file = leaf == SKILL_FILENAME
            containing_dir = posixpath.dirname(tree_path) if is_skill_file else None
            derived_id = skill_id_from_path(tree_path) if is_skill_file else leaf[: -len(".md")]
        else:
            file_path = f"{tree_path}/{SKILL_FILENAME}"
            containing_dir = tree_path
            derived_id = leaf

        content = await self.tree.fetch_raw(ref.owner, ref.repo, branch, file_path)
        if content is not None:
            return ResolvedSkill(
                skill_id=skill_id or derived_id or ref.repo,
                content=content,
                source_repo=ref.source,
                origin_url=origin_url,
                containing_dir=containing_dir,
                branch=branch,
            )

        logger.info("No %s at %s@%s, searching the repository", file_path, ref.source, branch)
        return await self._discover(ref.owner, ref.repo, skill_id or derived_id, origin_url=origin_url)

    async def _discover(
        self,
        owner: str,
        repo: str,
        skill_name: str | None,
        *,
        origin_url: str | None = None,
    ) -> ResolvedSkill:
        """Tree scan first, brute-force probing second."""
        source = f"{owner}/{repo}"

        scan = await scan_tree(self.tree, owner, repo, self._branches)
        if scan is not None:
            selected = select_skill(scan.skills, skill_name, source=source, picker=self._picker)
            if selected is not None:
                content = await self.tree.fetch_raw(owner, repo, scan.branch, selected.path)
                if content is not None:
                    return ResolvedSkill(
                        skill_id=selected.name,
                        content=content,
                        source_repo=source,
                        origin_url=origin_url,
                        containing_dir=selected.containing_dir,
                        branch=scan.branch,
                    )
                logger.warning("Listed %s but could not download it", selected.path)

        resolved = await self._prober.probe(owner, repo, build_candidates(skill_name), skill_name)
        if resolved is None:
            detail = f" for skill '{skill_name}'" if skill_name else ""
            raise NotFoundError(
                f"Could not find SKILL.md in {source}{detail}",
                target=f"{source}/{skill_name}" if skill_name else source,
            )
        if origin_url:
            resolved = dataclasses.replace(resolved, origin_url=origin_url)
        return resolved


def _reject_unsupported(ref: SkillReference) -> None:
    if isinstance(ref, LocalPath):
        raise UnsupportedSourceError(
            f"Local paths are not supported: {ref.path}. Push the skill to GitHub "
            "and install it with owner/repo/skill."
        )
    if isinstance(ref, GitUrl):
        raise UnsupportedSourceError(
            f"git clone URLs are not supported. Use {ref.owner}/{ref.repo} instead."
        )
    if isinstance(ref, RepoUrl) and ref.host != GITHUB_HOST:
        raise UnsupportedSourceError(f"Only GitHub repositories are supported, not {ref.host}.")


def _short_id(value: str | None) -> str | None:
    """Reduce ``owner/repo/skill`` to ``skill``; drop URLs."""
    if not value or is_url(value):
        return None
    return value.rstrip("/").rsplit("/", 1)[-1] or None
