"""Brute-force repository probing.

Walks the branch x candidate product in generator order, issuing one raw
content request per attempt, and stops at the first 200. This is the most
expensive and least precise strategy (roughly 80-300 requests in the worst
case) and is only used once the tree scan has come up empty.

A consequence of stopping at the first hit: a later, possibly better
match is never seen.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence

from skillport.config import DEFAULT_BRANCHES
from skillport.remote.tree import TreeClient
from skillport.resolver.candidates import SKILL_FILENAME, Candidate, rank_candidates
from skillport.resolver.models import ResolvedSkill

logger = logging.getLogger(__name__)

_SKILL_DIR_RE = re.compile(r"(?:^|/)([^/]+)/SKILL\.md$")


class RepositoryProber:
    """Finds a skill file by trying candidate paths one by one."""

    def __init__(self, tree_client: TreeClient, branches: Sequence[str] = DEFAULT_BRANCHES) -> None:
        self._tree = tree_client
        self._branches = tuple(branches)

    def attempts(self, candidates: Sequence[str]) -> Iterator[tuple[str, Candidate]]:
        """Lazily yield ``(branch, candidate)`` pairs in probing order."""
        ranked = rank_candidates(list(candidates))
        for branch in self._branches:
            for candidate in ranked:
                yield branch, candidate

    async def probe(
        self,
        owner: str,
        repo: str,
        candidates: Sequence[str],
        skill_id: str | None = None,
    ) -> ResolvedSkill | None:
        """Return the first candidate that exists, or None.

        Args:
            owner: Repository owner.
            repo: Repository name.
            candidates: Ordered relative paths from ``build_candidates``.
            skill_id: Explicit skill id, if the user gave one.

        Returns:
            The resolved skill, or None when no candidate exists on any
            branch.
        """
        for branch, candidate in self.attempts(candidates):
            content = await self._tree.fetch_raw(owner, repo, branch, candidate.path)
            if content is None:
                continue
            logger.debug(
                "Found %s in %s/%s@%s (rank %d)", candidate.path, owner, repo, branch, candidate.rank,
            )
            return ResolvedSkill(
                skill_id=skill_id or skill_id_from_path(candidate.path) or repo,
                content=content,
                source_repo=f"{owner}/{repo}",
                containing_dir=containing_dir_of(candidate.path),
                branch=branch,
            )
        return None


def skill_id_from_path(path: str) -> str | None:
    """Extract ``my-skill`` from ``skills/my-skill/SKILL.md``."""
    match = _SKILL_DIR_RE.search(path)
    return match.group(1) if match else None


def containing_dir_of(path: str) -> str | None:
    """Directory to mirror for a probed path.

    ``""`` for a root ``SKILL.md``, the parent directory for any other
    ``SKILL.md``, and None for single-file skills.
    """
    if path == SKILL_FILENAME:
        return ""
    if path.endswith("/" + SKILL_FILENAME):
        return path[: -len("/" + SKILL_FILENAME)]
    return None
