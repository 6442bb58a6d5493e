"""Skill discovery through the repository tree listing.

One tree call per branch lists every file, so the request cost is
constant regardless of how large the candidate catalog grows. This makes
it the preferred strategy; brute-force probing is the fallback.

Disambiguation rules for the discovered skills:

- zero matches: None, the caller falls back to probing;
- one match: selected;
- several, with a requested name: exact directory name, then exact path
  segment; otherwise ``NotFoundError`` listing every name;
- several candidates left after matching, or no name at all: the
  injected picker chooses, or ``AmbiguousMatchError`` is raised.
  Nothing is ever picked silently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from skillport.config import DEFAULT_BRANCHES
from skillport.exceptions import AmbiguousMatchError, NotFoundError
from skillport.remote.tree import RepoTreeEntry, TreeClient
from skillport.resolver.candidates import SKILL_FILENAME
from skillport.resolver.models import DiscoveredSkill, TreeScan

logger = logging.getLogger(__name__)

# pick_one(prompt, options) -> chosen option
Picker = Callable[[str, list[str]], str]


def discover_skills(entries: Sequence[RepoTreeEntry]) -> list[DiscoveredSkill]:
    """Extract every ``<dir>/SKILL.md`` blob from a tree listing."""
    suffix = "/" + SKILL_FILENAME
    skills: list[DiscoveredSkill] = []
    for entry in entries:
        if not entry.is_blob or not entry.path.endswith(suffix):
            continue
        containing_dir = entry.path[: -len(suffix)]
        skills.append(DiscoveredSkill(
            path=entry.path,
            name=containing_dir.rsplit("/", 1)[-1],
            containing_dir=containing_dir,
        ))
    return skills


async def scan_tree(
    tree_client: TreeClient,
    owner: str,
    repo: str,
    branches: Sequence[str] = DEFAULT_BRANCHES,
) -> TreeScan | None:
    """List skills on the first branch that returns a non-empty tree.

    Returns:
        The scan result (possibly with zero skills), or None when no
        branch could be listed.
    """
    for branch in branches:
        entries = await tree_client.list_tree(owner, repo, branch)
        if not entries:
            continue
        skills = discover_skills(entries)
        logger.debug("Tree of %s/%s@%s lists %d skill(s)", owner, repo, branch, len(skills))
        return TreeScan(branch=branch, skills=skills)
    return None


def select_skill(
    skills: Sequence[DiscoveredSkill],
    skill_name: str | None = None,
    *,
    source: str = "",
    picker: Picker | None = None,
) -> DiscoveredSkill | None:
    """Pick one skill out of a tree scan.

    Args:
        skills: Skills discovered in the repository.
        skill_name: Name the user asked for, if any.
        source: ``owner/repo``, used in error messages.
        picker: Interactive chooser used when the choice is ambiguous.

    Returns:
        The selected skill, or None when the caller should fall back to
        probing (no skills, or a lone skill under a different name).

    Raises:
        NotFoundError: Several skills exist and none matches ``skill_name``.
        AmbiguousMatchError: Several skills qualify and there is no picker.
    """
    if not skills:
        return None

    if skill_name:
        matches = _match_by_name(skills, skill_name)
        if len(matches) == 1:
            return matches[0]
        if matches:
            return _choose(matches, source=source, picker=picker, requested=skill_name)
        if len(skills) == 1:
            return None
        names = [skill.name for skill in skills]
        raise NotFoundError(
            f"Skill '{skill_name}' not found in {source}. Available: {', '.join(names)}",
            target=f"{source}/{skill_name}" if source else skill_name,
            available=names,
        )

    if len(skills) == 1:
        return skills[0]
    return _choose(skills, source=source, picker=picker)


def _match_by_name(skills: Sequence[DiscoveredSkill], skill_name: str) -> list[DiscoveredSkill]:
    exact = [skill for skill in skills if skill.name == skill_name]
    if exact:
        return exact
    # Looser: the name appears as any directory segment of the path.
    return [skill for skill in skills if skill_name in skill.containing_dir.split("/")]


def _choose(
    skills: Sequence[DiscoveredSkill],
    *,
    source: str,
    picker: Picker | None,
    requested: str | None = None,
) -> DiscoveredSkill:
    # Several skills qualify: only the user may pick one.
    names = [skill.name for skill in skills]
    where = source or "Repository"
    subject = f"'{requested}' matches" if requested else "contains"
    if picker is None:
        raise AmbiguousMatchError(
            f"{where} {subject} {len(names)} skills: {', '.join(names)}. Select one explicitly.",
            choices=names,
        )
    chosen = picker(f"{where} {subject} several skills. Select one", names)
    for skill in skills:
        if skill.name == chosen:
            return skill
    raise NotFoundError(f"Skill '{chosen}' not found in {source}", target=chosen, available=names)
