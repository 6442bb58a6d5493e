"""Skill reference classification.

Turns free-form user input into a tagged ``SkillReference`` describing its
shape. Classification is pure: no network or filesystem access happens
here, and the ordering of the pattern tests below is significant (the
first match wins).

Accepted shapes::

    ./skills/foo, ../x, /abs/path              -> LocalPath (rejected later)
    git@github.com:owner/repo.git              -> GitUrl (rejected later)
    https://github.com/o/r/tree/main/skills/x  -> RepoUrl(tree_path="skills/x")
    https://github.com/o/r(.git)               -> RepoUrl
    https://gitlab.com/o/r                     -> RepoUrl(host="gitlab.com")
    owner/repo                                 -> RepoShorthand
    owner/repo/skill                           -> RepoShorthand(skill_id="owner/repo/skill")
    skill-id                                   -> RegistryId
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from skillport.exceptions import ClassificationError

GITHUB_HOST = "github.com"

_LOCAL_PREFIXES = ("./", "../", "/")

_GIT_SSH_RE = re.compile(r"^git@([^:/\s]+):([^/\s]+)/([^/\s]+?)(?:\.git)?/?$")

# Must be tested before _GITHUB_URL_RE, which matches a prefix of it.
_TREE_URL_RE = re.compile(
    r"^https?://(?:www\.)?([^/\s]+)/([^/\s]+)/([^/\s]+)/(?:tree|blob)/([^/\s]+)/(.+?)/?$"
)

_GITHUB_URL_RE = re.compile(
    r"^https?://(?:www\.)?github\.com/([^/\s#?]+)/([^/\s#?]+?)(?:\.git)?(?:[/#?].*)?$"
)

_GITLAB_URL_RE = re.compile(
    r"^https?://(?:www\.)?gitlab\.com/([^/\s#?]+)/([^/\s#?]+?)(?:\.git)?(?:[/#?].*)?$"
)

_URL_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


@dataclass(frozen=True)
class RegistryId:
    """A bare identifier to be looked up in the skills registry."""

    identifier: str


@dataclass(frozen=True)
class RepoShorthand:
    """``owner/repo`` or ``owner/repo/skill``.

    For the three-segment form ``skill_id`` holds the full input string,
    which is also how the registry keys such skills.
    """

    owner: str
    repo: str
    skill_id: str | None = None

    @property
    def source(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def skill_name(self) -> str | None:
        """The in-repository skill name (last segment of ``skill_id``)."""
        if self.skill_id is None:
            return None
        return self.skill_id.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class RepoUrl:
    """An ``http(s)`` URL pointing at a repository, optionally into it."""

    owner: str
    repo: str
    tree_path: str | None = None
    host: str = GITHUB_HOST
    branch: str | None = None

    @property
    def source(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class GitUrl:
    """A ``git@host:owner/repo.git`` clone URL."""

    host: str
    owner: str
    repo: str


@dataclass(frozen=True)
class LocalPath:
    """A filesystem path."""

    path: str


SkillReference = Union[RegistryId, RepoShorthand, RepoUrl, GitUrl, LocalPath]


def classify(text: str) -> SkillReference:
    """Classify raw user input into a ``SkillReference``.

    Args:
        text: The reference exactly as the user typed it.

    Returns:
        The first matching reference variant.

    Raises:
        ClassificationError: Empty input, empty path segments, more than
            three segments, or a URL on an unrecognised host.
    """
    value = text.strip()
    if not value:
        raise ClassificationError("Skill reference is empty")

    if value.startswith(_LOCAL_PREFIXES):
        return LocalPath(path=value)

    match = _GIT_SSH_RE.match(value)
    if match:
        return GitUrl(host=match.group(1), owner=match.group(2), repo=match.group(3))

    match = _TREE_URL_RE.match(value)
    if match:
        host, owner, repo, branch, sub_path = match.groups()
        return RepoUrl(
            owner=owner,
            repo=_strip_git_suffix(repo),
            tree_path=sub_path.strip("/"),
            host=host.lower(),
            branch=branch,
        )

    match = _GITHUB_URL_RE.match(value)
    if match:
        return RepoUrl(owner=match.group(1), repo=match.group(2))

    match = _GITLAB_URL_RE.match(value)
    if match:
        return RepoUrl(owner=match.group(1), repo=match.group(2), host="gitlab.com")

    if _URL_SCHEME_RE.match(value):
        raise ClassificationError(f"Unrecognised URL: {value}")

    segments = value.split("/")
    if any(not segment for segment in segments):
        raise ClassificationError(f"Invalid skill reference (empty path segment): {value}")
    if len(segments) == 1:
        return RegistryId(identifier=value)
    if len(segments) == 2:
        return RepoShorthand(owner=segments[0], repo=segments[1])
    if len(segments) == 3:
        return RepoShorthand(owner=segments[0], repo=segments[1], skill_id=value)
    raise ClassificationError(
        f"Invalid skill reference: {value}. "
        "Use owner/repo, owner/repo/skill, a GitHub URL, or a registry id."
    )


def is_url(value: str) -> bool:
    """Return True if *value* looks like an absolute URL."""
    return bool(_URL_SCHEME_RE.match(value.strip()))


def _strip_git_suffix(repo: str) -> str:
    return repo[:-4] if repo.endswith(".git") else repo
