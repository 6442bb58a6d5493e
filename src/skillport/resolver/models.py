"""Data models produced by the resolution engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from skillport.resolver.reference import is_url


@dataclass(frozen=True)
class ResolvedSkill:
    """A skill located in a repository, with its ``SKILL.md`` content.

    Attributes:
        skill_id: Short skill identifier. Never empty, never a URL.
        content: Raw bytes of the skill's main markdown file.
        source_repo: ``owner/repo`` the skill came from.
        origin_url: Registry- or user-supplied URL, when one was involved.
        containing_dir: Repository directory holding ``SKILL.md`` and its
            assets. ``""`` means the repository root; None means a
            single-file skill with nothing to mirror.
        branch: Branch the content was read from.
    """

    skill_id: str
    content: bytes
    source_repo: str
    origin_url: str | None = None
    containing_dir: str | None = None
    branch: str = "main"

    def __post_init__(self) -> None:
        if not self.skill_id or not self.skill_id.strip():
            raise ValueError("skill_id must not be empty")
        if is_url(self.skill_id):
            raise ValueError(f"skill_id must not be a URL: {self.skill_id}")

    @property
    def owner(self) -> str:
        return self.source_repo.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.source_repo.split("/", 1)[1]

    @property
    def text(self) -> str:
        """Content decoded as UTF-8 (undecodable bytes replaced)."""
        return self.content.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class DiscoveredSkill:
    """A ``SKILL.md`` found by listing a repository tree.

    Attributes:
        path: Full path of the ``SKILL.md`` file.
        name: Name of the directory holding it.
        containing_dir: That directory's repository-relative path.
    """

    path: str
    name: str
    containing_dir: str


@dataclass
class TreeScan:
    """Every skill found on one branch of a repository."""

    branch: str
    skills: list[DiscoveredSkill] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [skill.name for skill in self.skills]
