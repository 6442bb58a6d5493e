"""Data models for registry responses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RegistryRecord:
    """Authoritative location of a skill, as returned by a lookup.

    Attributes:
        origin_url: Repository URL (possibly with a ``/tree/`` path).
        skill_id: Registry skill id.
        display_name: Human-readable name.
        source: ``owner/repo`` the registry attributes the skill to.
    """

    origin_url: str
    skill_id: str = ""
    display_name: str = ""
    source: str = ""


@dataclass(frozen=True)
class RegistrySkill:
    """A single search hit."""

    skill_id: str
    name: str
    source: str = ""
    description: str = ""
    author: str = ""
    tags: list[str] = field(default_factory=list)
    stars: int = 0
    github_url: str = ""

    @property
    def install_ref(self) -> str:
        """Reference to pass to ``skillport add``."""
        if self.source:
            return f"{self.source}/{self.skill_id}"
        return self.skill_id


@dataclass
class SearchPage:
    """One page of search results plus pagination info."""

    skills: list[RegistrySkill] = field(default_factory=list)
    total: int = 0
    page: int = 1
    total_pages: int = 1
    has_more: bool = False
