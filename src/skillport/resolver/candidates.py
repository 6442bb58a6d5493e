"""Candidate path generation for brute-force repository probing.

Enumerates plausible repository-relative locations of a skill file,
most specific first: an exact hit ends the search early, and the cost of
probing is dominated by the number of requests issued.

``SKILL_DIRECTORIES`` is the catalog of conventional skill directories
used by agent tools. Supporting a new tool's layout means appending one
entry here; nothing else special-cases individual agents.
"""

from __future__ import annotations

from dataclasses import dataclass

SKILL_FILENAME = "SKILL.md"

SKILL_DIRECTORIES: tuple[str, ...] = (
    "skills",
    "skills/.curated",
    "skills/.experimental",
    "skills/.system",
    ".agents/skills",
    ".agent/skills",
    ".augment/rules",
    ".claude/skills",
    ".cline/skills",
    ".codebuddy/skills",
    ".codex/skills",
    ".commandcode/skills",
    ".continue/skills",
    ".crush/skills",
    ".cursor/skills",
    ".factory/skills",
    ".gemini/skills",
    ".github/skills",
    ".goose/skills",
    ".junie/skills",
    ".iflow/skills",
    ".kilocode/skills",
    ".kiro/skills",
    ".kode/skills",
    ".mcpjam/skills",
    ".vibe/skills",
    ".mux/skills",
    ".opencode/skills",
    ".openclaude/skills",
    ".openhands/skills",
    ".pi/skills",
    ".qoder/skills",
    ".qwen/skills",
    ".roo/skills",
    ".trae/skills",
    ".windsurf/skills",
    ".zencoder/skills",
    ".neovate/skills",
    ".pochi/skills",
    ".adal/skills",
    "plugins",
)


@dataclass(frozen=True)
class Candidate:
    """A guessed skill location, not yet confirmed to exist.

    Attributes:
        path: Repository-relative file path.
        rank: Position in probing order; lower is tried first.
    """

    path: str
    rank: int


def build_candidates(skill_id: str | None = None) -> list[str]:
    """Build the ordered list of paths to probe for a skill.

    Args:
        skill_id: In-repository skill name, or None to look for the
            repository's default skill.

    Returns:
        Duplicate-free relative paths, most specific first.
    """
    paths: list[str] = []
    if skill_id:
        paths.extend([
            f"{skill_id}/{SKILL_FILENAME}",
            f"skills/{skill_id}/{SKILL_FILENAME}",
            f"skills/{skill_id}.md",
            f"{skill_id}.md",
        ])
        for directory in SKILL_DIRECTORIES:
            paths.append(f"{directory}/{skill_id}/{SKILL_FILENAME}")
            paths.append(f"{directory}/{skill_id}.md")
    else:
        paths.extend([SKILL_FILENAME, "README.md"])
        for directory in SKILL_DIRECTORIES:
            paths.append(f"{directory}/{SKILL_FILENAME}")
    return list(dict.fromkeys(paths))


def rank_candidates(paths: list[str]) -> list[Candidate]:
    """Attach probing ranks to an ordered path list."""
    return [Candidate(path=path, rank=rank) for rank, path in enumerate(paths)]
