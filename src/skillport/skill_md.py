"""Reading ``SKILL.md`` metadata.

Skill files are Markdown with optional YAML frontmatter delimited by
``---`` lines. Only ``name`` and ``description`` are used, for display.
Missing or malformed frontmatter yields empty metadata rather than an
error: the file is still a valid skill.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import yaml

_FRONTMATTER_RE = re.compile(r"\A\ufeff?---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


@dataclass(frozen=True)
class SkillMetadata:
    """Display metadata from a skill's frontmatter."""

    name: str = ""
    description: str = ""


def parse_frontmatter(text: str) -> SkillMetadata:
    """Extract ``name`` and ``description`` from YAML frontmatter."""
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return SkillMetadata()
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return SkillMetadata()
    if not isinstance(data, dict):
        return SkillMetadata()
    return SkillMetadata(
        name=str(data.get("name") or "").strip(),
        description=" ".join(str(data.get("description") or "").split()),
    )
