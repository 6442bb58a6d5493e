"""Static table of agent tools and where they keep skills.

Each ``AgentPaths`` record describes where one AI coding tool expects
skills, both per project (relative to the working directory) and
globally (relative to the home directory), and which storage shape it
uses. Supporting a new tool means adding one record to ``AGENT_TABLE``.

Two storage shapes exist:

- ``PER_SKILL_DIRECTORY``: ``{base}/{skill_id}/SKILL.md`` plus the skill's
  assets. The current convention for most tools.
- ``APPENDED_MARKDOWN``: one markdown file holding every installed skill
  as a delimited block. Used by legacy single-file layouts and by the
  ``local`` fallback store.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

DEFAULT_AGENT = "local"

# Marker directories probed by ``detect_agent``, in priority order.
DETECTION_ORDER: tuple[str, ...] = ("claude", "cursor", "codex")


class StorageKind(enum.Enum):
    """How an agent stores installed skills."""

    APPENDED_MARKDOWN = "appended-markdown"
    PER_SKILL_DIRECTORY = "per-skill-directory"


@dataclass(frozen=True)
class AgentPaths:
    """Where an agent tool keeps skills.

    Attributes:
        name: Human-readable tool name.
        storage_kind: Storage shape used by the tool.
        project_path: Store location relative to the project directory.
        global_path: Store location relative to the home directory.
        marker_dir: Dot-directory whose presence signals the tool.
    """

    name: str
    storage_kind: StorageKind
    project_path: str
    global_path: str
    marker_dir: str = ""


@dataclass(frozen=True)
class AgentProfile:
    """The single store one install operation writes to.

    Attributes:
        type: Agent identifier (a key of ``AGENT_TABLE``).
        storage_kind: Storage shape.
        base_path: Skills directory, or the markdown file for the
            appended shape.
    """

    type: str
    storage_kind: StorageKind
    base_path: Path


_DIR = StorageKind.PER_SKILL_DIRECTORY
_APPEND = StorageKind.APPENDED_MARKDOWN


def _dir_agent(name: str, dot_dir: str, global_path: str | None = None) -> AgentPaths:
    """Shorthand for the common ``<dot_dir>/skills`` layout."""
    return AgentPaths(
        name=name,
        storage_kind=_DIR,
        project_path=f"{dot_dir}/skills",
        global_path=global_path or f"{dot_dir}/skills",
        marker_dir=dot_dir,
    )


AGENT_TABLE: dict[str, AgentPaths] = {
    # -- Per-skill directory layouts --
    "claude": _dir_agent("Claude Code", ".claude"),
    "cursor": _dir_agent("Cursor", ".cursor"),
    "codex": _dir_agent("Codex CLI", ".codex"),
    "agents": _dir_agent("Generic (.agents)", ".agents"),
    "augment": AgentPaths("Augment", _DIR, ".augment/rules", ".augment/rules", ".augment"),
    "cline": _dir_agent("Cline", ".cline"),
    "codebuddy": _dir_agent("CodeBuddy", ".codebuddy"),
    "commandcode": _dir_agent("CommandCode", ".commandcode"),
    "continue": _dir_agent("Continue", ".continue"),
    "crush": _dir_agent("Crush", ".crush", ".config/crush/skills"),
    "factory": _dir_agent("Factory", ".factory"),
    "gemini": _dir_agent("Gemini CLI", ".gemini"),
    "github-copilot": AgentPaths("GitHub Copilot", _DIR, ".github/skills", ".copilot/skills", ".github"),
    "goose": _dir_agent("Goose", ".goose", ".config/goose/skills"),
    "iflow": _dir_agent("iFlow CLI", ".iflow"),
    "junie": _dir_agent("Junie", ".junie"),
    "kilocode": _dir_agent("Kilo Code", ".kilocode"),
    "kiro": _dir_agent("Kiro", ".kiro"),
    "kode": _dir_agent("Kode", ".kode"),
    "opencode": _dir_agent("OpenCode", ".opencode", ".config/opencode/skills"),
    "openhands": _dir_agent("OpenHands", ".openhands"),
    "qoder": _dir_agent("Qoder", ".qoder"),
    "qwen": _dir_agent("Qwen Code", ".qwen"),
    "roo": _dir_agent("Roo Code", ".roo"),
    "trae": _dir_agent("Trae", ".trae"),
    "windsurf": _dir_agent("Windsurf", ".windsurf", ".codeium/windsurf/skills"),
    "zencoder": _dir_agent("Zencoder", ".zencoder"),
    # -- Appended markdown layouts --
    "claude-md": AgentPaths("Claude Code (CLAUDE.md)", _APPEND, "CLAUDE.md", ".claude/CLAUDE.md", ".claude"),
    "cursor-rules": AgentPaths(
        "Cursor rules", _APPEND, ".cursor/rules/skill.mdc", ".cursor/rules/skill.mdc", ".cursor",
    ),
    "codex-instructions": AgentPaths(
        "Codex instructions", _APPEND, "AGENTS.md", ".codex/instructions.md", ".codex",
    ),
    DEFAULT_AGENT: AgentPaths("Local", _APPEND, ".skills/SKILLS.md", ".skills/SKILLS.md"),
}


def get_profile(
    agent: str,
    *,
    global_scope: bool = False,
    cwd: Path | None = None,
    home: Path | None = None,
) -> AgentProfile:
    """Build the profile for one agent.

    Args:
        agent: Key of ``AGENT_TABLE``.
        global_scope: Use the home-relative store instead of the project one.
        cwd: Project directory (defaults to the current directory).
        home: Home directory (defaults to ``Path.home()``).

    Raises:
        ValueError: Unknown agent identifier.
    """
    try:
        paths = AGENT_TABLE[agent]
    except KeyError:
        known = ", ".join(sorted(AGENT_TABLE))
        raise ValueError(f"Unknown agent '{agent}'. Known agents: {known}") from None

    if global_scope:
        base = (home or Path.home()) / paths.global_path
    else:
        base = (cwd or Path.cwd()) / paths.project_path
    return AgentProfile(type=agent, storage_kind=paths.storage_kind, base_path=base)


def detect_agent(cwd: Path | None = None, home: Path | None = None) -> str:
    """Infer the agent from marker directories.

    Checks ``.claude``, ``.cursor`` and ``.codex`` in the project directory
    and then the home directory, and falls back to the local store.
    """
    roots = [cwd or Path.cwd(), home or Path.home()]
    for agent in DETECTION_ORDER:
        marker = AGENT_TABLE[agent].marker_dir
        for root in roots:
            try:
                if (root / marker).is_dir():
                    return agent
            except OSError:
                continue
    return DEFAULT_AGENT
