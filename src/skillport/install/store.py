"""Agent store adapter: write resolved skills into an agent's layout.

Per-skill-directory stores get ``{base}/{skill_id}/`` with the skill's
mirrored repository subtree, or just its ``SKILL.md`` when mirroring is
impossible.

Appended-markdown stores keep every skill in one file::

    <!-- Skill: react-tips from acme/widgets -->
    ...content...

    ---

    <!-- Skill: other from acme/tools -->
    ...content...

Installing an id that is already present replaces its block in place, up
to the next marker or end of file, so repeated installs are idempotent.
Deletion on either shape is destructive and unconfirmed here; asking the
user belongs to the caller. Concurrent writers are not synchronised.
"""

from __future__ import annotations

import logging
import re
import shutil
from dataclasses import dataclass
from pathlib import Path

from skillport.exceptions import SkillIOError
from skillport.install.agents import AgentProfile, StorageKind
from skillport.install.materializer import DirectoryMaterializer
from skillport.resolver.candidates import SKILL_FILENAME
from skillport.resolver.models import ResolvedSkill
from skillport.skill_md import parse_frontmatter

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n---\n\n"

_MARKER_RE = re.compile(r"<!-- Skill: ([^ ]+) from ([^ ]+) -->")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


@dataclass
class InstallOutcome:
    """What one install did to one agent store.

    Attributes:
        profile: The store written to.
        path: Skill directory, or the markdown file.
        files_written: Files written (1 for the markdown shape).
        files_failed: Asset downloads that failed.
        updated: True when the skill was already installed.
    """

    profile: AgentProfile
    path: Path
    files_written: int = 0
    files_failed: int = 0
    updated: bool = False


@dataclass(frozen=True)
class InstalledSkill:
    """A skill found in an agent store."""

    skill_id: str
    source: str = ""
    path: Path | None = None
    description: str = ""


# ---------------------------------------------------------------------------
# Markdown block editing (pure functions)
# ---------------------------------------------------------------------------


def marker(skill_id: str, source: str) -> str:
    return f"<!-- Skill: {skill_id} from {source} -->"


def _block_re(skill_id: str, *, with_leading_separator: bool = False) -> re.Pattern[str]:
    sep = re.escape(SEPARATOR)
    lead = f"(?:{sep})?" if with_leading_separator else ""
    return re.compile(
        rf"{lead}<!-- Skill: {re.escape(skill_id)} from [^>]+ -->\n.*?(?=(?:{sep})?<!-- Skill: |\Z)",
        re.DOTALL,
    )


def has_block(text: str, skill_id: str) -> bool:
    """Return True if *text* holds a block for *skill_id*."""
    return f"<!-- Skill: {skill_id} from " in text


def upsert_block(text: str, skill_id: str, source: str, content: str) -> tuple[str, bool]:
    """Insert or replace the block for *skill_id*.

    Block content is stored without trailing newlines so that separators
    stay uniform; the returned text always ends with a single newline.

    Returns:
        The new text and whether an existing block was replaced.
    """
    block = marker(skill_id, source) + "\n" + content.rstrip("\n")
    if has_block(text, skill_id):
        updated = _block_re(skill_id).sub(lambda _m: block, text, count=1)
        return updated.rstrip("\n") + "\n", True
    if not text.strip():
        return block + "\n", False
    return text.rstrip("\n") + SEPARATOR + block + "\n", False


def remove_block(text: str, skill_id: str) -> tuple[str, bool]:
    """Delete the block for *skill_id* and collapse blank-line runs.

    Returns:
        The new text and whether a block was removed.
    """
    if not has_block(text, skill_id):
        return text, False
    updated = _block_re(skill_id, with_leading_separator=True).sub("", text, count=1)
    if updated.startswith(SEPARATOR):
        updated = updated[len(SEPARATOR):]
    updated = _BLANK_RUN_RE.sub("\n\n", updated).strip()
    return (updated + "\n" if updated else ""), True


def read_block(text: str, skill_id: str) -> str | None:
    """Return the content of *skill_id*'s block (without its marker)."""
    match = _block_re(skill_id).search(text)
    if match is None:
        return None
    return match.group(0).split("\n", 1)[1].rstrip("\n")


def list_blocks(text: str) -> list[tuple[str, str]]:
    """Return ``(skill_id, source)`` for every block, in file order."""
    return [(m.group(1), m.group(2)) for m in _MARKER_RE.finditer(text)]


# ---------------------------------------------------------------------------
# Store operations
# ---------------------------------------------------------------------------


async def install(
    resolved: ResolvedSkill,
    profile: AgentProfile,
    materializer: DirectoryMaterializer | None = None,
) -> InstallOutcome:
    """Install a resolved skill into one agent store.

    Args:
        resolved: The skill to install.
        profile: The single store governing this install.
        materializer: Mirrors the skill's directory; when None, or when
            it writes nothing, only ``SKILL.md`` is written.

    Raises:
        SkillIOError: Local write failure.
    """
    _check_skill_id(resolved.skill_id)
    if profile.storage_kind is StorageKind.PER_SKILL_DIRECTORY:
        return await _install_directory(resolved, profile, materializer)
    return _install_markdown(resolved, profile)


async def _install_directory(
    resolved: ResolvedSkill,
    profile: AgentProfile,
    materializer: DirectoryMaterializer | None,
) -> InstallOutcome:
    target = profile.base_path / resolved.skill_id
    outcome = InstallOutcome(profile=profile, path=target, updated=target.exists())
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SkillIOError(f"Cannot create {target}: {exc}", path=str(target)) from exc

    skill_file = target / SKILL_FILENAME
    if materializer is not None and resolved.containing_dir is not None:
        result = await materializer.materialize(
            resolved.owner, resolved.repo, resolved.branch, resolved.containing_dir, target,
        )
        outcome.files_written = result.succeeded
        outcome.files_failed = result.failed
        if result.failed:
            logger.warning(
                "%d of %d file(s) of %s could not be downloaded",
                result.failed, result.succeeded + result.failed, resolved.skill_id,
            )
        if result.ok and skill_file.resolve() in result.written:
            return outcome

    _write_bytes(skill_file, resolved.content)
    outcome.files_written += 1
    return outcome


def _install_markdown(resolved: ResolvedSkill, profile: AgentProfile) -> InstallOutcome:
    path = profile.base_path
    existing = _read_text(path) if path.exists() else ""
    updated, replaced = upsert_block(existing, resolved.skill_id, resolved.source_repo, resolved.text)
    _write_text(path, updated)
    return InstallOutcome(profile=profile, path=path, files_written=1, updated=replaced)


def remove(skill_id: str, profile: AgentProfile) -> bool:
    """Delete an installed skill. Returns False if it was not installed.

    Raises:
        SkillIOError: The store could not be modified.
    """
    _check_skill_id(skill_id)
    if profile.storage_kind is StorageKind.PER_SKILL_DIRECTORY:
        target = profile.base_path / skill_id
        if not target.is_dir():
            return False
        try:
            shutil.rmtree(target)
        except OSError as exc:
            raise SkillIOError(f"Cannot remove {target}: {exc}", path=str(target)) from exc
        return True

    path = profile.base_path
    if not path.is_file():
        return False
    updated, removed = remove_block(_read_text(path), skill_id)
    if removed:
        _write_text(path, updated)
    return removed


def list_installed(profile: AgentProfile) -> list[InstalledSkill]:
    """List the skills present in an agent store."""
    if profile.storage_kind is StorageKind.PER_SKILL_DIRECTORY:
        return _list_directory(profile.base_path)

    path = profile.base_path
    if not path.is_file():
        return []
    text = _read_text(path)
    skills: list[InstalledSkill] = []
    for skill_id, source in list_blocks(text):
        meta = parse_frontmatter(read_block(text, skill_id) or "")
        skills.append(InstalledSkill(skill_id=skill_id, source=source, path=path, description=meta.description))
    return skills


def _list_directory(base: Path) -> list[InstalledSkill]:
    if not base.is_dir():
        return []
    skills: list[InstalledSkill] = []
    for child in sorted(base.iterdir()):
        skill_file = child / SKILL_FILENAME
        if not child.is_dir() or not skill_file.is_file():
            continue
        try:
            meta = parse_frontmatter(skill_file.read_text(encoding="utf-8", errors="replace"))
        except OSError:
            logger.warning("Cannot read %s", skill_file)
            meta = parse_frontmatter("")
        skills.append(InstalledSkill(skill_id=child.name, path=child, description=meta.description))
    return skills


def _check_skill_id(skill_id: str) -> None:
    if not skill_id or skill_id in (".", "..") or "/" in skill_id or "\\" in skill_id:
        raise SkillIOError(f"Invalid skill id for a local store: {skill_id!r}")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SkillIOError(f"Cannot read {path}: {exc}", path=str(path)) from exc


def _write_text(path: Path, text: str) -> None:
    _write_bytes(path, text.encode("utf-8"))


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise SkillIOError(f"Cannot write {path}: {exc}", path=str(path)) from exc
