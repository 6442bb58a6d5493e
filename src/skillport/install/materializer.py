"""Directory materialization: mirror a skill's repository subtree locally.

Once the containing directory of a ``SKILL.md`` is known, every file under
it (scripts, references, assets) is downloaded and written at the same
relative path below the target directory.

The operation is best-effort. Individual download failures are counted,
not raised, and files already written are never rolled back. A result
with zero successes tells the caller to fall back to writing the single
known ``SKILL.md``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

from skillport.exceptions import SkillIOError
from skillport.remote.tree import RepoTreeEntry, TreeClient

logger = logging.getLogger(__name__)


@dataclass
class MaterializeResult:
    """Outcome of one materialization.

    Attributes:
        succeeded: Number of files written.
        failed: Number of files that could not be downloaded or placed.
        written: Local paths of written files.
        listed: False when the tree listing itself failed.
    """

    succeeded: int = 0
    failed: int = 0
    written: list[Path] = field(default_factory=list)
    listed: bool = True

    @property
    def ok(self) -> bool:
        return self.succeeded > 0


def select_entries(entries: list[RepoTreeEntry], containing_dir: str) -> list[tuple[str, str]]:
    """Pick the blobs under *containing_dir*.

    Returns:
        ``(repository_path, relative_path)`` pairs. An empty
        *containing_dir* selects every blob of the repository.
    """
    prefix = f"{containing_dir.strip('/')}/" if containing_dir.strip("/") else ""
    selected: list[tuple[str, str]] = []
    for entry in entries:
        if not entry.is_blob:
            continue
        if prefix and not entry.path.startswith(prefix):
            continue
        selected.append((entry.path, entry.path[len(prefix):]))
    return selected


class DirectoryMaterializer:
    """Downloads a repository subtree into a local directory."""

    def __init__(self, tree_client: TreeClient, *, max_concurrency: int = 8) -> None:
        self._tree = tree_client
        self._max_concurrency = max(1, max_concurrency)

    async def materialize(
        self,
        owner: str,
        repo: str,
        branch: str,
        containing_dir: str,
        target_dir: Path,
    ) -> MaterializeResult:
        """Mirror ``containing_dir`` of ``owner/repo@branch`` into ``target_dir``.

        Args:
            owner: Repository owner.
            repo: Repository name.
            branch: Branch to read from.
            containing_dir: Repository directory to mirror ("" for root).
            target_dir: Local destination directory.

        Returns:
            Success and failure counts. Never raises for download errors.
        """
        entries = await self._tree.list_tree(owner, repo, branch)
        if entries is None:
            logger.warning("Could not list %s/%s@%s", owner, repo, branch)
            return MaterializeResult(listed=False)

        files = select_entries(entries, containing_dir)
        result = MaterializeResult()
        if not files:
            return result

        root = target_dir.resolve()
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _fetch(repo_path: str, rel_path: str) -> None:
            async with semaphore:
                content = await self._tree.fetch_raw(owner, repo, branch, repo_path)
            if content is None:
                logger.warning("Failed to download %s", repo_path)
                result.failed += 1
                return
            try:
                written = _write_file(root, rel_path, content)
            except SkillIOError as exc:
                logger.warning("%s", exc)
                result.failed += 1
                return
            result.succeeded += 1
            result.written.append(written)

        await asyncio.gather(*(_fetch(repo_path, rel) for repo_path, rel in files))
        result.written.sort()
        return result


def _write_file(root: Path, rel_path: str, content: bytes) -> Path:
    destination = (root / rel_path).resolve()
    if not destination.is_relative_to(root):
        raise SkillIOError(f"Refusing to write outside {root}: {rel_path}", path=str(destination))
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content)
    except OSError as exc:
        raise SkillIOError(f"Cannot write {destination}: {exc}", path=str(destination)) from exc
    return destination
