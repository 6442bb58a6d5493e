"""GitHub git-tree listing.

One ``GET /repos/{owner}/{repo}/git/trees/{branch}?recursive=1`` call
returns every path in a repository. Both the tree scanner (to discover
``SKILL.md`` files) and the directory materializer (to find a skill's
sibling assets) are built on top of this listing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from skillport.remote.http_client import HttpClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoTreeEntry:
    """A single path reported by the tree API.

    Attributes:
        path: Repository-relative path, ``/``-separated.
        type: ``"blob"`` for files, ``"tree"`` for directories.
    """

    path: str
    type: str

    @property
    def is_blob(self) -> bool:
        return self.type == "blob"


class TreeClient:
    """Lists repository trees and builds raw-content URLs."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http
        self._config = http.config

    def raw_url(self, owner: str, repo: str, branch: str, path: str) -> str:
        """Build the raw-content URL for one file."""
        base = self._config.raw_base.rstrip("/")
        return f"{base}/{owner}/{repo}/{branch}/{quote(path)}"

    async def fetch_raw(self, owner: str, repo: str, branch: str, path: str) -> bytes | None:
        """Download one file's raw content. None when it does not exist."""
        url = self.raw_url(owner, repo, branch, path)
        return await self._http.fetch_bytes(url, headers=self._config.raw_headers())

    async def list_tree(self, owner: str, repo: str, branch: str) -> list[RepoTreeEntry] | None:
        """List every entry of a repository tree, recursively.

        Args:
            owner: Repository owner.
            repo: Repository name.
            branch: Branch (or any tree-ish) to list.

        Returns:
            The entries, or None when the listing failed (missing branch,
            rate limit, malformed body, transport error).
        """
        base = self._config.github_api.rstrip("/")
        url = f"{base}/repos/{owner}/{repo}/git/trees/{quote(branch, safe='')}"
        data = await self._http.fetch_json(
            url, params={"recursive": "1"}, headers=self._config.github_headers(),
        )
        if not isinstance(data, dict) or not isinstance(data.get("tree"), list):
            return None
        if data.get("truncated"):
            logger.warning("Tree listing for %s/%s@%s is truncated", owner, repo, branch)

        entries: list[RepoTreeEntry] = []
        for item in data["tree"]:
            if not isinstance(item, dict):
                continue
            path = item.get("path")
            kind = item.get("type")
            if isinstance(path, str) and kind in ("blob", "tree"):
                entries.append(RepoTreeEntry(path=path, type=kind))
        return entries
