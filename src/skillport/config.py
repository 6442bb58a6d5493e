"""Runtime configuration for the resolution and installation core.

The core never reads the environment. The CLI builds a ``SkillportConfig``
from its options (which accept environment variables through click) and
passes it down as plain values.
"""

from __future__ import annotations

from dataclasses import dataclass

from skillport import __version__

DEFAULT_API_BASE: str = "https://skills.lc"
DEFAULT_RAW_BASE: str = "https://raw.githubusercontent.com"
DEFAULT_GITHUB_API: str = "https://api.github.com"

# Seconds. Applied to every single request, never to a whole resolution.
DEFAULT_TIMEOUT: float = 15.0

# Tried in order; ``main`` first matches current hosting defaults.
DEFAULT_BRANCHES: tuple[str, ...] = ("main", "master")


@dataclass(frozen=True)
class SkillportConfig:
    """Plain-value settings shared by every network-facing component.

    Attributes:
        api_base: Base URL of the skills registry.
        api_token: Optional bearer token for registry calls.
        github_token: Optional token for GitHub calls (raises rate limits).
        raw_base: Raw file content host.
        github_api: GitHub REST API host, used for tree listings.
        timeout: Per-request timeout in seconds.
        branches: Branch names tried during discovery, in order.
        max_concurrency: Upper bound on parallel file downloads.
        user_agent: User-Agent header sent with every request.
    """

    api_base: str = DEFAULT_API_BASE
    api_token: str | None = None
    github_token: str | None = None
    raw_base: str = DEFAULT_RAW_BASE
    github_api: str = DEFAULT_GITHUB_API
    timeout: float = DEFAULT_TIMEOUT
    branches: tuple[str, ...] = DEFAULT_BRANCHES
    max_concurrency: int = 8
    user_agent: str = f"skillport/{__version__}"

    def registry_headers(self) -> dict[str, str]:
        """Headers for registry requests (bearer auth when configured)."""
        if self.api_token:
            return {"Authorization": f"Bearer {self.api_token}"}
        return {}

    def github_headers(self) -> dict[str, str]:
        """Headers for GitHub API requests."""
        headers = {"Accept": "application/vnd.github+json"}
        if self.github_token:
            headers["Authorization"] = f"Bearer {self.github_token}"
        return headers

    def raw_headers(self) -> dict[str, str]:
        """Headers for raw content downloads."""
        if self.github_token:
            return {"Authorization": f"Bearer {self.github_token}"}
        return {}
