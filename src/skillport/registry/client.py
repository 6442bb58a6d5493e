"""Client for the hosted skills registry.

Three endpoints are consumed:

    GET  {api_base}/api/v1/skills/{id}            -> lookup_by_id
    GET  {api_base}/api/v1/skills/search?q=...    -> search
    POST {api_base}/api/install                   -> record_install

The registry is authoritative when it answers, but never required: every
failure is logged and mapped to an empty result so that callers can fall
back to repository-native discovery.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from skillport.registry.models import RegistryRecord, RegistrySkill, SearchPage
from skillport.remote.http_client import HttpClient

logger = logging.getLogger(__name__)

INSTALL_SOURCE = "cli"


class RegistryClient:
    """Registry access bound to one ``HttpClient``."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http
        self._config = http.config

    @property
    def base(self) -> str:
        return self._config.api_base.rstrip("/")

    async def lookup_by_id(self, skill_id: str) -> RegistryRecord | None:
        """Resolve a registry identifier to its repository location.

        Args:
            skill_id: Registry id (bare name or ``owner/repo/skill``).

        Returns:
            The record, or None when the registry does not know the id,
            answered with a malformed body, or could not be reached.
        """
        url = f"{self.base}/api/v1/skills/{quote(skill_id, safe='/')}"
        body = await self._http.fetch_json(url, headers=self._config.registry_headers())
        if not isinstance(body, dict) or not body.get("success"):
            return None
        return _parse_record(body.get("data"))

    async def search(self, query: str, *, limit: int = 20, page: int = 1) -> SearchPage:
        """Search the registry.

        Returns:
            One page of results; empty when the registry is unavailable.
        """
        body = await self._http.fetch_json(
            f"{self.base}/api/v1/skills/search",
            params={"q": query, "limit": limit, "page": page},
            headers=self._config.registry_headers(),
        )
        empty = SearchPage(page=page)
        if not isinstance(body, dict) or not body.get("success"):
            return empty
        data = body.get("data")
        if not isinstance(data, dict):
            return empty

        skills = [
            skill for skill in (_parse_skill(item) for item in data.get("skills") or [])
            if skill is not None
        ]
        pagination = data.get("pagination") if isinstance(data.get("pagination"), dict) else {}
        return SearchPage(
            skills=skills,
            total=_as_int(pagination.get("total"), len(skills)),
            page=_as_int(pagination.get("page"), page),
            total_pages=_as_int(pagination.get("totalPages"), 1),
            has_more=bool(pagination.get("hasMore", False)),
        )

    async def record_install(
        self,
        skill_id: str | None = None,
        github_url: str | None = None,
    ) -> bool:
        """Report an install. Fire-and-forget: failure never raises.

        Returns:
            True when the registry accepted the report.
        """
        payload: dict[str, Any] = {"source": INSTALL_SOURCE}
        if skill_id:
            payload["skillId"] = skill_id
        if github_url:
            payload["githubUrl"] = github_url
        status = await self._http.post_json(
            f"{self.base}/api/install", payload, headers=self._config.registry_headers(),
        )
        if status != 200:
            logger.info("Install not recorded (status %s)", status)
            return False
        return True


def _parse_record(data: Any) -> RegistryRecord | None:  # noqa: ANN401
    """Parse the ``data`` object of a lookup response."""
    if not isinstance(data, dict):
        return None
    url = data.get("githubUrl")
    if not isinstance(url, str) or not url.strip():
        return None
    return RegistryRecord(
        origin_url=url.strip(),
        skill_id=str(data.get("skillId") or ""),
        display_name=str(data.get("name") or ""),
        source=str(data.get("source") or ""),
    )


def _parse_skill(item: Any) -> RegistrySkill | None:  # noqa: ANN401
    """Parse one search hit; items without an id are skipped."""
    if not isinstance(item, dict):
        return None
    skill_id = item.get("skillId") or item.get("id")
    if not skill_id:
        return None
    tags = item.get("tags") or []
    return RegistrySkill(
        skill_id=str(skill_id),
        name=str(item.get("name") or skill_id),
        source=str(item.get("source") or ""),
        description=str(item.get("description") or ""),
        author=str(item.get("author") or ""),
        tags=[str(tag) for tag in tags] if isinstance(tags, list) else [],
        stars=_as_int(item.get("stars"), 0),
        github_url=str(item.get("githubUrl") or ""),
    )


def _as_int(value: Any, default: int) -> int:  # noqa: ANN401
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
