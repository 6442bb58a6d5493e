"""Shared async HTTP client for GitHub and registry access.

Provides a thin wrapper around ``httpx.AsyncClient`` with a standardised
timeout, user-agent header, and error handling. Every network-facing
component goes through this module so that HTTP behaviour is consistent
and testable (tests inject an ``httpx.MockTransport``).

Low-level failures (timeouts, connection errors) surface as
``TransportError``. The ``fetch_*`` helpers go one step further and map
every non-200 outcome to ``None``, which is what the probing layers want.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from skillport.config import SkillportConfig
from skillport.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    """Async HTTP client bound to one ``SkillportConfig``.

    Usage::

        async with HttpClient(config) as http:
            body = await http.fetch_bytes("https://example.com/file")
    """

    def __init__(
        self,
        config: SkillportConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or SkillportConfig()
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def get(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Issue a GET request and return the raw response.

        Args:
            url: Absolute URL to fetch.
            params: Optional query parameters.
            headers: Extra request headers.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: On timeout or any connection-level failure.
        """
        try:
            return await self._client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Timeout fetching {url}", url=url) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request error for {url}: {exc}", url=url) from exc

    async def fetch_bytes(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> bytes | None:
        """Fetch a URL and return its body when the status is 200.

        Returns:
            Response body bytes, or None for any other status or a
            transport failure.
        """
        try:
            resp = await self.get(url, headers=headers)
        except TransportError as exc:
            logger.debug("%s", exc)
            return None
        if resp.status_code != 200:
            logger.debug("HTTP %d from %s", resp.status_code, url)
            return None
        return resp.content

    async def fetch_json(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:  # noqa: ANN401
        """Fetch a URL and parse the body as JSON.

        Returns:
            Parsed JSON (dict or list), or None on non-200 status,
            invalid JSON, or transport failure.
        """
        try:
            resp = await self.get(url, params=params, headers=headers)
        except TransportError as exc:
            logger.warning("%s", exc)
            return None
        if resp.status_code != 200:
            # A 404 is an ordinary miss: unregistered id, absent branch.
            level = logging.DEBUG if resp.status_code == 404 else logging.WARNING
            logger.log(level, "HTTP %d from %s", resp.status_code, url)
            return None
        try:
            return resp.json()
        except ValueError:
            logger.warning("Invalid JSON from %s", url)
            return None

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        headers: dict[str, str] | None = None,
    ) -> int | None:
        """POST a JSON payload.

        Returns:
            The response status code, or None on transport failure.
        """
        try:
            resp = await self._client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("POST to %s failed: %s", url, exc)
            return None
        return resp.status_code
