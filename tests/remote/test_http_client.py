"""Tests for the shared async HTTP client."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from skillport.config import SkillportConfig
from skillport.exceptions import TransportError
from skillport.remote.http_client import HttpClient

Handler = Callable[[httpx.Request], httpx.Response]


def _run(handler: Handler, call: Callable[[HttpClient], Any], config: SkillportConfig | None = None) -> Any:
    async def run() -> Any:
        async with HttpClient(config, transport=httpx.MockTransport(handler)) as http:
            return await call(http)

    return asyncio.run(run())


def _timeout(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


def _refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("refused", request=request)


class TestGet:
    def test_returns_any_status(self) -> None:
        resp = _run(lambda r: httpx.Response(418), lambda h: h.get("https://x.test/a"))
        assert resp.status_code == 418

    def test_user_agent_header(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        _run(handler, lambda h: h.get("https://x.test/a"), SkillportConfig(user_agent="ua-test/1"))
        assert seen[0].headers["User-Agent"] == "ua-test/1"

    def test_timeout_becomes_transport_error(self) -> None:
        with pytest.raises(TransportError) as excinfo:
            _run(_timeout, lambda h: h.get("https://x.test/slow"))
        assert excinfo.value.url == "https://x.test/slow"
        assert "Timeout" in str(excinfo.value)

    def test_connection_error_becomes_transport_error(self) -> None:
        with pytest.raises(TransportError):
            _run(_refused, lambda h: h.get("https://x.test/a"))


class TestFetchBytes:
    def test_body_on_200(self) -> None:
        body = _run(lambda r: httpx.Response(200, content=b"abc"), lambda h: h.fetch_bytes("https://x.test/f"))
        assert body == b"abc"

    @pytest.mark.parametrize("status", [204, 403, 404, 500])
    def test_none_on_other_status(self, status: int) -> None:
        assert _run(lambda r: httpx.Response(status), lambda h: h.fetch_bytes("https://x.test/f")) is None

    def test_redirect_followed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://x.test/new"})
            return httpx.Response(200, content=b"moved")

        assert _run(handler, lambda h: h.fetch_bytes("https://x.test/old")) == b"moved"

    def test_none_on_transport_failure(self) -> None:
        assert _run(_timeout, lambda h: h.fetch_bytes("https://x.test/f")) is None


class TestFetchJson:
    def test_parses_body(self) -> None:
        data = _run(lambda r: httpx.Response(200, json={"a": 1}), lambda h: h.fetch_json("https://x.test/j"))
        assert data == {"a": 1}

    def test_passes_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        _run(handler, lambda h: h.fetch_json("https://x.test/j", params={"q": "react"}))
        assert seen[0].url.params["q"] == "react"

    def test_invalid_json(self) -> None:
        data = _run(lambda r: httpx.Response(200, text="<html>"), lambda h: h.fetch_json("https://x.test/j"))
        assert data is None

    def test_error_status(self) -> None:
        data = _run(lambda r: httpx.Response(500, json={}), lambda h: h.fetch_json("https://x.test/j"))
        assert data is None

    def test_transport_failure(self) -> None:
        assert _run(_refused, lambda h: h.fetch_json("https://x.test/j")) is None

    def test_not_found_is_quiet(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="skillport.remote.http_client"):
            data = _run(lambda r: httpx.Response(404), lambda h: h.fetch_json("https://x.test/j"))

        assert data is None
        ours = [r for r in caplog.records if r.name == "skillport.remote.http_client"]
        assert [r.levelno for r in ours] == [logging.DEBUG]

    def test_server_error_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="skillport.remote.http_client"):
            _run(lambda r: httpx.Response(503), lambda h: h.fetch_json("https://x.test/j"))

        assert any(r.levelno == logging.WARNING and "503" in r.getMessage() for r in caplog.records)


class TestPostJson:
    def test_sends_payload(self) -> None:
        seen: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(201)

        status = _run(handler, lambda h: h.post_json("https://x.test/p", {"k": "v"}))
        assert status == 201
        assert seen == [{"k": "v"}]

    def test_transport_failure(self) -> None:
        assert _run(_refused, lambda h: h.post_json("https://x.test/p", {})) is None
