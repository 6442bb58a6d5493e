"""Tests for ``skillport search`` and ``skillport agents``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from skillport.cli.main import cli
from tests.fakes import FakeBackend

SEARCH_BODY = {
    "success": True,
    "data": {
        "skills": [
            {
                "skillId": "react-tips",
                "name": "React Tips",
                "source": "acme/widgets",
                "description": "Idiomatic React",
                "author": "acme",
                "tags": ["react"],
                "stars": 12,
            },
        ],
        "pagination": {"total": 1, "page": 1, "totalPages": 1, "hasMore": False},
    },
}


class TestSearch:
    def test_text_output(self, runner: CliRunner, fake_network: FakeBackend) -> None:
        fake_network.search_body = SEARCH_BODY

        result = runner.invoke(cli, ["search", "react"])

        assert result.exit_code == 0, result.output
        assert "React Tips" in result.output
        assert "acme/widgets/react-tips" in result.output
        assert "12 stars" in result.output
        assert "To install: skillport add" in result.output

    def test_json_output(self, runner: CliRunner, fake_network: FakeBackend) -> None:
        fake_network.search_body = SEARCH_BODY

        result = runner.invoke(cli, ["search", "react", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total"] == 1
        assert data["skills"][0]["skill_id"] == "react-tips"

    def test_registry_unavailable(self, runner: CliRunner, fake_network: FakeBackend) -> None:
        result = runner.invoke(cli, ["search", "react"])

        assert result.exit_code == 0
        assert "No skills found for 'react'" in result.output

    def test_limit_and_page_forwarded(self, runner: CliRunner, fake_network: FakeBackend) -> None:
        runner.invoke(cli, ["search", "react", "--limit", "5", "--page", "2"])

        params = fake_network.requests[0].url.params
        assert (params["limit"], params["page"]) == ("5", "2")

    def test_api_url_option(self, runner: CliRunner, fake_network: FakeBackend) -> None:
        runner.invoke(cli, ["--api-url", "https://registry.test", "search", "react"])

        assert fake_network.requests[0].url.host == "registry.test"

    def test_api_url_from_environment(
        self, runner: CliRunner, fake_network: FakeBackend,
    ) -> None:
        runner.invoke(cli, ["search", "react"], env={"SKILLS_API_URL": "https://env-registry.test"})

        assert fake_network.requests[0].url.host == "env-registry.test"


class TestAgents:
    def test_table(self, runner: CliRunner, isolated_env: Path) -> None:
        result = runner.invoke(cli, ["agents"])

        assert result.exit_code == 0
        assert "Supported Agents" in result.output
        assert "detected in this environment" in result.output
