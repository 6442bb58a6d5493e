"""Shared fixtures for CLI tests.

Every CLI test runs in an isolated project and home directory, with the
network-facing commands wired to the in-memory ``FakeBackend``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from skillport.config import SkillportConfig
from skillport.remote.http_client import HttpClient
from tests.fakes import SKILL_BODY, FakeBackend


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_network(backend: FakeBackend, isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> FakeBackend:
    """Route every HttpClient the CLI creates through *backend*."""

    def make_client(config: SkillportConfig | None = None) -> HttpClient:
        return backend.client(config)

    monkeypatch.setattr("skillport.cli.add_cmd.HttpClient", make_client)
    monkeypatch.setattr("skillport.cli.search_cmd.HttpClient", make_client)
    return backend


@pytest.fixture
def widgets(fake_network: FakeBackend) -> FakeBackend:
    """acme/widgets with a react-tips skill and one asset, listable."""
    fake_network.enable_tree("acme", "widgets")
    fake_network.add_file("acme", "widgets", "main", "skills/react-tips/SKILL.md", SKILL_BODY)
    fake_network.add_file("acme", "widgets", "main", "skills/react-tips/notes.md", "# notes\n")
    return fake_network
