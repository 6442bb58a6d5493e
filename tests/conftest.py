"""Shared fixtures for skillport tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import FakeBackend


@pytest.fixture
def backend() -> FakeBackend:
    """An empty fake GitHub + registry backend."""
    return FakeBackend()


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside an empty project directory with an empty home.

    Returns:
        The project directory (the home directory is ``<project>/home``).
    """
    project = tmp_path / "project"
    home = tmp_path / "home"
    project.mkdir()
    home.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("SKILLS_API_URL", raising=False)
    monkeypatch.delenv("SKILLS_API_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return project
