"""Tests for ``skillport list`` and ``skillport remove``."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from skillport.cli.main import cli
from tests.fakes import FakeBackend


def _install(runner: CliRunner, *args: str) -> None:
    result = runner.invoke(cli, ["add", "acme/widgets/react-tips", *args])
    assert result.exit_code == 0, result.output


class TestList:
    def test_empty_store(self, runner: CliRunner, isolated_env: Path) -> None:
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "Agent: local" in result.output
        assert "No skills installed yet." in result.output

    def test_lists_installed_skill(self, runner: CliRunner, widgets: FakeBackend, isolated_env: Path) -> None:
        _install(runner, "-a", "claude")

        result = runner.invoke(cli, ["ls", "-a", "claude"])

        assert result.exit_code == 0
        assert "react-tips" in result.output

    def test_markdown_store(
        self, runner: CliRunner, widgets: FakeBackend, isolated_env: Path,
    ) -> None:
        _install(runner)

        result = runner.invoke(cli, ["list"])

        assert "react-tips" in result.output


class TestRemove:
    def test_remove_with_yes(self, runner: CliRunner, widgets: FakeBackend, isolated_env: Path) -> None:
        _install(runner, "-a", "claude")

        result = runner.invoke(cli, ["remove", "react-tips", "-a", "claude", "--yes"])

        assert result.exit_code == 0, result.output
        assert "Removed react-tips from claude" in result.output
        assert not (isolated_env / ".claude" / "skills" / "react-tips").exists()

    def test_confirmation_accepted(self, runner: CliRunner, widgets: FakeBackend, isolated_env: Path) -> None:
        _install(runner)

        result = runner.invoke(cli, ["rm", "react-tips"], input="y\n")

        assert result.exit_code == 0, result.output
        assert "react-tips" not in (isolated_env / ".skills" / "SKILLS.md").read_text()

    def test_confirmation_declined(self, runner: CliRunner, widgets: FakeBackend, isolated_env: Path) -> None:
        _install(runner, "-a", "claude")

        result = runner.invoke(cli, ["remove", "react-tips", "-a", "claude"], input="n\n")

        assert result.exit_code == 1
        assert (isolated_env / ".claude" / "skills" / "react-tips" / "SKILL.md").is_file()

    def test_not_installed(self, runner: CliRunner, isolated_env: Path) -> None:
        result = runner.invoke(cli, ["remove", "ghost", "--yes"])

        assert result.exit_code == 1
        assert "is not installed" in result.output

    def test_path_like_id(self, runner: CliRunner, isolated_env: Path) -> None:
        result = runner.invoke(cli, ["remove", "..", "-a", "claude", "--yes"])

        assert result.exit_code == 1
        assert "Invalid skill id" in result.output
