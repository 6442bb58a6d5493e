"""Tests for mirroring a skill's repository subtree to disk."""

from __future__ import annotations

import asyncio
from pathlib import Path

from skillport.install.materializer import DirectoryMaterializer, MaterializeResult, select_entries
from skillport.remote.tree import RepoTreeEntry, TreeClient
from tests.fakes import SKILL_BODY, FakeBackend

SKILL_DIR = "skills/react-tips"


def _materialize(
    backend: FakeBackend,
    target: Path,
    containing_dir: str = SKILL_DIR,
    max_concurrency: int = 8,
) -> MaterializeResult:
    async def run() -> MaterializeResult:
        async with backend.client() as http:
            materializer = DirectoryMaterializer(TreeClient(http), max_concurrency=max_concurrency)
            return await materializer.materialize("acme", "widgets", "main", containing_dir, target)

    return asyncio.run(run())


def _seed(backend: FakeBackend) -> None:
    backend.enable_tree("acme", "widgets")
    backend.add_file("acme", "widgets", "main", f"{SKILL_DIR}/SKILL.md", SKILL_BODY)
    backend.add_file("acme", "widgets", "main", f"{SKILL_DIR}/scripts/lint.sh", "#!/bin/sh\n")
    backend.add_file("acme", "widgets", "main", f"{SKILL_DIR}/references/hooks.md", "# hooks")
    backend.add_file("acme", "widgets", "main", "skills/other/SKILL.md", "# other")


class TestMaterialize:
    def test_mirrors_subtree(self, backend: FakeBackend, tmp_path: Path) -> None:
        _seed(backend)

        result = _materialize(backend, tmp_path / "react-tips")

        assert (result.succeeded, result.failed) == (3, 0)
        assert result.ok
        root = tmp_path / "react-tips"
        assert (root / "SKILL.md").read_text() == SKILL_BODY
        assert (root / "scripts" / "lint.sh").read_text() == "#!/bin/sh\n"
        assert (root / "references" / "hooks.md").read_text() == "# hooks"
        assert not (root / "other").exists()
        assert result.written == sorted(result.written)

    def test_partial_failure_is_counted_not_raised(self, backend: FakeBackend, tmp_path: Path) -> None:
        _seed(backend)
        backend.failing_paths.add(f"{SKILL_DIR}/references/hooks.md")

        result = _materialize(backend, tmp_path / "react-tips")

        assert (result.succeeded, result.failed) == (2, 1)
        assert (tmp_path / "react-tips" / "SKILL.md").is_file()
        assert not (tmp_path / "react-tips" / "references" / "hooks.md").exists()

    def test_listed_but_missing_file(self, backend: FakeBackend, tmp_path: Path) -> None:
        _seed(backend)
        backend.list_only("acme", "widgets", "main", f"{SKILL_DIR}/gone.txt")

        result = _materialize(backend, tmp_path / "react-tips")

        assert (result.succeeded, result.failed) == (3, 1)

    def test_serial_download(self, backend: FakeBackend, tmp_path: Path) -> None:
        _seed(backend)

        result = _materialize(backend, tmp_path / "react-tips", max_concurrency=1)

        assert result.succeeded == 3

    def test_listing_failure(self, backend: FakeBackend, tmp_path: Path) -> None:
        result = _materialize(backend, tmp_path / "react-tips")

        assert result.listed is False
        assert not result.ok
        assert not (tmp_path / "react-tips").exists()

    def test_empty_directory(self, backend: FakeBackend, tmp_path: Path) -> None:
        _seed(backend)

        result = _materialize(backend, tmp_path / "x", containing_dir="skills/nothing-here")

        assert result == MaterializeResult()

    def test_repository_root(self, backend: FakeBackend, tmp_path: Path) -> None:
        backend.enable_tree("acme", "widgets")
        backend.add_file("acme", "widgets", "main", "SKILL.md", SKILL_BODY)
        backend.add_file("acme", "widgets", "main", "lib/util.py", "pass\n")

        result = _materialize(backend, tmp_path / "widgets", containing_dir="")

        assert result.succeeded == 2
        assert (tmp_path / "widgets" / "lib" / "util.py").is_file()


class TestSelectEntries:
    ENTRIES = [
        RepoTreeEntry("skills/a", "tree"),
        RepoTreeEntry("skills/a/SKILL.md", "blob"),
        RepoTreeEntry("skills/a/x/y.txt", "blob"),
        RepoTreeEntry("skills/ab/SKILL.md", "blob"),
        RepoTreeEntry("README.md", "blob"),
    ]

    def test_prefix_is_a_directory_boundary(self) -> None:
        assert select_entries(self.ENTRIES, "skills/a") == [
            ("skills/a/SKILL.md", "SKILL.md"),
            ("skills/a/x/y.txt", "x/y.txt"),
        ]

    def test_trailing_slash_ignored(self) -> None:
        assert select_entries(self.ENTRIES, "skills/a/") == select_entries(self.ENTRIES, "skills/a")

    def test_root_selects_every_blob(self) -> None:
        paths = [rel for _, rel in select_entries(self.ENTRIES, "")]
        assert paths == ["skills/a/SKILL.md", "skills/a/x/y.txt", "skills/ab/SKILL.md", "README.md"]
