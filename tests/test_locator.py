"""Tests for swift_depgraph.locator."""

from __future__ import annotations

from collections.abc import Callable
import os
import stat
from pathlib import Path

import pytest

from swift_depgraph.locator import MANIFEST_NAME, find_manifests, project_name


needs_permissions = pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)


class TestFindManifests:
    def test_finds_nested_manifests(self, swift_workspace: Path) -> None:
        result = find_manifests(swift_workspace)
        assert result == sorted(
            [
                swift_workspace / "App" / MANIFEST_NAME,
                swift_workspace / "Core" / MANIFEST_NAME,
                swift_workspace / "Libraries" / "Empty" / MANIFEST_NAME,
            ]
        )

    def test_empty_tree(self, tmp_path: Path) -> None:
        assert find_manifests(tmp_path) == []

    def test_missing_root_returns_empty(self, tmp_path: Path) -> None:
        assert find_manifests(tmp_path / "does-not-exist") == []

    def test_root_is_a_file(self, tmp_path: Path) -> None:
        f = tmp_path / "notes.txt"
        f.write_text("x")
        assert find_manifests(f) == []

    def test_requires_exact_name(
        self, tmp_path: Path, write_manifest: Callable[[str, str], Path]
    ) -> None:
        write_manifest("Real", "")
        (tmp_path / "Other").mkdir()
        (tmp_path / "Other" / "MyPackage.swift").write_text("")
        (tmp_path / "Other" / "Package.swift.bak").write_text("")
        result = find_manifests(tmp_path)
        assert result == [tmp_path / "Real" / MANIFEST_NAME]

    def test_ignores_directory_named_like_manifest(self, tmp_path: Path) -> None:
        (tmp_path / "odd" / MANIFEST_NAME).mkdir(parents=True)
        assert find_manifests(tmp_path) == []

    def test_relative_root_gives_absolute_paths(
        self,
        tmp_path: Path,
        write_manifest: Callable[[str, str], Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        write_manifest("Pkg", "")
        monkeypatch.chdir(tmp_path)
        result = find_manifests(Path("."))
        assert len(result) == 1
        assert result[0].is_absolute()
        assert result[0] == tmp_path / "Pkg" / MANIFEST_NAME

    @needs_permissions
    def test_unreadable_root_returns_empty(
        self, tmp_path: Path, write_manifest: Callable[[str, str], Path]
    ) -> None:
        write_manifest("locked/Pkg", "")
        locked = tmp_path / "locked"
        locked.chmod(0)
        try:
            assert find_manifests(locked) == []
        finally:
            locked.chmod(stat.S_IRWXU)

    @needs_permissions
    def test_unreadable_subdirectory_is_skipped(
        self, tmp_path: Path, write_manifest: Callable[[str, str], Path]
    ) -> None:
        write_manifest("Open", "")
        write_manifest("Locked/Inner", "")
        locked = tmp_path / "Locked"
        locked.chmod(0)
        try:
            assert find_manifests(tmp_path) == [tmp_path / "Open" / MANIFEST_NAME]
        finally:
            locked.chmod(stat.S_IRWXU)


class TestProjectName:
    def test_uses_parent_directory(self) -> None:
        assert project_name(Path("/work/Networking/Package.swift")) == "Networking"

    def test_nested(self) -> None:
        assert project_name(Path("/a/b/c/Package.swift")) == "c"
