"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

APP_MANIFEST = """\
// swift-tools-version: 5.10
import PackageDescription

let package = Package(
    name: "App",
    platforms: [.macOS(.v13)],
    dependencies: [
        .package(url: "https://github.com/apple/swift-argument-parser.git", from: "1.2.0"),
        .package(url: "https://github.com/pointfreeco/swift-snapshot-testing.git", exact: "1.15.0"),
        .package(name: "Core", path: "../Core"),
    ],
    targets: [
        .executableTarget(name: "App", dependencies: ["Core"]),
    ]
)
"""

CORE_MANIFEST = """\
// swift-tools-version: 5.10
import PackageDescription

let package = Package(
    name: "Core",
    dependencies: [
        .package(url: "http://git.example.com/mirrors/team/Logging.git", branch: "main"),
    ],
    targets: [.target(name: "Core")]
)
"""

EMPTY_MANIFEST = """\
// swift-tools-version: 5.10
import PackageDescription

let package = Package(name: "Empty", targets: [.target(name: "Empty")])
"""


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes <tmp>/<rel_dir>/Package.swift."""

    def _write(rel_dir: str, content: str) -> Path:
        directory = tmp_path / rel_dir
        directory.mkdir(parents=True, exist_ok=True)
        manifest = directory / "Package.swift"
        manifest.write_text(content)
        return manifest

    return _write


@pytest.fixture
def swift_workspace(tmp_path: Path, write_manifest: Callable[[str, str], Path]) -> Path:
    """Create a small workspace with three packages."""
    root = tmp_path / "workspace"
    write_manifest("workspace/App", APP_MANIFEST)
    write_manifest("workspace/Core", CORE_MANIFEST)
    write_manifest("workspace/Libraries/Empty", EMPTY_MANIFEST)
    (root / "App" / "Sources").mkdir(parents=True)
    (root / "App" / "Sources" / "main.swift").write_text('print("hi")\n')
    return root
