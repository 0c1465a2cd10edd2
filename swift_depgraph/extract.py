"""Dependency extraction from manifest text.

Dependencies are recognized by pattern, not by parsing Swift. Two
declaration shapes are understood:

    .package(url: "https://github.com/apple/swift-argument-parser.git", from: "1.0.0")
    .package(name: "Core", path: "../Core")

The first yields a remote dependency named after the repository
("swift-argument-parser"), the second a local dependency with an explicit
name and path.
"""

from __future__ import annotations

import re
from pathlib import Path

from .locator import project_name
from .models import LocalDependency, ProjectRecord
from .shell import warn

# .package(url: "https://host/org/Name.git", from: "1.0.0") → Name
REMOTE_DEPENDENCY_RE = re.compile(
    r'\.package\(.*?url: "https?://(?:[^/]+/)+([^/]+)\.git".*?\)'
)

# .package(name: "Name", path: "../Name") → (Name, ../Name)
LOCAL_DEPENDENCY_RE = re.compile(r'\.package\(name: "(.*?)", path: "(.*?)"\)')


def extract_remote_dependencies(content: str) -> list[str]:
    """Return remote dependency names in the order they appear."""
    return [m.group(1) for m in REMOTE_DEPENDENCY_RE.finditer(content)]


def extract_local_dependencies(content: str) -> list[LocalDependency]:
    """Return local (name, path) dependencies in the order they appear."""
    return [
        LocalDependency(name=m.group(1), path=m.group(2))
        for m in LOCAL_DEPENDENCY_RE.finditer(content)
    ]


def extract_dependencies(
    content: str | bytes,
) -> tuple[list[str], list[LocalDependency]]:
    """Extract remote and local dependencies from manifest content.

    Raw bytes are decoded as UTF-8 first. Content that is not valid UTF-8
    yields no dependencies instead of an error.

    Returns:
        Tuple of (remote dependency names, local dependencies).
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            warn(f"Could not decode manifest content: {exc}")
            return [], []
    return extract_remote_dependencies(content), extract_local_dependencies(content)


def read_manifest(manifest: Path) -> ProjectRecord:
    """Read a manifest file and collect its dependencies.

    A file that cannot be read is reported and treated as declaring no
    dependencies, so one bad manifest does not abort the whole scan.
    """
    name = project_name(manifest)
    try:
        content = manifest.read_bytes()
    except OSError as exc:
        warn(f"Error reading file: {manifest} ({exc})")
        return ProjectRecord(name=name)

    remote_deps, local_deps = extract_dependencies(content)
    return ProjectRecord(name=name, remote_deps=remote_deps, local_deps=local_deps)
