"""Manifest discovery.

Walks a directory tree and collects every Swift package manifest below it.
"""

from __future__ import annotations

import os
from pathlib import Path

MANIFEST_NAME = "Package.swift"


def find_manifests(root: Path) -> list[Path]:
    """Recursively find all manifest files below ``root``.

    The root is made absolute first. A root that does not exist, or that
    cannot be listed, produces an empty list rather than an error; the
    same goes for unreadable subdirectories, which are skipped.

    Results are sorted so repeated runs over the same tree agree.

    Returns:
        Absolute paths to every regular file named ``Package.swift``.
    """
    root = Path(os.path.abspath(root))
    if not root.is_dir():
        return []

    manifests: list[Path] = []
    # os.walk skips directories it cannot list
    for dirpath, _dirnames, filenames in os.walk(root):
        if MANIFEST_NAME in filenames:
            candidate = Path(dirpath) / MANIFEST_NAME
            if candidate.is_file():
                manifests.append(candidate)
    return sorted(manifests)


def project_name(manifest: Path) -> str:
    """Return the project name for a manifest: its parent directory's name.

    Example:
        /work/Networking/Package.swift → "Networking"
    """
    return manifest.parent.name
