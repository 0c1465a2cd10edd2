"""Graph pipeline: locate → extract → build → write → render.

This module orchestrates a swift-depgraph run:
1. Find every Package.swift below the scan root
2. Extract remote and local dependencies from each manifest
3. Build the project graph and serialize it to Graphviz DOT
4. Write the DOT file
5. Render it to PNG with the external ``dot`` binary

Per-manifest problems are reported and skipped. Failing to write the DOT
file ends the run; failing to render it only produces a warning, since
the DOT file is already on disk.
"""

from __future__ import annotations

from pathlib import Path

from .extract import read_manifest
from .graph import build_graph, render_dot
from .locator import find_manifests
from .models import GraphConfig, ProjectRecord
from .shell import fatal, run, step, warn


def _printable(text: str) -> str:
    """Replace undecodable filename bytes so the text is safe to print."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def collect_projects(root: Path) -> dict[str, ProjectRecord]:
    """Scan ``root`` for manifests and build the project graph."""
    step(_printable(f"Scanning {root} for Package.swift files"))

    manifests = find_manifests(root)
    graph = build_graph(read_manifest(m) for m in manifests)

    if not graph:
        print("  <no manifests found>")
    for name in sorted(graph):
        record = graph[name]
        deps = [*record.remote_deps, *(d.name for d in record.local_deps)]
        suffix = f" → [{', '.join(deps)}]" if deps else ""
        print(_printable(f"  {name}{suffix}"))

    return graph


def write_dot(dot: str, output: str) -> Path:
    """Write DOT source to ``<output>.dot`` and return its path.

    Raises:
        SystemExit: If the file cannot be written.
    """
    dot_path = Path(f"{output}.dot")
    try:
        # names from undecodable directory entries keep their original bytes
        dot_path.write_text(dot, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        fatal(f"Could not write {dot_path}: {exc}")
    print(_printable(f"  DOT file created: {dot_path}"))
    return dot_path


def render_png(dot_path: Path, output: str) -> Path | None:
    """Render a DOT file to ``<output>.png`` with Graphviz.

    Returns:
        The PNG path, or None if Graphviz is missing or failed.
    """
    png_path = Path(f"{output}.png")
    try:
        result = run("dot", "-Tpng", str(dot_path), "-o", str(png_path), check=False)
    except FileNotFoundError:
        warn("Graphviz 'dot' not found on PATH; skipping PNG rendering")
        return None
    if result.returncode != 0:
        warn(f"dot exited with status {result.returncode}; no image produced")
        return None
    print(f"  Dependency graph created: {png_path}")
    return png_path


def run_graph(config: GraphConfig, *, render: bool = True) -> Path:
    """Execute the full pipeline.

    Args:
        config: Scan root, output base name and node colors.
        render: If False, stop after writing the DOT file.

    Returns:
        Path of the written DOT file.
    """
    graph = collect_projects(Path(config.path))

    step("Writing dependency graph")
    dot = render_dot(
        graph,
        project_color=config.project_color,
        local_color=config.local_color,
        remote_color=config.remote_color,
    )
    dot_path = write_dot(dot, config.output)

    if render:
        render_png(dot_path, config.output)

    return dot_path
