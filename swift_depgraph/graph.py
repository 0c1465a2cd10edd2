"""Dependency graph construction and DOT serialization.

The graph is a plain mapping of project name → ProjectRecord. Dependency
targets are not stored as entries; they only appear as nodes when the
graph is rendered to Graphviz DOT.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import ProjectRecord

DOT_PREAMBLE = (
    "digraph dependencies {\n"
    "    graph [rankdir=LR, splines=polyline, nodesep=1.0, ranksep=1.0];\n"
    "    node [shape=box, style=filled, fontsize=12, fontcolor=black, "
    "width=2.0, height=1.0];\n"
    "    edge [color=gray, fontsize=10, fontcolor=black];\n"
)


def build_graph(records: Iterable[ProjectRecord]) -> dict[str, ProjectRecord]:
    """Index project records by name.

    If two manifests live in directories with the same name, the record
    seen last replaces the earlier one. Dependencies are not merged.
    """
    graph: dict[str, ProjectRecord] = {}
    for record in records:
        graph[record.name] = record
    return graph


def _node(name: str, color: str) -> str:
    return f'    "{name}" [color="{color}"];\n'


def _edge(source: str, target: str) -> str:
    return f'    "{source}" -> "{target}";\n'


def render_dot(
    graph: dict[str, ProjectRecord],
    project_color: str = "lightcoral",
    local_color: str = "lightblue",
    remote_color: str = "lightgreen",
) -> str:
    """Serialize the graph as a Graphviz DOT digraph.

    Projects are emitted in alphabetical order so the same graph always
    produces the same text. For each project the project node comes
    first, then each remote dependency (node + edge), then each local
    dependency (node + edge).

    Node declarations are not deduplicated. When a name is declared more
    than once, Graphviz keeps the attributes of the last declaration.
    Names are quoted but not escaped.

    Args:
        graph: Map of project name → ProjectRecord.
        project_color: Fill color for project nodes.
        local_color: Fill color for local dependency nodes.
        remote_color: Fill color for remote dependency nodes.

    Returns:
        The DOT source, terminated by a newline.
    """
    parts = [DOT_PREAMBLE]
    for project in sorted(graph):
        record = graph[project]
        parts.append(_node(project, project_color))
        for dep in record.remote_deps:
            parts.append(_node(dep, remote_color))
            parts.append(_edge(project, dep))
        for local in record.local_deps:
            parts.append(_node(local.name, local_color))
            parts.append(_edge(project, local.name))
    parts.append("}\n")
    return "".join(parts)
