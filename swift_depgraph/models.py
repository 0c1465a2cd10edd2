"""Data models for swift-depgraph.

These Pydantic models represent the core data structures passed between
the locator, the extractor and the graph serializer.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LocalDependency(BaseModel):
    """A dependency referenced by filesystem path.

    Attributes:
        name: Explicit name from the ``name:`` argument.
        path: Path string from the ``path:`` argument, relative to the
              consuming project and kept verbatim.
    """

    name: str
    path: str


class ProjectRecord(BaseModel):
    """Dependencies declared by a single manifest.

    Attributes:
        name: Project name, i.e. the manifest's enclosing directory.
        remote_deps: Repository names parsed from ``url:`` declarations,
                     in source order. Duplicates are kept.
        local_deps: Path-based declarations, in source order.
    """

    name: str
    remote_deps: list[str] = Field(default_factory=list)
    local_deps: list[LocalDependency] = Field(default_factory=list)


class GraphConfig(BaseModel):
    """Options for a single graph run.

    Defaults match the command line defaults, so an empty config file
    and no flags produce ``dependencies_graph.dot`` for the current
    directory.
    """

    output: str = "dependencies_graph"
    project_color: str = "lightcoral"
    local_color: str = "lightblue"
    remote_color: str = "lightgreen"
    path: str = "."
