"""CLI entry point for swift-depgraph."""

from __future__ import annotations

from pathlib import Path

import click

from .pipeline import run_graph
from .toml import CONFIG_FILENAME, load_config


@click.command()
@click.version_option(package_name="swift-depgraph")
@click.option(
    "-o",
    "--output",
    default=None,
    help="Output file name for the generated graph (without extension).  "
    "[default: dependencies_graph]",
)
@click.option(
    "-p",
    "--project-color",
    default=None,
    help="Color for project nodes.  [default: lightcoral]",
)
@click.option(
    "-l",
    "--local-color",
    default=None,
    help="Color for local dependency nodes.  [default: lightblue]",
)
@click.option(
    "-r",
    "--remote-color",
    default=None,
    help="Color for remote dependency nodes.  [default: lightgreen]",
)
@click.option(
    "--path",
    default=None,
    help="Directory to scan for Package.swift files.  [default: .]",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=CONFIG_FILENAME,
    show_default=True,
    help="Config file with a [depgraph] table.",
)
@click.option("--no-render", is_flag=True, help="Only write the DOT file.")
def cli(
    output: str | None,
    project_color: str | None,
    local_color: str | None,
    remote_color: str | None,
    path: str | None,
    config_file: str,
    no_render: bool,
) -> None:
    """Generate a dependency graph for Swift Package Manager projects."""
    config = load_config(
        Path(config_file),
        output=output,
        project_color=project_color,
        local_color=local_color,
        remote_color=remote_color,
        path=path,
    )
    run_graph(config, render=not no_render)
