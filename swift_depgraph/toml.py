"""Configuration file loading.

Uses tomlkit to read an optional ``.depgraph.toml`` with a ``[depgraph]``
table, so a team can commit its preferred output name and colors:

    [depgraph]
    output = "docs/dependencies"
    project-color = "gold"
    local-color = "lightblue"
    remote-color = "lightgreen"
    path = "Packages"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError

from .models import GraphConfig
from .shell import fatal

CONFIG_FILENAME = ".depgraph.toml"

# TOML key → GraphConfig field
_CONFIG_KEYS = {
    "output": "output",
    "project-color": "project_color",
    "local-color": "local_color",
    "remote-color": "remote_color",
    "path": "path",
}


def load_config_doc(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a config file.

    Raises:
        SystemExit: If the file cannot be read, is not UTF-8, or is not
            valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        fatal(f"Could not read {path}: {exc}")
    try:
        return tomlkit.parse(text)
    except ParseError as exc:
        fatal(f"Invalid TOML in {path}: {exc}")


def get_config_values(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Extract known settings from the [depgraph] table.

    Unknown keys are ignored. Values are returned as plain strings keyed
    by GraphConfig field name.

    Raises:
        SystemExit: If ``depgraph`` is present but is not a table.
    """
    table = doc.get("depgraph", {})
    if not isinstance(table, dict):
        fatal("[depgraph] must be a table")
    return {
        field: str(table[key]) for key, field in _CONFIG_KEYS.items() if key in table
    }


def load_config(config_path: Path, **overrides: str | None) -> GraphConfig:
    """Build a GraphConfig from a config file plus explicit overrides.

    Precedence, highest first: overrides that are not None, values from
    the file, built-in defaults. A missing file is not an error.

    Args:
        config_path: Config file location.
        **overrides: GraphConfig field values, typically from CLI options.
            ``path`` here is the scan root, not the config file.
    """
    values: dict[str, Any] = {}
    if config_path.is_file():
        values.update(get_config_values(load_config_doc(config_path)))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GraphConfig(**values)
