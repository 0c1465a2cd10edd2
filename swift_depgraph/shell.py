"""Console and subprocess utilities.

Provides a thin wrapper around subprocess for running the external
renderer, plus the output formatting helpers used by the pipeline.
"""

from __future__ import annotations

import subprocess
import sys
from typing import NoReturn


def run(*args: str, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    """Run an external command.

    Output is not captured - it streams directly to the terminal so users
    can see renderer diagnostics.

    Args:
        *args: Command and arguments (e.g., "dot", "-Tpng", "graph.dot").
        check: If True (default), raise on non-zero exit.

    Returns:
        CompletedProcess with returncode for checking success.
    """
    return subprocess.run(args, check=check)


def step(msg: str) -> None:
    """Print a step header between pipeline phases.

    A run prints two: one before scanning the tree for manifests and one
    before the DOT file is written and rendered.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def warn(msg: str) -> None:
    """Print a warning to stderr and carry on.

    Use for per-file problems that should not halt the run.
    """
    print(f"WARNING: {msg}", file=sys.stderr)


def fatal(msg: str) -> NoReturn:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors such as an unwritable DOT file or a
    malformed config file.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
