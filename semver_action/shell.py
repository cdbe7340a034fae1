"""Shell and git utilities.

Provides a thin wrapper around subprocess for read-only git queries, plus
the timestamped log lines and section headers printed during a run.
"""

from __future__ import annotations

import subprocess
import sys
from datetime import datetime, timezone


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "log", "-1", "--format=%s").
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., a repository
               without commits or outside a work tree).

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.strip()


def log(msg: str, *, err: bool = False) -> None:
    """Print a log line prefixed with the current UTC time.

    Lines look like ``[2024-05-01T12:00:00Z] message``. Errors go to stderr.
    """
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    print(f"[{stamp}] {msg}", file=sys.stderr if err else sys.stdout)


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a run (detect, resolve, bump) in
    workflow logs.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")
