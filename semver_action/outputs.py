"""GitHub step output writing."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .models import ReleaseDecision

DEFAULT_GITHUB_OUTPUT = "/github/workflow/output"


def write_output(output_path: str | None, name: str, value: str) -> None:
    """Append ``name=value`` to the step output file.

    When the file's directory is missing or not writable the pair is printed
    instead, so local runs still show the result.
    """
    if output_path and os.access(Path(output_path).parent, os.W_OK):
        with open(output_path, "a") as fh:
            fh.write(f"{name}={value}\n")
    else:
        print(f"GITHUB_OUTPUT not set or not writable; {name}={value}")


def write_decision(output_path: str | None, decision: ReleaseDecision) -> None:
    """Write all three outputs for ``decision``."""
    for name, value in decision.outputs().items():
        write_output(output_path, name, value)


def summary_json(decision: ReleaseDecision) -> str:
    """One-line JSON summary printed at the end of a successful run."""
    outputs = decision.outputs()
    return json.dumps(
        {
            "version": outputs["version"],
            "release_needed": decision.release_needed,
            "release_id": outputs["release_id"],
        }
    )
