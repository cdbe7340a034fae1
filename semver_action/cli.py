"""CLI entry point for semver-action."""

from __future__ import annotations

import os
from pathlib import Path

import click

from .exceptions import SemverActionError
from .mapping import parse_mapping
from .models import ActionConfig, BumpMapping, DetectionMode, ReleaseDecision
from .outputs import DEFAULT_GITHUB_OUTPUT, summary_json, write_decision
from .pipeline import run_action
from .shell import log
from .toml import load_mapping_from_pyproject

DEFAULT_WORKSPACE = "/github/workspace"


def load_mapping(map_json: str | None, pyproject: str | None) -> BumpMapping:
    """Mapping from the ``map`` input, or from pyproject.toml when it is unset."""
    text = (map_json or "").strip()
    if pyproject and text in ("", "{}"):
        return load_mapping_from_pyproject(Path(pyproject))
    return parse_mapping(text)


@click.group()
@click.version_option(package_name="semver-action")
def cli() -> None:
    """Compute the next semantic version from a commit, branch or label."""


@cli.command("next")
@click.option(
    "--type",
    "detection_type",
    envvar="INPUT_TYPE",
    default="label",
    show_default=True,
    help="Where to read the change token from: commit, branch or label.",
)
@click.option(
    "--map",
    "map_json",
    envvar="INPUT_MAP",
    default="",
    help='JSON object of category → tokens, e.g. {"minor": ["feature"]}.',
)
@click.option(
    "--labels",
    envvar="INPUT_LABELS",
    default="",
    help="Space-separated labels used when the event payload has none.",
)
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    default=None,
    help="Path to the GitHub event payload JSON.",
)
@click.option(
    "--ref-name",
    envvar="GITHUB_REF_NAME",
    default=None,
    help="Branch name; defaults to the checked-out branch.",
)
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    default=DEFAULT_GITHUB_OUTPUT,
    show_default=True,
    help="File to append step outputs to.",
)
@click.option(
    "--workspace",
    type=click.Path(),
    default=DEFAULT_WORKSPACE,
    show_default=True,
    help="Repository directory; used when it exists.",
)
@click.option(
    "--pyproject",
    type=click.Path(),
    default=None,
    help="Read the mapping from [tool.semver-action.map] when --map is unset.",
)
def next_command(
    detection_type: str,
    map_json: str,
    labels: str,
    event_path: str | None,
    ref_name: str | None,
    github_output: str,
    workspace: str,
    pyproject: str | None,
) -> None:
    """Compute the next version and write version/release_needed/release_id."""
    if Path(workspace).is_dir():
        os.chdir(workspace)

    log(f"DEBUG: INPUT_TYPE={detection_type!r} map length={len(map_json)}")

    try:
        mapping = load_mapping(map_json, pyproject)
        mode = DetectionMode.parse(detection_type)
        decision = run_action(
            ActionConfig(mode=mode, mapping=mapping),
            ref_name=ref_name,
            event_path=event_path,
            labels=labels,
        )
    except SemverActionError as exc:
        write_decision(github_output, ReleaseDecision.skip())
        raise click.ClickException(str(exc)) from exc
    except Exception:
        # outputs are always written, even when git is missing or crashes
        write_decision(github_output, ReleaseDecision.skip())
        raise

    write_decision(github_output, decision)
    if decision.release_needed:
        click.echo(summary_json(decision))
