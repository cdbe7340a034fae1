"""Release decision pipeline: detect → resolve → read tags → bump.

This module orchestrates a single semver-action run:
1. Extract a change token from the commit, branch or pull-request labels
2. Resolve the token to a bump category through the user's mapping
3. Read the latest version tag (only when a bump is needed)
4. Increment that version

A missing token or an unmapped token ends the run early with "no release
needed". Nothing here writes to the repository.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import semver

from .mapping import resolve_bump
from .models import ActionConfig, ActionContext, BumpCategory, DetectionMode, ReleaseDecision
from .shell import git, log, step
from .tokens import (
    extract_token,
    read_branch_name,
    read_commit_subject,
    read_event_labels,
)
from .versions import TAG_PATTERN, bump_version, latest_version

# git glob patterns; TAG_PATTERN then drops anything with a suffix
VERSION_TAG_GLOBS = ("v[0-9]*.[0-9]*.[0-9]*", "[0-9]*.[0-9]*.[0-9]*")


def list_version_tags() -> list[str]:
    """List version-shaped tags, most recently created first.

    v-prefixed tags come before bare ones. Returns [] outside a git
    repository or when no tags exist.
    """
    tags: list[str] = []
    for pattern in VERSION_TAG_GLOBS:
        output = git("tag", "--list", "--sort=-creatordate", pattern, check=False)
        tags.extend(t for t in output.splitlines() if TAG_PATTERN.match(t))
    return tags


def gather_context(
    mode: DetectionMode,
    *,
    ref_name: str | None = None,
    event_path: str | Path | None = None,
    labels: str = "",
) -> ActionContext:
    """Read only the repository/event data the chosen mode needs."""
    if mode is DetectionMode.COMMIT:
        return ActionContext(commit_subject=read_commit_subject())
    if mode is DetectionMode.BRANCH:
        return ActionContext(ref_name=read_branch_name(ref_name))
    return ActionContext(
        event_labels=read_event_labels(event_path), fallback_labels=labels
    )


def decide(
    config: ActionConfig,
    context: ActionContext,
    tags: Callable[[], Iterable[str]] = list_version_tags,
) -> ReleaseDecision:
    """Compute the release decision for one run.

    Args:
        config: Detection mode and bump mapping.
        context: Commit subject, branch name or labels to read the token from.
        tags: Returns version tags newest-created first. Only called when a
              bump is actually needed.

    Returns:
        A ReleaseDecision carrying the next version, or one with
        release_needed=False when no token or no mapping was found.

    Raises:
        UnknownBumpError: If the token maps to a category that is not
            major, minor or patch.
    """
    step("Detecting change token")
    token = extract_token(config.mode, context)
    if token is None:
        log("No change token detected, skipping version bump.")
        return ReleaseDecision.skip()

    step("Resolving bump")
    category = resolve_bump(token, config.mapping)
    if category is BumpCategory.NONE:
        log(f"Mapping returned none for token: {token}. No bump.")
        return ReleaseDecision.skip()
    log(f"Token {token} maps to {category.value}")

    current: semver.Version = latest_version(tags())
    log(f"Last version: {current}")
    next_version = bump_version(category, current)
    log(f"New version computed: v{next_version}")
    return ReleaseDecision.release(next_version)


def run_action(
    config: ActionConfig,
    *,
    ref_name: str | None = None,
    event_path: str | Path | None = None,
    labels: str = "",
) -> ReleaseDecision:
    """Gather context from git and the event payload, then decide."""
    log(f"Semantic version action started. mode={config.mode.value}")
    context = gather_context(
        config.mode, ref_name=ref_name, event_path=event_path, labels=labels
    )
    return decide(config, context)
