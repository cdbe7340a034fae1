"""Change token extraction.

A change token is the short string ("feature", "fix", ...) that says what
kind of change is being released. It is read from one of three places,
selected by the detection mode:

- commit: prefix of the latest commit subject, "[token] ..." or "token: ..."
- branch: text before the first "/" in the branch name
- label:  first pull-request label, or the first entry of a fallback list

Not finding a token is a normal outcome and is reported as None.
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path

from .models import ActionContext, DetectionMode
from .shell import git, log

BRACKET_PREFIX = re.compile(r"^\[([^\]]+)\]")
COLON_PREFIX = re.compile(r"^([^:]+):")


def token_from_commit(subject: str) -> str | None:
    """Extract the token from a commit subject line.

    "[feature] add login" → "feature", "fix: resolve bug" → "fix".
    """
    subject = subject.strip()
    if not subject:
        log("No commit message found.")
        return None
    for pattern in (BRACKET_PREFIX, COLON_PREFIX):
        match = pattern.match(subject)
        if match:
            return match.group(1)
    log(f"Could not find commit prefix in: {subject}")
    return None


def token_from_branch(ref_name: str) -> str | None:
    """Extract the token from a branch name ("feature/add-login" → "feature")."""
    if not ref_name:
        log("No branch name found.")
        return None
    prefix, sep, _ = ref_name.partition("/")
    if not sep or not prefix:
        log(f"Branch prefix not found in: {ref_name}")
        return None
    return prefix


def token_from_labels(event_labels: list[str], fallback_labels: str = "") -> str | None:
    """Return the first event label, else the first fallback label."""
    if event_labels and event_labels[0]:
        return event_labels[0]
    fallback = fallback_labels.split()
    if fallback:
        return fallback[0]
    log("No labels found in event payload.")
    return None


def extract_token(mode: DetectionMode, context: ActionContext) -> str | None:
    """Run the extractor selected by ``mode`` against ``context``."""
    if mode is DetectionMode.COMMIT:
        token = token_from_commit(context.commit_subject)
    elif mode is DetectionMode.BRANCH:
        token = token_from_branch(context.ref_name)
    else:
        token = token_from_labels(context.event_labels, context.fallback_labels)

    if token is None:
        log(f"Failed to detect change type from {mode.value}.")
    else:
        log(f"Detected token from {mode.value}: {token}")
    return token


def read_commit_subject() -> str:
    """Subject of HEAD, or "" when the repository has no commits."""
    return git("log", "-1", "--format=%s", check=False)


def read_branch_name(ref_name: str | None = None) -> str:
    """Current branch name.

    An explicitly supplied ref name (GITHUB_REF_NAME in Actions) wins over
    asking git for the checked-out branch.
    """
    if ref_name is None:
        ref_name = os.environ.get("GITHUB_REF_NAME", "")
    if ref_name:
        return ref_name
    return git("rev-parse", "--abbrev-ref", "HEAD", check=False)


def read_event_labels(event_path: str | Path | None) -> list[str]:
    """Pull-request label names from a GitHub event payload file.

    Returns [] when there is no payload, it cannot be decoded, or it is not
    a pull-request event.
    """
    if not event_path:
        return []
    path = Path(event_path)
    if not path.is_file():
        return []
    try:
        payload = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        log(f"Cannot parse event payload {path}: {exc}")
        return []

    pull_request = payload.get("pull_request") if isinstance(payload, dict) else None
    if not isinstance(pull_request, dict):
        return []
    labels = pull_request.get("labels") or []
    return [
        label["name"]
        for label in labels
        if isinstance(label, dict) and isinstance(label.get("name"), str)
    ]
