"""Compute the next semantic version from a change token.

The token comes from a commit subject, a branch name or a pull-request
label, and a user-supplied mapping decides whether it is a major, minor or
patch change.
"""

from __future__ import annotations

from semver_action.exceptions import (
    ConfigurationError,
    InvalidMapError,
    InvalidModeError,
    MissingMapError,
    SemverActionError,
    UnknownBumpError,
)
from semver_action.mapping import parse_mapping, resolve_bump
from semver_action.models import (
    ActionConfig,
    ActionContext,
    BumpCategory,
    BumpMapping,
    DetectionMode,
    ReleaseDecision,
)
from semver_action.pipeline import decide, run_action
from semver_action.tokens import extract_token
from semver_action.versions import bump_version, latest_version, parse_version

__all__ = [
    "ActionConfig",
    "ActionContext",
    "BumpCategory",
    "BumpMapping",
    "ConfigurationError",
    "DetectionMode",
    "InvalidMapError",
    "InvalidModeError",
    "MissingMapError",
    "ReleaseDecision",
    "SemverActionError",
    "UnknownBumpError",
    "bump_version",
    "decide",
    "extract_token",
    "latest_version",
    "parse_mapping",
    "parse_version",
    "resolve_bump",
    "run_action",
]
