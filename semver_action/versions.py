"""Version parsing, tag selection and bumping utilities.

Handles conversion between version strings and semver objects, with
special handling for incomplete version strings (e.g., "1.0" → "1.0.0").
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import semver

from .exceptions import UnknownBumpError
from .models import BumpCategory

# Each component is one or more digits; an optional leading "v" is allowed.
TAG_PATTERN = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")

ZERO = semver.Version(0, 0, 0)


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    A leading "v" is dropped and incomplete versions are padded with zeros:
    - "1" → "1.0.0"
    - "1.2" → "1.2.0"
    - "v1.2.3" → "1.2.3"

    Only the first 3 components are used (major.minor.patch).
    Prerelease/build metadata is not supported.
    """
    parts = version_str.removeprefix("v").split(".")
    # Pad with zeros to ensure we have at least 3 parts
    parts = [p or "0" for p in parts]
    while len(parts) < 3:
        parts.append("0")
    # Built from ints so tags like v01.2.3 parse as 1.2.3
    major, minor, patch = (int(p) for p in parts[:3])
    return semver.Version(major, minor, patch)


def latest_version(tags: Iterable[str]) -> semver.Version:
    """Pick the current version from tags ordered newest-created first.

    v-prefixed tags win over bare ones; within a kind the first (most
    recently created) tag is used even if a numerically larger one exists.
    Returns 0.0.0 when no tag looks like a version.
    """
    prefixed: str | None = None
    bare: str | None = None
    for tag in tags:
        if not TAG_PATTERN.match(tag):
            continue
        if tag.startswith("v"):
            prefixed = tag
            break
        if bare is None:
            bare = tag

    tag = prefixed or bare
    if tag is None:
        return ZERO
    return parse_version(tag)


def bump_version(
    category: BumpCategory | str, current: semver.Version
) -> semver.Version:
    """Increment ``current`` according to ``category``.

    Examples:
        major, 1.4.1 → 2.0.0
        minor, 1.4.1 → 1.5.0
        patch, 1.4.1 → 1.4.2

    Raises:
        UnknownBumpError: If the category is NONE or not a known name.
    """
    if isinstance(category, str) and not isinstance(category, BumpCategory):
        category = BumpCategory.parse(category)

    if category is BumpCategory.MAJOR:
        return current.bump_major()
    if category is BumpCategory.MINOR:
        return current.bump_minor()
    if category is BumpCategory.PATCH:
        return current.bump_patch()
    raise UnknownBumpError(category.value)
