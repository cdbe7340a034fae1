"""Data models for semver-action.

These Pydantic models and enums represent the values that flow through a
single run: the configuration, the context read from the repository and
event, and the resulting release decision.
"""

from __future__ import annotations

from enum import Enum

import semver
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidModeError, UnknownBumpError


class DetectionMode(str, Enum):
    """Where the change token is read from."""

    COMMIT = "commit"
    BRANCH = "branch"
    LABEL = "label"

    @classmethod
    def parse(cls, value: str) -> DetectionMode:
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(value) from None


class BumpCategory(str, Enum):
    """Which version component a release increments.

    NONE means no category claimed the token; it never reaches the
    incrementer.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    @classmethod
    def parse(cls, name: str) -> BumpCategory:
        """Parse a category name case-insensitively ("Major" == "major")."""
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownBumpError(name) from None


class BumpMapping(BaseModel):
    """Category name → change tokens belonging to that category.

    Categories are checked in the order they appear in the source document,
    so when a token is listed under several categories the first one wins.

    Attributes:
        categories: Raw mapping as supplied by the user. Keys are usually
            major/minor/patch but any name is accepted here; unknown names
            only fail once they are used for a bump.
    """

    model_config = ConfigDict(frozen=True)

    categories: dict[str, list[str]]

    def category_for(self, token: str) -> str | None:
        """Return the first category name whose tokens include ``token``."""
        for name, tokens in self.categories.items():
            if token in tokens:
                return name
        return None


class ActionConfig(BaseModel):
    """Validated inputs that select how a run behaves."""

    model_config = ConfigDict(frozen=True)

    mode: DetectionMode = DetectionMode.LABEL
    mapping: BumpMapping


class ActionContext(BaseModel):
    """Raw repository and event data the token extractor reads from.

    Attributes:
        commit_subject: Subject line of the most recent commit, empty when
            the repository has no commits.
        ref_name: Current branch name, empty when unknown.
        event_labels: Pull-request label names from the event payload, in
            payload order.
        fallback_labels: Space-separated label list supplied as an input.
    """

    commit_subject: str = ""
    ref_name: str = ""
    event_labels: list[str] = Field(default_factory=list)
    fallback_labels: str = ""


class ReleaseDecision(BaseModel):
    """Outcome of a run: either a new version to release, or nothing to do."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: semver.Version | None = None
    release_needed: bool = False

    @classmethod
    def skip(cls) -> ReleaseDecision:
        return cls()

    @classmethod
    def release(cls, version: semver.Version) -> ReleaseDecision:
        return cls(version=version, release_needed=True)

    @property
    def release_id(self) -> str:
        return str(self.version) if self.version is not None else ""

    def outputs(self) -> dict[str, str]:
        """Step outputs: version (v-prefixed), release_needed, release_id."""
        return {
            "version": f"v{self.release_id}" if self.release_id else "",
            "release_needed": "true" if self.release_needed else "false",
            "release_id": self.release_id,
        }
