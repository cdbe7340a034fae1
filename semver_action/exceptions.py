"""Exception hierarchy for semver-action.

Only fatal conditions are exceptions. A missing change token or a token
that no category claims is a normal outcome and never raises.
"""

from __future__ import annotations

MAP_EXAMPLE = '{"major":["breaking"],"minor":["feature"],"patch":["fix"]}'


class SemverActionError(Exception):
    """Base class for all fatal semver-action errors."""


class ConfigurationError(SemverActionError):
    """The action was invoked with unusable inputs."""


class InvalidModeError(ConfigurationError):
    """The detection type is not one of commit, branch or label."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid type input: {value!r} (expected commit, branch or label)")


class MissingMapError(ConfigurationError):
    """No mapping was supplied, or it was an empty object."""

    def __init__(self, value: str = "") -> None:
        self.value = value
        super().__init__(
            f"map input is required. Received: {value!r}\n"
            "Hint: when using docker://, make sure to set the INPUT_MAP env variable\n"
            f"Example:\n  env:\n    INPUT_MAP: '{MAP_EXAMPLE}'"
        )


class InvalidMapError(ConfigurationError):
    """The mapping is not a JSON object of category name to token list."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"map is not valid: {reason}. Received: {value!r}")


class UnknownBumpError(SemverActionError):
    """A bump category other than major, minor or patch reached the incrementer."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Invalid bump type: {category!r}")
