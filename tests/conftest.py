"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from semver_action.models import ActionConfig, BumpMapping, DetectionMode

MAP_JSON = '{"major":["breaking"],"minor":["feature"],"patch":["fix","bug"]}'


@pytest.fixture
def map_json() -> str:
    """The mapping used throughout the README examples."""
    return MAP_JSON


@pytest.fixture
def sample_mapping() -> BumpMapping:
    return BumpMapping(categories=json.loads(MAP_JSON))


@pytest.fixture
def make_config(sample_mapping: BumpMapping) -> Callable[[DetectionMode], ActionConfig]:
    def _make(mode: DetectionMode) -> ActionConfig:
        return ActionConfig(mode=mode, mapping=sample_mapping)

    return _make


@pytest.fixture
def event_file(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Write a pull_request event payload with the given label names."""

    def _write(labels: list[str]) -> Path:
        path = tmp_path / "event.json"
        payload = {
            "action": "closed",
            "pull_request": {
                "number": 7,
                "labels": [{"id": i, "name": name} for i, name in enumerate(labels)],
            },
        }
        path.write_text(json.dumps(payload))
        return path

    return _write


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a pyproject.toml carrying a bump mapping."""
    content = """\
[project]
name = "test-package"
version = "1.0.0"

[tool.semver-action.map]
major = ["breaking"]
minor = ["feature"]
patch = ["fix", "bug"]
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject
