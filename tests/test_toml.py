"""Tests for semver_action.toml."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit

from semver_action.exceptions import InvalidMapError, MissingMapError
from semver_action.toml import get_map_table, load_mapping_from_pyproject


class TestGetMapTable:
    def test_returns_plain_dict(self) -> None:
        doc = tomlkit.parse('[tool.semver-action.map]\nminor = ["feature"]\n')
        assert get_map_table(doc) == {"minor": ["feature"]}

    def test_empty_when_absent(self) -> None:
        assert get_map_table(tomlkit.parse("[project]\nname = 'x'")) == {}


class TestLoadMappingFromPyproject:
    def test_loads_mapping(self, tmp_pyproject: Path) -> None:
        mapping = load_mapping_from_pyproject(tmp_pyproject)
        assert mapping.category_for("bug") == "patch"
        assert list(mapping.categories) == ["major", "minor", "patch"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MissingMapError):
            load_mapping_from_pyproject(tmp_path / "pyproject.toml")

    def test_missing_table(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("[project]\nname = 'x'\n")
        with pytest.raises(MissingMapError):
            load_mapping_from_pyproject(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.semver-action.map\n")
        with pytest.raises(InvalidMapError):
            load_mapping_from_pyproject(path)
