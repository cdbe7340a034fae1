"""Reading the bump mapping from pyproject.toml.

Repositories can keep their mapping next to the code instead of in the
workflow file:

    [tool.semver-action.map]
    major = ["breaking"]
    minor = ["feature"]
    patch = ["fix", "bug"]
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from tomlkit.exceptions import ParseError

from .exceptions import InvalidMapError, MissingMapError
from .mapping import build_mapping
from .models import BumpMapping

TOOL_TABLE = "semver-action"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def get_map_table(doc: tomlkit.TOMLDocument) -> dict:
    """Extract [tool.semver-action.map] as plain Python data, or {}."""
    table = doc.get("tool", {}).get(TOOL_TABLE, {}).get("map", {})
    return table.unwrap() if hasattr(table, "unwrap") else dict(table)


def load_mapping_from_pyproject(path: Path) -> BumpMapping:
    """Build a BumpMapping from a pyproject.toml file.

    Raises:
        MissingMapError: If the file or its map table is absent or empty.
        InvalidMapError: If the file cannot be parsed or the table has the
            wrong shape.
    """
    if not path.is_file():
        raise MissingMapError(str(path))
    try:
        doc = load_pyproject(path)
    except ParseError as exc:
        raise InvalidMapError(str(path), f"invalid TOML ({exc})") from exc
    return build_mapping(get_map_table(doc), raw=f"{path} [tool.{TOOL_TABLE}.map]")
