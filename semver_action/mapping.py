"""Token → bump category resolution.

The mapping arrives as JSON text (usually a multi-line YAML block in the
workflow file) and is validated once into a BumpMapping.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from .exceptions import InvalidMapError, MissingMapError
from .models import BumpCategory, BumpMapping


def build_mapping(data: Any, *, raw: str) -> BumpMapping:
    """Validate already-decoded mapping data.

    Args:
        data: Decoded document; must be an object of name → list of strings.
        raw: Original text, quoted in error messages.

    Raises:
        MissingMapError: If the object is empty.
        InvalidMapError: If the shape is wrong.
    """
    if not isinstance(data, dict):
        raise InvalidMapError(raw, f"expected a JSON object, got {type(data).__name__}")
    if not data:
        raise MissingMapError(raw)
    try:
        return BumpMapping(categories=data)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(p) for p in first["loc"][1:])
        raise InvalidMapError(raw, f"{where}: {first['msg']}") from exc


def parse_mapping(raw: str | None) -> BumpMapping:
    """Parse the ``map`` input.

    Empty text and ``{}`` both count as a missing mapping.

    Raises:
        MissingMapError: If nothing usable was supplied.
        InvalidMapError: If the text is not a JSON object of token lists.
    """
    text = (raw or "").strip()
    if not text:
        raise MissingMapError(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidMapError(text, f"invalid JSON ({exc.msg})") from exc
    return build_mapping(data, raw=text)


def resolve_bump(token: str, mapping: BumpMapping) -> BumpCategory:
    """Return the bump category claiming ``token``, or NONE.

    Raises:
        UnknownBumpError: If the claiming category is not major/minor/patch.
    """
    name = mapping.category_for(token)
    if name is None:
        return BumpCategory.NONE
    return BumpCategory.parse(name)
