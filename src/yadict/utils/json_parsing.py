"""Accessors for navigating untyped JSON values.

The ``as_*`` helpers return the value narrowed to a JSON type, or None
on a type mismatch. ``require`` turns a None into a DataFormatError, so
a required step reads as ``require(as_array(obj.get("def")), "'def' array")``.
"""

import json
from typing import Any, TypeVar

from yadict.domain.model.errors import DataFormatError

T = TypeVar("T")


def as_object(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def as_array(value: Any) -> list[Any] | None:
    return value if isinstance(value, list) else None


def as_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def as_unsigned_int(value: Any) -> int | None:
    """Return a non-negative JSON integer. Booleans and floats do not qualify."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def require(value: T | None, description: str) -> T:
    """Return value, or raise DataFormatError naming what was expected."""
    if value is None:
        raise DataFormatError(f"Expected {description}")
    return value


def parse_json_content(content: str) -> Any:
    """Parse a JSON document. Raises ValueError on malformed input."""
    return json.loads(content)
