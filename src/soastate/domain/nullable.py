"""Conversions between semantic values and nullable database values.

The database distinguishes "column unset" from "empty string", and the
update statements only overwrite a column when a value is provided. The
domain side uses ``""`` and ``-1`` for "nothing".
"""

from __future__ import annotations

from typing import Final

from .errors import ValidationError

NO_ID: Final[int] = -1


def to_optional(value: str) -> str | None:
    if value == "":
        return None
    return value


def from_optional(value: str | None) -> str:
    if value is None:
        return ""
    return value


def to_optional_int(value: int) -> int | None:
    if value == NO_ID:
        return None
    return value


def from_optional_int(value: int | None) -> int:
    if value is None:
        return NO_ID
    return value


def to_identity(value: int) -> str:
    """Render a numeric identifier as the engine's opaque identity string."""

    return str(value)


def from_identity(value: str) -> int:
    """Parse an identity string, rejecting anything but plain ASCII digits with an optional minus."""

    text = value.strip()
    digits = text.removeprefix("-")
    if not (digits.isascii() and digits.isdigit()):
        raise ValidationError([f"identity {value!r} is not a numeric identifier"])
    return int(text)
