"""Typed interpretation of raw front-matter string values.

Rules are applied in order and the first match wins:

1. ``"true"`` / ``"false"`` become booleans.
2. Non-empty numeric literals without whitespace become ``int`` or ``float``.
3. ``[a, b, c]`` becomes a list of trimmed strings. Elements are split on every
   comma; quoting or escaping commas and brackets inside an element is not
   supported.
4. Anything else stays the trimmed string.
"""

from __future__ import annotations

import math
import re
from typing import Mapping

from postmatter.content.models import CoercedValue

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY_RE = re.compile(r"[+-]?Infinity")


def parse_number(value: str) -> int | float | None:
    """Return the numeric value of a literal, or None when it is not one."""

    if not value or value != value.strip() or any(char.isspace() for char in value):
        return None
    if _INTEGER_RE.fullmatch(value):
        return int(value)
    if _DECIMAL_RE.fullmatch(value):
        return float(value)
    if _PREFIXED_INT_RE.fullmatch(value):
        return int(value, 0)
    if _INFINITY_RE.fullmatch(value):
        return -math.inf if value.startswith("-") else math.inf
    return None


def split_list(value: str) -> list[str]:
    inner = value[1:-1]
    return [item.strip() for item in inner.split(",")]


def coerce_value(raw_value: str) -> CoercedValue:
    """Convert one raw metadata value into its typed form."""

    value = raw_value.strip()
    if value == "true":
        return True
    if value == "false":
        return False

    number = parse_number(value)
    if number is not None:
        return number

    if len(value) >= 2 and value.startswith("[") and value.endswith("]"):
        return split_list(value)

    return value


def coerce_metadata(metadata: Mapping[str, str]) -> dict[str, CoercedValue]:
    """Coerce every value of a raw metadata map independently."""

    return {key: coerce_value(value) for key, value in metadata.items()}
