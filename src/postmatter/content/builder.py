"""Record construction with a single table of required-field defaults."""

from __future__ import annotations

from datetime import date
import logging
import math
from pathlib import PurePosixPath
from typing import Any, Callable, Mapping

from postmatter.content.models import CoercedValue, ContentRecord

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "blog"
DEFAULT_LAYOUT = "single"
DEFAULT_POST_TYPE = "post"


def today_iso() -> str:
    return date.today().isoformat()


# Maps record attribute -> (metadata key, default value or factory).
REQUIRED_DEFAULTS: dict[str, tuple[str, Any]] = {
    "title": ("title", "Untitled"),
    "excerpt": ("excerpt", ""),
    "category": ("category", "General"),
    "author": ("author", "Admin"),
    "author_role": ("authorRole", ""),
    "date": ("date", today_iso),
    "read_time": ("readTime", "5 min read"),
    "image": ("image", "/placeholder.svg"),
    "featured": ("featured", False),
}

_RESERVED_KEYS = frozenset(
    {key for key, _default in REQUIRED_DEFAULTS.values()}
    | {"id", "content", "slug", "section", "layout", "type", "tags", "weight"}
)


def default_for(attribute: str) -> Any:
    _key, default = REQUIRED_DEFAULTS[attribute]
    if callable(default):
        return default()
    return default


def required_defaults() -> dict[str, Any]:
    """Return a fresh mapping of every required attribute to its default."""

    return {attribute: default_for(attribute) for attribute in REQUIRED_DEFAULTS}


def number_text(value: int | float) -> str:
    """Render a coerced number as text: `1e3` -> `1000`, `2.50` -> `2.5`."""

    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _as_text(value: CoercedValue | None) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, (int, float)):
        return number_text(value)
    return None


def _as_flag(value: CoercedValue | None) -> bool | None:
    if isinstance(value, bool):
        return value
    return None


def _as_tags(value: CoercedValue | None) -> list[str] | None:
    if isinstance(value, list):
        return [str(item) for item in value]
    text = _as_text(value)
    if text is None:
        return None
    return [text]


def _as_weight(value: CoercedValue | None) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


_COMPATIBLE: dict[str, Callable[[CoercedValue | None], Any]] = {
    attribute: _as_text for attribute in REQUIRED_DEFAULTS
}
_COMPATIBLE["featured"] = _as_flag


def slug_from_source(source_id: str) -> str:
    """Final path segment of the source identifier without its extension."""

    name = PurePosixPath(source_id.replace("\\", "/")).name
    return PurePosixPath(name).stem if name else ""


def section_from_source(source_id: str) -> str:
    """Parent directory name of the source identifier, else the default section."""

    parts = source_id.replace("\\", "/").split("/")
    if len(parts) >= 2 and parts[-2]:
        return parts[-2]
    return DEFAULT_SECTION


def build_record(
    metadata: Mapping[str, CoercedValue],
    body: str,
    source_id: str,
    record_id: int,
) -> ContentRecord:
    """Merge coerced metadata with defaults into a complete record.

    Malformed or missing values fall back to defaults; this never raises for
    bad metadata.
    """

    fields: dict[str, Any] = {}
    for attribute, (key, _default) in REQUIRED_DEFAULTS.items():
        value = _COMPATIBLE[attribute](metadata.get(key))
        if value is None:
            if key in metadata:
                logger.debug("Ignoring incompatible %r value for %s in %s", metadata[key], key, source_id)
            value = default_for(attribute)
        fields[attribute] = value

    weight = _as_weight(metadata.get("weight"))
    if weight is None and "weight" in metadata:
        logger.debug("Ignoring non-numeric weight %r in %s", metadata["weight"], source_id)

    extra = {key: value for key, value in metadata.items() if key not in _RESERVED_KEYS}

    return ContentRecord(
        id=record_id,
        content=body,
        slug=slug_from_source(source_id),
        section=section_from_source(source_id),
        layout=_as_text(metadata.get("layout")) or DEFAULT_LAYOUT,
        type=_as_text(metadata.get("type")) or DEFAULT_POST_TYPE,
        tags=_as_tags(metadata.get("tags")),
        weight=weight,
        extra=extra,
        **fields,
    )
