"""Runtime configuration for content collection builds."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping


DEFAULT_CONTENT_ROOT = "public"
DEFAULT_SOURCES: tuple[str, ...] = (
    "/blog/python-programming.md",
    "/blog/understanding-cites.md",
    "/blog/global-bonsai-trends.md",
)
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_positive_float(*, name: str, raw_value: str, minimum: float = 0.001) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_flag(*, name: str, raw_value: str) -> bool:
    lowered = raw_value.casefold()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag")


def validate_base_url(raw_value: str, *, name: str) -> str:
    """Return the URL without a trailing slash, or raise when it is not http(s)."""

    value = raw_value.strip()
    if not (value.startswith("http://") or value.startswith("https://")):
        raise ValueError(f"{name} must start with http:// or https://")
    return value.rstrip("/")


def parse_sources(raw_value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw_value.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class ContentSettings:
    """Validated settings for locating and loading content sources."""

    content_root: Path = Path(DEFAULT_CONTENT_ROOT)
    sources: tuple[str, ...] = DEFAULT_SOURCES
    base_url: str | None = None
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    include_static_pages: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ContentSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        content_root_raw = source.get("POSTMATTER_CONTENT_ROOT", DEFAULT_CONTENT_ROOT).strip()
        if not content_root_raw:
            raise ValueError("POSTMATTER_CONTENT_ROOT cannot be empty")

        base_url_raw = source.get("POSTMATTER_BASE_URL", "").strip()
        base_url = validate_base_url(base_url_raw, name="POSTMATTER_BASE_URL") if base_url_raw else None

        sources_raw = source.get("POSTMATTER_SOURCES")
        sources = DEFAULT_SOURCES if sources_raw is None else parse_sources(sources_raw)
        if not sources:
            raise ValueError("POSTMATTER_SOURCES must list at least one source")

        timeout_raw = source.get("POSTMATTER_HTTP_TIMEOUT_SECONDS", str(DEFAULT_HTTP_TIMEOUT_SECONDS)).strip()
        if not timeout_raw:
            raise ValueError("POSTMATTER_HTTP_TIMEOUT_SECONDS cannot be empty")
        http_timeout_seconds = _parse_positive_float(
            name="POSTMATTER_HTTP_TIMEOUT_SECONDS",
            raw_value=timeout_raw,
            minimum=0.1,
        )

        include_static_pages = _parse_flag(
            name="POSTMATTER_INCLUDE_STATIC_PAGES",
            raw_value=source.get("POSTMATTER_INCLUDE_STATIC_PAGES", "true").strip(),
        )

        return cls(
            content_root=Path(content_root_raw),
            sources=sources,
            base_url=base_url,
            http_timeout_seconds=http_timeout_seconds,
            include_static_pages=include_static_pages,
        )
