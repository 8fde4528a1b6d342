"""CLI command that loads content sources and emits the sorted collection as JSON."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace
import json
import logging
import math
from pathlib import Path

from dotenv import load_dotenv

from postmatter.config import ContentSettings, validate_base_url
from postmatter.content.assembler import load_collection
from postmatter.content.models import ContentRecord
from postmatter.content.static_pages import STATIC_PAGES
from postmatter.content.views import filter_by_tag, group_by_section
from postmatter.retrieval.filesystem import FileSystemRetriever
from postmatter.retrieval.http import HttpRetriever

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


async def collect(settings: ContentSettings) -> list[ContentRecord]:
    static_pages = STATIC_PAGES if settings.include_static_pages else ()
    if settings.base_url:
        async with HttpRetriever(settings.base_url, timeout_seconds=settings.http_timeout_seconds) as retriever:
            return await load_collection(settings.sources, retriever.fetch, static_pages)

    retriever = FileSystemRetriever(settings.content_root)
    return await load_collection(settings.sources, retriever.fetch, static_pages)


def _apply_overrides(settings: ContentSettings, args: argparse.Namespace) -> ContentSettings:
    overrides: dict[str, object] = {}
    if args.content_root:
        overrides["content_root"] = Path(args.content_root)
    if args.base_url:
        overrides["base_url"] = validate_base_url(args.base_url, name="--base-url")
    if args.source:
        overrides["sources"] = tuple(args.source)
    if args.no_static_pages:
        overrides["include_static_pages"] = False
    return replace(settings, **overrides)


def _json_safe(value: object) -> object:
    # Non-finite numbers use their JavaScript spelling as strings so the output stays strict JSON.
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def _render(record: ContentRecord) -> dict[str, object]:
    return {key: _json_safe(value) for key, value in record.to_dict().items()}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build the sorted content collection from front-matter documents")
    parser.add_argument("--content-root", help="Directory that source ids are resolved against")
    parser.add_argument("--base-url", help="Fetch sources over HTTP relative to this URL")
    parser.add_argument("--source", action="append", help="Source id to load (repeatable)")
    parser.add_argument("--section", help="Only emit records from this section")
    parser.add_argument("--tag", help="Only emit records carrying this exact tag")
    parser.add_argument("--group-by-section", action="store_true", help="Emit records grouped by section")
    parser.add_argument("--no-static-pages", action="store_true", help="Skip the built-in static pages")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level for diagnostics on stderr",
    )
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=args.log_level,
    )

    try:
        settings = _apply_overrides(ContentSettings.from_env(), args)
    except ValueError as error:
        logger.error("Configuration error: %s", error)
        return 2

    records = asyncio.run(collect(settings))
    if args.tag:
        records = filter_by_tag(records, args.tag)
    if args.section:
        records = group_by_section(records).get(args.section, [])

    payload: dict[str, object] = {"count": len(records)}
    if args.group_by_section:
        payload["sections"] = {
            section: [_render(record) for record in grouped]
            for section, grouped in group_by_section(records).items()
        }
    else:
        payload["records"] = [_render(record) for record in records]

    print(json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
