"""Drive parsing, coercion and record building across all sources."""

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Sequence, Union

from postmatter.content.builder import build_record
from postmatter.content.coercion import coerce_metadata
from postmatter.content.frontmatter import parse_frontmatter
from postmatter.content.models import ContentRecord, StaticPageSpec
from postmatter.content.ordering import sort_records
from postmatter.content.static_pages import STATIC_PAGES, build_static_records
from postmatter.retrieval.base import RetrievalError

logger = logging.getLogger(__name__)

Retrieve = Callable[[str], Union[str, Awaitable[str]]]


def record_from_text(raw: str, source_id: str, record_id: int) -> ContentRecord:
    """Run parser, coercer and builder for one retrieved document."""

    parsed = parse_frontmatter(raw)
    metadata = coerce_metadata(parsed.metadata)
    return build_record(metadata, parsed.body, source_id, record_id)


async def _retrieve(retrieve: Retrieve, source_id: str) -> str:
    result = retrieve(source_id)
    if inspect.isawaitable(result):
        result = await result
    return result


async def assemble_collection(
    sources: Sequence[str],
    retrieve: Retrieve,
    static_pages: Sequence[StaticPageSpec] = STATIC_PAGES,
) -> list[ContentRecord]:
    """Build parsed records followed by static records, unsorted.

    Sources are retrieved one at a time in input order. A source that fails to
    load is skipped and does not consume an id.
    """

    records: list[ContentRecord] = []
    for source_id in sources:
        try:
            raw = await _retrieve(retrieve, source_id)
        except RetrievalError as exc:
            logger.warning("Skipping content source: %s", exc)
            continue
        except Exception:
            logger.exception("Error loading content source %s", source_id)
            continue

        records.append(record_from_text(raw, source_id, len(records) + 1))

    records.extend(build_static_records(static_pages, parsed_count=len(records)))
    logger.info("Assembled %d records from %d sources", len(records), len(sources))
    return records


async def load_collection(
    sources: Sequence[str],
    retrieve: Retrieve,
    static_pages: Sequence[StaticPageSpec] = STATIC_PAGES,
) -> list[ContentRecord]:
    """Assemble and sort a collection; unexpected failures yield an empty list."""

    try:
        records = await assemble_collection(sources, retrieve, static_pages)
        return sort_records(records)
    except Exception:
        logger.exception("Error loading content collection")
        return []
