"""Collection ordering by explicit weight, else by date."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Iterable

from postmatter.content.models import ContentRecord


def parse_calendar_date(value: str) -> datetime | None:
    """Interpret an ISO date or datetime string, or return None."""

    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def compare_records(left: ContentRecord, right: ContentRecord) -> int:
    """Pairwise comparator: weight ascending when both are weighted, else newest first.

    A pair where either date cannot be parsed compares equal.
    """

    if left.weight is not None and right.weight is not None:
        if left.weight < right.weight:
            return -1
        if left.weight > right.weight:
            return 1
        return 0

    left_date = parse_calendar_date(left.date)
    right_date = parse_calendar_date(right.date)
    if left_date is None or right_date is None:
        return 0
    if left_date > right_date:
        return -1
    if left_date < right_date:
        return 1
    return 0


def sort_records(records: Iterable[ContentRecord]) -> list[ContentRecord]:
    """Return a new, ordered list; the input is left untouched."""

    return sorted(records, key=cmp_to_key(compare_records))
