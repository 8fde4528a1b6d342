"""Derived queries over a sorted collection."""

from __future__ import annotations

from typing import Iterable

from postmatter.content.builder import DEFAULT_SECTION
from postmatter.content.models import ContentRecord


def group_by_section(records: Iterable[ContentRecord]) -> dict[str, list[ContentRecord]]:
    """Group records by section, preserving collection order within each group."""

    groups: dict[str, list[ContentRecord]] = {}
    for record in records:
        groups.setdefault(record.section or DEFAULT_SECTION, []).append(record)
    return groups


def filter_by_tag(records: Iterable[ContentRecord], tag: str) -> list[ContentRecord]:
    """Records whose tags contain the exact, case-sensitive tag."""

    return [record for record in records if record.tags is not None and tag in record.tags]
