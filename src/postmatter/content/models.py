"""Canonical data structures shared by the content pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

CoercedValue = Union[bool, int, float, list[str], str]


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Raw metadata map and body text split out of one source document."""

    metadata: dict[str, str]
    body: str


@dataclass(frozen=True, slots=True)
class StaticPageSpec:
    """Literal description of a page that is not backed by a source document."""

    slug: str
    title: str
    section: str | None = None


@dataclass(slots=True)
class ContentRecord:
    """A fully normalized, default-filled content record."""

    id: int
    title: str
    excerpt: str
    category: str
    author: str
    author_role: str
    date: str
    read_time: str
    image: str
    featured: bool
    content: str | None = None
    slug: str | None = None
    section: str | None = None
    layout: str | None = None
    type: str | None = None
    tags: list[str] | None = None
    weight: int | float | None = None
    extra: dict[str, CoercedValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Render the external camelCase shape, omitting absent optional fields."""

        payload: dict[str, Any] = dict(self.extra)
        payload.update(
            {
                "id": self.id,
                "title": self.title,
                "excerpt": self.excerpt,
                "category": self.category,
                "author": self.author,
                "authorRole": self.author_role,
                "date": self.date,
                "readTime": self.read_time,
                "image": self.image,
                "featured": self.featured,
            }
        )
        optional = {
            "content": self.content,
            "slug": self.slug,
            "section": self.section,
            "layout": self.layout,
            "type": self.type,
            "tags": list(self.tags) if self.tags is not None else None,
            "weight": self.weight,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload
