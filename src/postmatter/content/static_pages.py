"""Fixed table of site pages that have no source document."""

from __future__ import annotations

from typing import Sequence

from postmatter.content.builder import DEFAULT_LAYOUT, DEFAULT_SECTION, required_defaults
from postmatter.content.models import ContentRecord, StaticPageSpec

STATIC_ID_OFFSET = 1000
STATIC_PAGE_TYPE = "page"
STATIC_PAGE_CATEGORY = "Page"

STATIC_PAGES: tuple[StaticPageSpec, ...] = (
    StaticPageSpec(slug="about", title="About Us", section="about"),
    StaticPageSpec(slug="export-process", title="Export Process", section="export-process"),
    StaticPageSpec(slug="sustainability", title="Sustainability", section="sustainability"),
    StaticPageSpec(slug="faq", title="Frequently Asked Questions", section="faq"),
    StaticPageSpec(slug="testimonials", title="Testimonials", section="testimonials"),
    StaticPageSpec(slug="partners", title="Our Partners", section="partners"),
    StaticPageSpec(slug="press", title="Press Releases", section="press"),
    StaticPageSpec(slug="contact", title="Contact Us", section="contact"),
    StaticPageSpec(slug="privacy-policy", title="Privacy Policy", section="legal"),
    StaticPageSpec(slug="terms-of-service", title="Terms of Service", section="legal"),
    StaticPageSpec(slug="cookie-policy", title="Cookie Policy", section="legal"),
    StaticPageSpec(slug="accessibility", title="Accessibility", section="legal"),
    StaticPageSpec(slug="return-policy", title="Return Policy", section="legal"),
)


def static_id_base(parsed_count: int) -> int:
    """First static id, kept above every parsed id."""

    return max(STATIC_ID_OFFSET, parsed_count + 1)


def placeholder_content(title: str) -> str:
    return f"# {title}\n\nContent for the {title} page will be displayed here."


def build_static_record(spec: StaticPageSpec, record_id: int) -> ContentRecord:
    fields = required_defaults()
    fields.update(
        title=spec.title,
        category=STATIC_PAGE_CATEGORY,
    )
    return ContentRecord(
        id=record_id,
        content=placeholder_content(spec.title),
        slug=spec.slug,
        section=spec.section or DEFAULT_SECTION,
        layout=DEFAULT_LAYOUT,
        type=STATIC_PAGE_TYPE,
        **fields,
    )


def build_static_records(
    specs: Sequence[StaticPageSpec] = STATIC_PAGES,
    *,
    parsed_count: int = 0,
) -> list[ContentRecord]:
    """Build one record per static page with ids disjoint from parsed records."""

    base = static_id_base(parsed_count)
    return [build_static_record(spec, base + index) for index, spec in enumerate(specs)]
