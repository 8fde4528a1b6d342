from __future__ import annotations

import pytest

from postmatter.content.frontmatter import parse_frontmatter, render_frontmatter


def test_parse_frontmatter_splits_metadata_and_body() -> None:
    parsed = parse_frontmatter("---\ntitle: Test\nweight: 2\n---\nBody text here.\n")

    assert parsed.metadata == {"title": "Test", "weight": "2"}
    assert parsed.body == "Body text here."


def test_values_keep_everything_after_the_first_colon() -> None:
    parsed = parse_frontmatter("---\nimage: https://cdn.example.com/a.png\ntime: 10:30:00\n---\n")

    assert parsed.metadata["image"] == "https://cdn.example.com/a.png"
    assert parsed.metadata["time"] == "10:30:00"


def test_keys_and_values_are_trimmed_and_colonless_lines_ignored() -> None:
    raw = "---\n  title  :   Spaced out  \njust some words\n\n: orphan value\ncategory:Bonsai\n---\nBody"

    parsed = parse_frontmatter(raw)

    assert parsed.metadata == {"title": "Spaced out", "category": "Bonsai"}


def test_document_without_block_is_all_body() -> None:
    raw = "\n  # Heading\n\nJust a plain markdown file.  \n"

    parsed = parse_frontmatter(raw)

    assert parsed.metadata == {}
    assert parsed.body == "# Heading\n\nJust a plain markdown file."


def test_unterminated_block_is_treated_as_body() -> None:
    raw = "---\ntitle: Never closed\nBody"

    parsed = parse_frontmatter(raw)

    assert parsed.metadata == {}
    assert parsed.body == raw


def test_empty_block_yields_empty_metadata() -> None:
    parsed = parse_frontmatter("---\n---\nOnly body")

    assert parsed.metadata == {}
    assert parsed.body == "Only body"


def test_delimiters_tolerate_surrounding_whitespace_and_crlf() -> None:
    raw = "\n  ---  \r\ntitle: Windows\r\nfeatured: true\r\n---\r\nBody\r\n"

    parsed = parse_frontmatter(raw)

    assert parsed.metadata == {"title": "Windows", "featured": "true"}
    assert parsed.body == "Body"


def test_horizontal_rule_in_body_is_preserved() -> None:
    parsed = parse_frontmatter("---\ntitle: A\n---\nIntro\n---\nMore")

    assert parsed.metadata == {"title": "A"}
    assert parsed.body == "Intro\n---\nMore"


def test_inline_dashes_do_not_open_a_block() -> None:
    raw = "Intro --- title: nope --- outro"

    parsed = parse_frontmatter(raw)

    assert parsed.metadata == {}
    assert parsed.body == raw


@pytest.mark.parametrize(
    "raw",
    [
        "---\ntitle: Test\nweight: 2\n---\nBody",
        "---\ntags: [python, bonsai]\nurl: http://example.com:8080/x\n---\n",
        "---\n title :  padded \nfeatured: false\ndate: 2024-03-01\n---\nText\n---\nMore",
    ],
)
def test_reparsing_rendered_metadata_is_idempotent(raw: str) -> None:
    first = parse_frontmatter(raw)

    second = parse_frontmatter(render_frontmatter(first.metadata, first.body))

    assert second.metadata == first.metadata
    assert second.body == first.body
