"""Front-matter block splitting for `---` delimited documents."""

from __future__ import annotations

import re
from typing import Mapping

from postmatter.content.models import ParsedDocument

FRONTMATTER_DELIMITER = "---"

# Opening delimiter must be the first non-blank line; the block ends at the next delimiter line.
_FRONTMATTER_RE = re.compile(
    r"\A\s*^[ \t]*---[ \t\r]*$(?P<block>.*?)^[ \t]*---[ \t\r]*$",
    re.MULTILINE | re.DOTALL,
)


def _split_line(line: str) -> tuple[str, str] | None:
    key, separator, value = line.partition(":")
    if not separator:
        return None
    key = key.strip()
    if not key:
        return None
    return key, value.strip()


def parse_metadata_block(block: str) -> dict[str, str]:
    """Split `key: value` lines, ignoring lines without a colon."""

    metadata: dict[str, str] = {}
    for line in block.splitlines():
        if not line.strip():
            continue
        pair = _split_line(line)
        if pair is None:
            continue
        key, value = pair
        metadata[key] = value
    return metadata


def parse_frontmatter(raw: str) -> ParsedDocument:
    """Split a raw document into its metadata map and trimmed body.

    A document without a delimited block is not an error: the metadata map is
    empty and the whole input becomes the body.
    """

    match = _FRONTMATTER_RE.search(raw)
    if match is None:
        return ParsedDocument(metadata={}, body=raw.strip())

    metadata = parse_metadata_block(match.group("block"))
    body = (raw[: match.start()] + raw[match.end() :]).strip()
    return ParsedDocument(metadata=metadata, body=body)


def render_frontmatter(metadata: Mapping[str, str], body: str = "") -> str:
    """Serialize a metadata map back into a delimited document."""

    lines = [FRONTMATTER_DELIMITER]
    lines.extend(f"{key}: {value}" for key, value in metadata.items())
    lines.append(FRONTMATTER_DELIMITER)
    if body:
        lines.append(body)
    return "\n".join(lines)
