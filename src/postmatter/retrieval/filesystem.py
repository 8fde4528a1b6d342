"""Retrieve source documents from a local content root."""

from __future__ import annotations

import asyncio
from pathlib import Path

from postmatter.retrieval.base import RetrievalError
from postmatter.retrieval.encoding import decode_document


class FileSystemRetriever:
    """Resolve site-relative source ids such as ``/blog/post.md`` under a root directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, source_id: str) -> Path:
        relative = source_id.replace("\\", "/").lstrip("/")
        if not relative:
            raise RetrievalError(source_id, "Source id does not name a file")

        root = self._root.resolve()
        candidate = (root / relative).resolve()
        if not candidate.is_relative_to(root):
            raise RetrievalError(source_id, "Source id escapes the content root")
        return candidate

    async def fetch(self, source_id: str) -> str:
        path = self.resolve(source_id)
        return await asyncio.to_thread(self._read, source_id, path)

    def _read(self, source_id: str, path: Path) -> str:
        try:
            raw = path.read_bytes()
        except FileNotFoundError as exc:
            raise RetrievalError(source_id, "Source document not found") from exc
        except OSError as exc:
            raise RetrievalError(source_id, f"Failed to read source document: {exc}") from exc

        try:
            return decode_document(raw)
        except (ValueError, UnicodeDecodeError) as exc:
            raise RetrievalError(source_id, f"Failed to decode source document: {exc}") from exc
