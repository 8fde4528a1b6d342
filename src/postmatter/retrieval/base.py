"""Shared retrieval contract for document sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True)
class RetrievalError(Exception):
    """Domain error for unreachable or missing source documents."""

    source_id: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (source={self.source_id}, status={self.status_code})"
        return f"{self.message} (source={self.source_id})"


@runtime_checkable
class DocumentRetriever(Protocol):
    """Protocol that every retrieval backend must implement."""

    async def fetch(self, source_id: str) -> str:
        """Return the full text of a source document or raise RetrievalError."""
