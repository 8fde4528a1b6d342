"""Retrieve source documents over HTTP with httpx."""

from __future__ import annotations

import logging

import httpx

from postmatter.retrieval.base import RetrievalError
from postmatter.retrieval.encoding import decode_document

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpRetriever:
    """Fetch source ids relative to a base URL using a shared AsyncClient."""

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        if not (base_url.startswith("http://") or base_url.startswith("https://")):
            raise ValueError("base_url must start with http:// or https://")
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None
        self._timeout_seconds = timeout_seconds

    def url_for(self, source_id: str) -> str:
        return f"{self._base_url}/{source_id.lstrip('/')}"

    async def __aenter__(self) -> "HttpRetriever":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout_seconds)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, source_id: str) -> str:
        if self._client is None:
            raise RuntimeError("HttpRetriever must be used as an async context manager or given a client")

        url = self.url_for(source_id)
        try:
            response = await self._client.get(url, timeout=self._timeout_seconds)
        except httpx.HTTPError as exc:
            raise RetrievalError(source_id, f"Failed to fetch {url}: {exc}") from exc

        if not response.is_success:
            raise RetrievalError(
                source_id,
                f"Failed to fetch {url}: {response.reason_phrase}",
                status_code=response.status_code,
            )

        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        try:
            return decode_document(response.content)
        except (ValueError, UnicodeDecodeError) as exc:
            raise RetrievalError(source_id, f"Failed to decode {url}: {exc}") from exc
