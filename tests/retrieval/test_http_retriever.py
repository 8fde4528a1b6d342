from __future__ import annotations

import asyncio

import httpx
import pytest

from postmatter.content.assembler import load_collection
from postmatter.retrieval.base import RetrievalError
from postmatter.retrieval.http import HttpRetriever

_DOCUMENTS = {
    "/blog/python-programming.md": "---\ntitle: Python\nweight: 1\n---\nHello",
    "/blog/global-bonsai-trends.md": "---\ntitle: Bonsai\ntags: [bonsai]\n---\nTrees",
}


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/blog/offline.md":
        raise httpx.ConnectError("connection refused", request=request)
    text = _DOCUMENTS.get(request.url.path)
    if text is None:
        return httpx.Response(404)
    return httpx.Response(200, content=text.encode("utf-8"))


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(_handler))


def test_fetch_joins_base_url_and_source_id() -> None:
    async def _scenario() -> str:
        async with _client() as client:
            retriever = HttpRetriever("https://site.example/", client=client)
            assert retriever.url_for("/blog/x.md") == "https://site.example/blog/x.md"
            return await retriever.fetch("/blog/python-programming.md")

    assert asyncio.run(_scenario()) == _DOCUMENTS["/blog/python-programming.md"]


def test_not_found_response_raises_retrieval_error_with_status() -> None:
    async def _scenario() -> None:
        async with _client() as client:
            await HttpRetriever("https://site.example", client=client).fetch("/blog/missing.md")

    with pytest.raises(RetrievalError) as excinfo:
        asyncio.run(_scenario())

    assert excinfo.value.status_code == 404
    assert "status=404" in str(excinfo.value)


def test_transport_error_raises_retrieval_error() -> None:
    async def _scenario() -> None:
        async with _client() as client:
            await HttpRetriever("https://site.example", client=client).fetch("/blog/offline.md")

    with pytest.raises(RetrievalError, match="connection refused"):
        asyncio.run(_scenario())


def test_base_url_must_be_http() -> None:
    with pytest.raises(ValueError, match="http"):
        HttpRetriever("site.example")


def test_fetch_without_client_requires_context_manager() -> None:
    with pytest.raises(RuntimeError, match="context manager"):
        asyncio.run(HttpRetriever("https://site.example").fetch("/blog/a.md"))


def test_http_collection_skips_failed_sources() -> None:
    async def _scenario():
        async with _client() as client:
            retriever = HttpRetriever("https://site.example", client=client)
            return await load_collection(
                [
                    "/blog/python-programming.md",
                    "/blog/understanding-cites.md",
                    "/blog/offline.md",
                    "/blog/global-bonsai-trends.md",
                ],
                retriever.fetch,
                static_pages=(),
            )

    records = asyncio.run(_scenario())

    assert sorted(record.id for record in records) == [1, 2]
    assert {record.title for record in records} == {"Python", "Bonsai"}
