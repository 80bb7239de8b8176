"""Async Brave Search REST client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from brave_search_mcp.brave.models import (
    ImageSearchResponse,
    LocalDescriptionsResponse,
    LocalPoiResponse,
    NewsSearchResponse,
    SafeSearch,
    VideoSearchResponse,
    WebSearchResponse,
)
from brave_search_mcp.settings import settings

logger = logging.getLogger(__name__)


class BraveClientError(Exception):
    """Raised when the Brave Search API returns an error status."""

    def __init__(
        self,
        status_code: int,
        url: str,
        body: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        self.headers = headers or {}
        super().__init__(f"Brave API error {status_code} for {url}: {body}")


class BraveSearchClient:
    """Async Brave Search client backed by httpx."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key or settings.api_key
        self._base_url = base_url or settings.api_base_url
        self._timeout = timeout or settings.request_timeout
        self._client: httpx.AsyncClient | None = None
        self._download_client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip",
                    "X-Subscription-Token": self._api_key,
                    "User-Agent": settings.user_agent,
                },
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def _get_download_client(self) -> httpx.AsyncClient:
        # Image hosts are third parties: never send the subscription token there.
        if self._download_client is None or self._download_client.is_closed:
            self._download_client = httpx.AsyncClient(
                headers={"User-Agent": settings.user_agent},
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._download_client

    async def close(self) -> None:
        for client in (self._client, self._download_client):
            if client and not client.is_closed:
                await client.aclose()

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        client = await self._get_client()
        query = {k: _param(v) for k, v in params.items() if v is not None}
        logger.debug("GET %s params=%s", path, query)
        resp = await client.get(path, params=query)
        if resp.status_code >= 400:
            raise BraveClientError(
                resp.status_code, str(resp.url), resp.text, headers=dict(resp.headers)
            )
        return resp.json()

    # ── Search endpoints ─────────────────────────────────────

    async def web_search(
        self,
        query: str,
        count: int | None = None,
        offset: int | None = None,
        result_filter: str | None = None,
        safesearch: SafeSearch = SafeSearch.OFF,
    ) -> WebSearchResponse:
        data = await self._get(
            "/web/search",
            {
                "q": query,
                "count": count,
                "offset": offset,
                "result_filter": result_filter,
                "safesearch": safesearch,
            },
        )
        return WebSearchResponse.model_validate(data)

    async def image_search(
        self, query: str, count: int | None = None, safesearch: SafeSearch = SafeSearch.OFF
    ) -> ImageSearchResponse:
        data = await self._get(
            "/images/search", {"q": query, "count": count, "safesearch": safesearch}
        )
        return ImageSearchResponse.model_validate(data)

    async def news_search(self, query: str, count: int | None = None) -> NewsSearchResponse:
        data = await self._get("/news/search", {"q": query, "count": count})
        return NewsSearchResponse.model_validate(data)

    async def video_search(
        self, query: str, count: int | None = None, safesearch: SafeSearch = SafeSearch.OFF
    ) -> VideoSearchResponse:
        data = await self._get(
            "/videos/search", {"q": query, "count": count, "safesearch": safesearch}
        )
        return VideoSearchResponse.model_validate(data)

    # ── Local endpoints ──────────────────────────────────────

    async def local_pois(self, ids: list[str]) -> LocalPoiResponse:
        """Fetch POI details. Results come back in request order, without ids."""
        data = await self._get("/local/pois", {"ids": list(ids)})
        return LocalPoiResponse.model_validate(data)

    async def local_descriptions(self, ids: list[str]) -> LocalDescriptionsResponse:
        data = await self._get("/local/descriptions", {"ids": list(ids)})
        return LocalDescriptionsResponse.model_validate(data)

    # ── Images ───────────────────────────────────────────────

    async def fetch_image(self, url: str) -> bytes:
        client = await self._get_download_client()
        resp = await client.get(url)
        if resp.status_code >= 400:
            raise BraveClientError(resp.status_code, url, resp.text[:200])
        return resp.content


def _param(value: Any) -> Any:
    if isinstance(value, SafeSearch):
        return value.value
    return value
