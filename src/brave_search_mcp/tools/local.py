"""Local business search: location ids from web search, joined with POI and description data."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from mcp import types
from pydantic import BaseModel, Field

from brave_search_mcp.brave.client import BraveClientError, BraveSearchClient
from brave_search_mcp.brave.models import (
    LocalDescriptionsResponse,
    LocalPoiResponse,
    SafeSearch,
)
from brave_search_mcp.formatting import format_poi_results
from brave_search_mcp.tools.base import BaseTool, text_result
from brave_search_mcp.tools.web import WebSearchInput, WebSearchTool

if TYPE_CHECKING:
    from brave_search_mcp.server import BraveSearchServer

DESCRIPTION_ERROR_HINTS: dict[int, str] = {
    429: "429 Rate limit exceeded, consider adding delay between requests",
    403: "403 Authentication error - check your API key",
    500: "500 Internal server error - might be an issue with request format or API temporary issues",
}


class PoiCorrelationError(Exception):
    """Raised when the POI response cannot be matched to the requested ids by position."""


class LocalSearchInput(BaseModel):
    query: str = Field(description="Local search query (e.g. 'pizza near Central Park')")
    count: int = Field(
        default=10, ge=1, le=20,
        description="The number of results to return, minimum 1, maximum 20",
    )


def attach_poi_ids(pois: LocalPoiResponse, ids: list[str]) -> LocalPoiResponse:
    """Give each POI the id it was requested under.

    /local/pois returns records in request order without echoing ids, so the
    join is positional. A length mismatch means that order can't be trusted.
    """
    if len(pois.results) != len(ids):
        raise PoiCorrelationError(
            f"Expected {len(ids)} POI records for {len(ids)} ids, got {len(pois.results)}"
        )
    for poi, poi_id in zip(pois.results, ids):
        poi.id = poi_id
    return pois


class LocalSearchTool(BaseTool[LocalSearchInput]):
    name = "brave_local_search"
    description = (
        "Searches for local businesses and places using Brave's Local Search API. "
        "Best for queries related to physical locations, businesses, restaurants, services, etc. "
        "Returns detailed information including:\n"
        "- Business names and addresses\n"
        "- Ratings and review counts\n"
        "- Phone numbers and opening hours\n"
        "Use this when the query implies 'near me' or mentions specific locations. "
        "Automatically falls back to web search if no local results are found."
    )
    input_model = LocalSearchInput

    def __init__(
        self,
        server: BraveSearchServer,
        client: BraveSearchClient,
        web_tool: WebSearchTool,
    ) -> None:
        super().__init__(server, client)
        self.web_tool = web_tool

    async def execute_core(self, data: LocalSearchInput) -> types.CallToolResult:
        query, count = data.query, data.count
        # count is passed along but the API does not reliably apply it to locations
        response = await self.client.web_search(
            query,
            count=count,
            safesearch=SafeSearch.OFF,
            result_filter="locations",
        )
        locations = response.locations.results if response.locations else []
        if not locations:
            await self.server.log(
                f'No location results found for "{query}" falling back to web search. '
                'Make sure your API Plan is at least "Pro"'
            )
            return await self.web_tool.execute_core(
                WebSearchInput(query=query, count=count, offset=0)
            )

        ids = [location.id for location in locations][:count]
        await self.server.log(
            f'Using {len(ids)} of {len(locations)} location IDs for "{query}"', "debug"
        )

        pois = await self._fetch_pois(ids)
        descriptions = await self._fetch_descriptions(ids)
        return text_result(format_poi_results(pois, descriptions))

    async def _fetch_pois(self, ids: list[str]) -> LocalPoiResponse:
        try:
            pois = await self.client.local_pois(ids)
        except Exception as e:
            await self.server.log(f"Error fetching local POI data: {e}", "error")
            raise
        return attach_poi_ids(pois, ids)

    async def _fetch_descriptions(self, ids: list[str]) -> LocalDescriptionsResponse:
        """Descriptions are optional: an error status yields an empty dataset."""
        try:
            return await self.client.local_descriptions(ids)
        except BraveClientError as e:
            await self.server.log(f"Error response body: {e.body}", "error")
            await self.server.log(f"Response headers: {json.dumps(e.headers)}", "error")
            await self.server.log(f"Request URL: {e.url}", "error")
            hint = DESCRIPTION_ERROR_HINTS.get(e.status_code)
            if hint:
                await self.server.log(hint, "error")
            return LocalDescriptionsResponse()
