"""General web search tool."""

from __future__ import annotations

from mcp import types
from pydantic import BaseModel, Field

from brave_search_mcp.brave.models import SafeSearch
from brave_search_mcp.formatting import format_web_results
from brave_search_mcp.tools.base import BaseTool, text_result


class WebSearchInput(BaseModel):
    query: str = Field(description="The term to search the internet for")
    count: int = Field(
        default=10, ge=1, le=20,
        description="The number of results to return, minimum 1, maximum 20",
    )
    offset: int = Field(default=0, ge=0, description="The offset for pagination, minimum 0")


class WebSearchTool(BaseTool[WebSearchInput]):
    name = "brave_web_search"
    description = (
        "Performs a web search using the Brave Search API, ideal for general queries, "
        "and online content. Use this for broad information gathering, recent events, "
        "or when you need diverse web sources. Maximum 20 results per request."
    )
    input_model = WebSearchInput

    async def execute_core(self, data: WebSearchInput) -> types.CallToolResult:
        response = await self.client.web_search(
            data.query,
            count=data.count,
            offset=data.offset,
            safesearch=SafeSearch.OFF,
        )
        results = response.web.results if response.web else []
        if not results:
            text = f'No results found for "{data.query}"'
            await self.server.log(text)
            return text_result(text)
        return text_result(format_web_results(results))
