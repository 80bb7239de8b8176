"""News search tool."""

from __future__ import annotations

from mcp import types
from pydantic import BaseModel, Field

from brave_search_mcp.formatting import format_news_results
from brave_search_mcp.tools.base import BaseTool, text_result


class NewsSearchInput(BaseModel):
    query: str = Field(
        description="The term to search the internet for news articles, trending topics, or recent events",
    )
    count: int = Field(
        default=10, ge=1, le=20,
        description="The number of results to return, minimum 1, maximum 20",
    )


class NewsSearchTool(BaseTool[NewsSearchInput]):
    name = "brave_news_search"
    description = (
        "Searches for news articles using the Brave Search API. "
        "Use this for recent events, trending topics, or specific news stories. "
        "Returns a list of articles with titles, URLs, and descriptions. "
        "Maximum 20 results per request."
    )
    input_model = NewsSearchInput

    async def execute_core(self, data: NewsSearchInput) -> types.CallToolResult:
        response = await self.client.news_search(data.query, count=data.count)
        if not response.results:
            text = f'No news results found for "{data.query}"'
            await self.server.log(text)
            return text_result(text)
        return text_result(format_news_results(response.results))
