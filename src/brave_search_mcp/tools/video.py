"""Video search tool."""

from __future__ import annotations

from mcp import types
from pydantic import BaseModel, Field

from brave_search_mcp.brave.models import SafeSearch
from brave_search_mcp.formatting import format_video_results
from brave_search_mcp.tools.base import BaseTool, text_result


class VideoSearchInput(BaseModel):
    query: str = Field(description="The term to search the internet for videos of")
    count: int = Field(
        default=10, ge=1, le=20,
        description="The number of results to return, minimum 1, maximum 20",
    )


class VideoSearchTool(BaseTool[VideoSearchInput]):
    name = "brave_video_search"
    description = (
        "Searches for videos using the Brave Search API. "
        "Use this for video content, tutorials, or any media-related queries. "
        "Returns a list of videos with titles, URLs, and descriptions. "
        "Maximum 20 results per request."
    )
    input_model = VideoSearchInput

    async def execute_core(self, data: VideoSearchInput) -> types.CallToolResult:
        response = await self.client.video_search(
            data.query, count=data.count, safesearch=SafeSearch.OFF
        )
        if not response.results:
            text = f'No video results found for "{data.query}"'
            await self.server.log(text)
            return text_result(text)
        return text_result(format_video_results(response.results))
