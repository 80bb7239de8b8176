"""Image search tool: returns images inline and keeps them in the ImageRegistry."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING

from mcp import types
from pydantic import BaseModel, ConfigDict, Field

from brave_search_mcp.brave.client import BraveSearchClient
from brave_search_mcp.brave.models import SafeSearch
from brave_search_mcp.registry import IMAGE_MIME_TYPE, ImageRegistry
from brave_search_mcp.tools.base import BaseTool, text_result

if TYPE_CHECKING:
    from brave_search_mcp.server import BraveSearchServer


class ImageSearchInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    search_term: str = Field(
        alias="searchTerm",
        description="The term to search the internet for images of",
    )
    count: int = Field(
        default=1, ge=1, le=3,
        description="The number of images to search for, minimum 1, maximum 3",
    )


class ImageSearchTool(BaseTool[ImageSearchInput]):
    name = "brave_image_search"
    description = "A tool for searching the web for images using the Brave Search API."
    input_model = ImageSearchInput

    def __init__(
        self,
        server: BraveSearchServer,
        client: BraveSearchClient,
        registry: ImageRegistry,
    ) -> None:
        super().__init__(server, client)
        self.registry = registry

    async def execute_core(self, data: ImageSearchInput) -> types.CallToolResult:
        term = data.search_term
        await self.server.log(f'Searching for images of "{term}" with count {data.count}', "debug")

        response = await self.client.image_search(term, count=data.count, safesearch=SafeSearch.OFF)
        await self.server.log(f'Found {len(response.results)} images for "{term}"', "debug")
        if not response.results:
            text = f'No image results found for "{term}"'
            await self.server.log(text)
            return text_result(text)

        content: list[types.TextContent | types.ImageContent] = []
        # One at a time, in result order. Duplicate titles overwrite the
        # registry entry but every image stays in this response.
        for result in response.results:
            raw = await self.client.fetch_image(result.properties.url)
            encoded = base64.b64encode(raw).decode("ascii")
            await self.server.log(f"Image base64 length: {len(encoded)}", "debug")
            await self.registry.put(result.title, encoded)
            content.append(types.TextContent(type="text", text=result.title))
            content.append(types.ImageContent(type="image", data=encoded, mimeType=IMAGE_MIME_TYPE))

        await self.server.notify_resources_changed()
        return types.CallToolResult(content=content)
