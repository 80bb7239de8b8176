"""MCP server wiring: tool table, image resources, client-facing logging."""

from __future__ import annotations

import base64
import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from brave_search_mcp import __version__
from brave_search_mcp.brave.client import BraveSearchClient
from brave_search_mcp.registry import (
    IMAGE_MIME_TYPE,
    ImageRegistry,
    image_uri,
    title_from_uri,
)
from brave_search_mcp.tools.base import BaseTool, error_result
from brave_search_mcp.tools.image import ImageSearchTool
from brave_search_mcp.tools.local import LocalSearchTool
from brave_search_mcp.tools.news import NewsSearchTool
from brave_search_mcp.tools.video import VideoSearchTool
from brave_search_mcp.tools.web import WebSearchTool

logger = logging.getLogger(__name__)

SERVER_NAME = "Brave Search MCP Server"
SERVER_INSTRUCTIONS = (
    "A server that provides tools for searching the web, images, videos, "
    "and local businesses using the Brave Search API."
)
CLIENT_LOGGER_NAME = "brave-search"

# MCP log levels in increasing severity, mapped onto the stdlib levels.
LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "emergency": logging.CRITICAL,
}
_LEVEL_ORDER = list(LOG_LEVELS)


class BraveSearchServer:
    """Binds the Brave search tools and the image registry to an MCP server."""

    def __init__(self, api_key: str, client: BraveSearchClient | None = None) -> None:
        self.client = client or BraveSearchClient(api_key=api_key)
        self.registry = ImageRegistry()
        self._client_log_level: types.LoggingLevel | None = None
        self._mcp = Server(SERVER_NAME, version=__version__, instructions=SERVER_INSTRUCTIONS)

        web_tool = WebSearchTool(self, self.client)
        tools: list[BaseTool] = [
            ImageSearchTool(self, self.client, self.registry),
            web_tool,
            LocalSearchTool(self, self.client, web_tool),
            NewsSearchTool(self, self.client),
            VideoSearchTool(self, self.client),
        ]
        self.tools: dict[str, BaseTool] = {tool.name: tool for tool in tools}
        self._register_handlers()

    def _register_handlers(self) -> None:
        self._mcp.list_tools()(self.list_tools)
        self._mcp.call_tool()(self.call_tool)
        self._mcp.list_resources()(self.list_resources)
        self._mcp.read_resource()(self.read_resource)
        self._mcp.set_logging_level()(self.set_logging_level)

    # ── Tools ────────────────────────────────────────────────

    async def list_tools(self) -> list[types.Tool]:
        return [tool.definition() for tool in self.tools.values()]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        tool = self.tools.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            return error_result(f"Unknown tool: {name}")
        logger.info("Calling %s", name)
        return await tool.execute(arguments)

    # ── Resources ────────────────────────────────────────────

    async def list_resources(self) -> list[types.Resource]:
        return [
            types.Resource(
                uri=AnyUrl(image_uri(title)),
                name=title,
                mimeType=IMAGE_MIME_TYPE,
            )
            for title in self.registry.titles()
        ]

    async def read_resource(self, uri: AnyUrl | str) -> list[ReadResourceContents]:
        uri = str(uri)
        title = title_from_uri(uri)
        image = self.registry.get(title) if title is not None else None
        if image is None:
            logger.warning("Resource not found: %s", uri)
            return [ReadResourceContents(content=f"Resource not found: {uri}", mime_type="text/plain")]
        return [ReadResourceContents(content=base64.b64decode(image), mime_type=IMAGE_MIME_TYPE)]

    async def notify_resources_changed(self) -> None:
        session = self._current_session()
        if session is not None:
            await session.send_resource_list_changed()

    # ── Logging ──────────────────────────────────────────────

    async def set_logging_level(self, level: types.LoggingLevel) -> None:
        logger.info("Client log level set to %s", level)
        self._client_log_level = level

    async def log(self, message: str, level: types.LoggingLevel = "info") -> None:
        """Log locally and, inside a request, forward to the client."""
        logger.log(LOG_LEVELS[level], message)
        session = self._current_session()
        if session is None or not self._should_forward(level):
            return
        await session.send_log_message(level=level, data=message, logger=CLIENT_LOGGER_NAME)

    def _should_forward(self, level: types.LoggingLevel) -> bool:
        if self._client_log_level is None:
            return True
        return _LEVEL_ORDER.index(level) >= _LEVEL_ORDER.index(self._client_log_level)

    def _current_session(self):
        try:
            return self._mcp.request_context.session
        except LookupError:
            return None

    # ── Lifecycle ────────────────────────────────────────────

    async def run(self) -> None:
        """Serve over stdio until the host closes the stream."""
        options = self._mcp.create_initialization_options(
            notification_options=NotificationOptions(resources_changed=True),
        )
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Server is running with stdio transport")
                await self._mcp.run(read_stream, write_stream, options)
        finally:
            await self.client.close()
