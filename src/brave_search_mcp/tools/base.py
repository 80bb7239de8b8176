"""BaseTool: one search capability with a declared input model and a safe execute boundary."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mcp import types
from pydantic import BaseModel, ValidationError

from brave_search_mcp.brave.client import BraveSearchClient

if TYPE_CHECKING:
    from brave_search_mcp.server import BraveSearchServer

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


def text_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def error_result(text: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=True,
    )


class BaseTool(ABC, Generic[InputT]):
    """Base class for the Brave search tools."""

    name: str
    description: str
    input_model: type[InputT]

    def __init__(self, server: BraveSearchServer, client: BraveSearchClient) -> None:
        self.server = server
        self.client = client

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    def definition(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    @abstractmethod
    async def execute_core(self, data: InputT) -> types.CallToolResult:
        """Run the search for already validated input."""

    async def execute(self, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """Validate arguments and run the tool. Never raises."""
        try:
            data = self.input_model.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning("Rejected %s call: %s", self.name, e)
            return error_result(f"Invalid arguments for {self.name}: {e}")

        try:
            return await self.execute_core(data)
        except Exception as e:
            logger.exception("Error executing %s", self.name)
            return error_result(f"Error in {self.name}: {e}")
