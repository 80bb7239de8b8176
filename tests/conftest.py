"""Shared fixtures: a fake server recording log calls and a mocked Brave client."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from brave_search_mcp.brave.client import BraveSearchClient


class FakeServer:
    def __init__(self) -> None:
        self.logs: list[tuple[str, str]] = []
        self.notify_resources_changed = AsyncMock()

    async def log(self, message: str, level: str = "info") -> None:
        self.logs.append((level, message))

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.logs if level is None or lvl == level]


@pytest.fixture
def fake_server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def brave_client() -> MagicMock:
    return MagicMock(spec=BraveSearchClient)
