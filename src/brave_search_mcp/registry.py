"""In-process store of fetched images, exposed as brave-image:// resources."""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

IMAGE_URI_SCHEME = "brave-image"
IMAGE_MIME_TYPE = "image/png"


def image_uri(title: str) -> str:
    return f"{IMAGE_URI_SCHEME}://{quote(title, safe='')}"


def title_from_uri(uri: str) -> str | None:
    """Return the image title a resource URI points at, or None for other schemes."""
    prefix = f"{IMAGE_URI_SCHEME}://"
    if not uri.startswith(prefix):
        return None
    return unquote(uri[len(prefix):])


class ImageRegistry:
    """Title → base64 payload. Last write wins; entries live as long as the process."""

    def __init__(self) -> None:
        self._images: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def put(self, title: str, data: str) -> None:
        async with self._lock:
            if title in self._images:
                logger.debug("Overwriting image registered under %r", title)
            self._images[title] = data

    def get(self, title: str) -> str | None:
        return self._images.get(title)

    def titles(self) -> list[str]:
        return list(self._images)

    def __contains__(self, title: object) -> bool:
        return title in self._images

    def __len__(self) -> int:
        return len(self._images)
