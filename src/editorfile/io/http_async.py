"""Asynchronous HTTP content reader using httpx."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx

from ..core.config import Settings, load_settings
from ..core.model import Content, FetchError
from ..core.util import bytes_to_text
from .base import budget_reached, normalize_budget

logger = logging.getLogger(__name__)


# Global async client
_client: Optional[httpx.AsyncClient] = None


@asynccontextmanager
async def _get_client():
    """Get or create the global httpx AsyncClient."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=None)

    try:
        yield _client
    finally:
        # Don't close the client here - it's shared
        pass


class HTTPAsyncContentReader:
    """Asynchronous HTTP reader that stops downloading once a byte budget is met."""

    def __init__(self, url: str, settings: Optional[Settings] = None):
        self.url = url
        self.bytes_fetched = 0
        self.requests_made = 0
        self.aborted = False
        self._settings = settings or load_settings()

    async def read(self, size: int = 0) -> Content:
        """GET the URL, returning all chunks received until `size` bytes arrived (0 = all)."""
        size = normalize_budget(size)
        self.requests_made += 1
        bufs = []
        total = 0
        logger.debug("GET %s (budget %d)", self.url, size)

        async with _get_client() as client:
            try:
                async with client.stream("GET", self.url, timeout=self._settings.http_timeout) as response:
                    if response.status_code >= 400:
                        raise FetchError(
                            f"GET request failed with status {response.status_code}",
                            self.url, response.status_code,
                        )

                    async for chunk in response.aiter_bytes(self._settings.chunk_size):
                        bufs.append(chunk)
                        total += len(chunk)
                        if budget_reached(size, total):
                            # leaving the stream block closes the response mid-body
                            self.aborted = True
                            logger.debug("Budget of %d bytes reached at %d for %s, aborting", size, total, self.url)
                            break
            except httpx.HTTPError as e:
                raise FetchError(f"GET request failed: {e}", self.url) from e

        self.bytes_fetched += total
        return bytes_to_text(b"".join(bufs))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        # Client is shared, don't close it here
        pass


async def open_http_reader_async(url: str, settings: Optional[Settings] = None) -> HTTPAsyncContentReader:
    """Create an asynchronous HTTP content reader."""
    return HTTPAsyncContentReader(url, settings)


async def close_global_client():
    """Close the global httpx client. Call this at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
