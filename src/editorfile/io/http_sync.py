"""Synchronous HTTP content reader using requests."""

import logging
from typing import Optional

import requests

from ..core.config import Settings, load_settings
from ..core.model import Content, FetchError
from ..core.util import bytes_to_text
from .base import budget_reached, normalize_budget

logger = logging.getLogger(__name__)

# Module-level session for connection pooling
_session = None


def _get_session():
    """Get or create the global requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class HTTPContentReader:
    """Synchronous HTTP reader that stops downloading once a byte budget is met."""

    def __init__(self, url: str, settings: Optional[Settings] = None):
        self.url = url
        self.bytes_fetched = 0
        self.requests_made = 0
        self.aborted = False
        self._settings = settings or load_settings()
        self._session = _get_session()

    def read(self, size: int = 0) -> Content:
        """GET the URL, returning all chunks received until `size` bytes arrived (0 = all).

        The last chunk is kept whole, so the result may be longer than `size`.
        Closing the response early drops the connection instead of draining it.
        """
        size = normalize_budget(size)
        self.requests_made += 1
        bufs = []
        total = 0
        logger.debug("GET %s (budget %d)", self.url, size)

        try:
            with self._session.get(self.url, stream=True, timeout=self._settings.http_timeout) as response:
                if response.status_code >= 400:
                    raise FetchError(
                        f"GET request failed with status {response.status_code}",
                        self.url, response.status_code,
                    )

                for chunk in response.iter_content(chunk_size=self._settings.chunk_size):
                    if not chunk:
                        continue
                    bufs.append(chunk)
                    total += len(chunk)
                    if budget_reached(size, total):
                        self.aborted = True
                        logger.debug("Budget of %d bytes reached at %d for %s, aborting", size, total, self.url)
                        break
        except requests.RequestException as e:
            raise FetchError(f"GET request failed: {e}", self.url) from e

        self.bytes_fetched += total
        return bytes_to_text(b"".join(bufs))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Session is shared, don't close it here
        pass


def open_http_reader(url: str, settings: Optional[Settings] = None) -> HTTPContentReader:
    """Create a synchronous HTTP content reader."""
    return HTTPContentReader(url, settings)


def close_global_session():
    """Close the global requests session. Call this at application shutdown."""
    global _session
    if _session is not None:
        _session.close()
        _session = None
