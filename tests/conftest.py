"""Shared fixtures."""

import pytest
import pytest_asyncio

from editorfile.io.http_async import close_global_client


@pytest_asyncio.fixture
async def async_client_cleanup():
    """Close the shared httpx client so it never outlives the test's event loop."""
    yield
    await close_global_client()


@pytest.fixture
def byte_range_text():
    """Every byte value 0..255 as a one-char-per-byte string."""
    return "".join(chr(i) for i in range(256))
