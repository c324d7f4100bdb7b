"""Local file readers and writer."""

import asyncio
import logging
import os
from pathlib import Path
from typing import BinaryIO, Union

from ..core.model import Content
from ..core.util import bytes_to_text, text_to_bytes
from .base import normalize_budget

logger = logging.getLogger(__name__)


class LocalContentReader:
    """Synchronous local file reader.

    Path sources are opened per read and closed before returning, on error
    paths too. BinaryIO sources are read from their current position and
    left open for the caller.
    """

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self.bytes_fetched = 0
        self.requests_made = 0
        self._source = source

    @property
    def name(self) -> str:
        if hasattr(self._source, "read"):
            return str(getattr(self._source, "name", "<stream>"))
        return os.fspath(self._source)

    def _read_bytes(self, size: int) -> bytes:
        if hasattr(self._source, "read"):
            return self._source.read(size) if size else self._source.read()
        with open(self._source, "rb") as f:
            return f.read(size) if size else f.read()

    def read(self, size: int = 0) -> Content:
        """Return the file content, or at most its first `size` bytes."""
        size = normalize_budget(size)
        self.requests_made += 1
        data = self._read_bytes(size)
        self.bytes_fetched += len(data)
        logger.debug("Read %d bytes from %s (budget %d)", len(data), self.name, size)
        return bytes_to_text(data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass


class LocalAsyncContentReader:
    """Asynchronous local file reader - thin wrapper around sync reader."""

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self._sync_reader = LocalContentReader(source)

    @property
    def name(self) -> str:
        return self._sync_reader.name

    @property
    def bytes_fetched(self) -> int:
        return self._sync_reader.bytes_fetched

    @property
    def requests_made(self) -> int:
        return self._sync_reader.requests_made

    async def read(self, size: int = 0) -> Content:
        """Return the file content, or at most its first `size` bytes."""
        return await asyncio.to_thread(self._sync_reader.read, size)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


def write_local(file: Union[Path, str], content: str) -> int:
    """Write `content` to `file` one byte per character, replacing what was there.

    The content is encoded before the file is opened, so an unencodable
    character leaves an existing file untouched. Parent directories are not
    created. Returns the number of bytes written.
    """
    data = text_to_bytes(content)
    with open(file, "wb") as f:
        f.write(data)
    logger.debug("Saved %d bytes to %s", len(data), file)
    return len(data)


def open_local_reader(source: Union[Path, str, BinaryIO]) -> LocalContentReader:
    """Create a synchronous local content reader."""
    return LocalContentReader(source)


async def open_local_reader_async(source: Union[Path, str, BinaryIO]) -> LocalAsyncContentReader:
    """Create an asynchronous local content reader."""
    return LocalAsyncContentReader(source)
