from __future__ import annotations
from dataclasses import dataclass
from typing import NewType

# str whose code points are all 0..255, one per source byte
Content = NewType("Content", str)


@dataclass(slots=True)
class Result:
    success: bool
    content: Content | None
    error: str | None
    bytes_fetched: int
    source: str | None = None


class FileAccessError(IOError):
    """Base class for errors raised by editorfile itself."""
    pass


class FetchError(FileAccessError):
    """Raised when a URL cannot be fetched (transport failure or HTTP error status)."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ContentEncodingError(FileAccessError, ValueError):
    """Raised when content holds a character that does not fit in one byte."""
    pass
