"""Base protocols and shared helpers for the I/O layer."""

import re
from typing import Optional, Protocol, runtime_checkable

from ..core.model import Content

URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def is_url(path) -> bool:
    return isinstance(path, str) and URL_RE.match(path) is not None


def normalize_budget(size: Optional[int]) -> int:
    """Return `size` as a byte budget where 0 means unbounded."""
    if size is None:
        return 0
    if size < 0:
        raise ValueError(f"Byte budget cannot be negative, got {size}")
    return int(size)


def budget_reached(size: int, total: int) -> bool:
    return bool(size) and total >= size


@runtime_checkable
class ContentReader(Protocol):
    """Protocol for synchronous content readers."""

    bytes_fetched: int  # running total

    def read(self, size: int = 0) -> Content:
        """Return the source content, stopping once `size` bytes arrived (0 = all).
        Failures are raised, never returned.
        """
        ...


@runtime_checkable
class AsyncContentReader(Protocol):
    """Protocol for asynchronous content readers."""

    bytes_fetched: int  # running total

    async def read(self, size: int = 0) -> Content:
        """Return the source content, stopping once `size` bytes arrived (0 = all).
        Failures are raised, never returned.
        """
        ...
