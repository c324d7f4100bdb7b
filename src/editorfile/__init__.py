"""editorfile - small file access helpers for editor integrations."""

import logging
from typing import Callable, Optional

from .core.model import Content, Result, FileAccessError, FetchError, ContentEncodingError  # re-export
from .core.paths import locate_file, create_path, get_ext                                    # re-export
from .core.util import bytes_to_text, text_to_bytes
from .io import open_reader, open_reader_async, write_local, is_url

logging.getLogger(__name__).addHandler(logging.NullHandler())

ReadCallback = Callable[[Optional[BaseException], Optional[Content]], object]


def _deliver(callback: Optional[ReadCallback], error: Optional[BaseException], content: Optional[Content]):
    if callback is None:
        if error is not None:
            raise error
        return content
    callback(error, content)
    return content


async def read(source, size: int = 0, callback: Optional[ReadCallback] = None) -> Optional[Content]:
    """Read a local path or http(s) URL, stopping once `size` bytes arrived (0 = all).

    Without `callback` the content is returned and failures are raised. With
    one, it is called exactly once as ``callback(None, content)`` or
    ``callback(error, None)``.
    """
    try:
        reader = await open_reader_async(source)
        content = await reader.read(size)
    except (OSError, ValueError) as e:
        return _deliver(callback, e, None)
    return _deliver(callback, None, content)


def read_sync(source, size: int = 0, callback: Optional[ReadCallback] = None) -> Optional[Content]:
    """Blocking twin of :func:`read` with the same result contract."""
    try:
        content = open_reader(source).read(size)
    except (OSError, ValueError) as e:
        return _deliver(callback, e, None)
    return _deliver(callback, None, content)


def save(file, content: str) -> None:
    """Write `content` to `file`, one byte per character, replacing existing content."""
    write_local(file, content)


__all__ = [
    "read", "read_sync", "locate_file", "create_path", "save", "get_ext",
    "is_url", "bytes_to_text", "text_to_bytes",
    "Content", "Result", "FileAccessError", "FetchError", "ContentEncodingError",
]
