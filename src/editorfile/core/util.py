from __future__ import annotations
from typing import Any, Dict

from .model import Content, ContentEncodingError, Result

# latin-1 maps byte n <-> code point n for the whole 0..255 range
_CODEC = "latin-1"


def bytes_to_text(data: bytes) -> Content:
    return Content(bytes(data).decode(_CODEC))


def text_to_bytes(content: str) -> bytes:
    """Encode `content` one character per byte.

    Raises ContentEncodingError for characters above U+00FF instead of
    silently replacing them.
    """
    try:
        return content.encode(_CODEC)
    except UnicodeEncodeError as e:
        bad = content[e.start]
        raise ContentEncodingError(
            f"Character {bad!r} (U+{ord(bad):04X}) at index {e.start} does not fit in one byte"
        ) from e


def result_asdict(res: Result, *, with_content: bool = True) -> Dict[str, Any]:
    """Return a JSON-serialisable dict (skip None)."""
    payload = {
        "source": res.source,
        "success": res.success,
        "error": res.error,
        "bytes_fetched": res.bytes_fetched,
    }
    if with_content and res.success:
        payload["content"] = res.content
    return {k: v for k, v in payload.items() if v is not None}
