"""I/O layer for editorfile - turns paths, URLs and streams into content."""

# Re-export these for import convenience
from .base import ContentReader, AsyncContentReader, URL_RE, is_url
from .local import open_local_reader, open_local_reader_async, write_local
from .http_sync import open_http_reader
from .http_async import open_http_reader_async


def open_reader(source, settings=None):
    """Factory function to create appropriate ContentReader based on source type."""
    if hasattr(source, 'read'):  # BinaryIO
        return open_local_reader(source)

    if is_url(source):
        return open_http_reader(source, settings)
    return open_local_reader(source)


async def open_reader_async(source, settings=None):
    """Factory function to create appropriate AsyncContentReader based on source type."""
    if hasattr(source, 'read'):  # BinaryIO
        return await open_local_reader_async(source)

    if is_url(source):
        return await open_http_reader_async(source, settings)
    return await open_local_reader_async(source)
