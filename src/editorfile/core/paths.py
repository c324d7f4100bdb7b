"""Path helpers: URL detection, ancestor search, parent-relative resolution."""

from __future__ import annotations

import logging
import os
import re
import stat
from typing import Callable, Optional, TypeVar, Union

from ..io.base import is_url

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]
T = TypeVar("T")

_EXT_RE = re.compile(r"\.([\w\-]+)$", re.ASCII)


def locate_file(editor_file: PathArg, file_name: str) -> str:
    """Find `file_name` in the nearest ancestor directory of `editor_file`.

    Only parents are tested, never `editor_file` itself, so the first
    candidate is ``dirname(editor_file)/file_name``. Leading slashes in
    `file_name` are dropped, which turns site-absolute references such as
    ``/css/style.css`` into suffixes searched from every ancestor.

    Returns the absolute path of the first match, `file_name` unchanged when
    it is a URL, or ``''`` when the filesystem root is reached without a hit.
    """
    if is_url(file_name):
        return file_name

    current = os.fspath(editor_file)
    if current:
        # "/a/b/" must step to "/a" first, like "/a/b"
        current = current.rstrip(os.sep) or os.sep
    file_name = file_name.lstrip("/")
    while current and current != os.path.dirname(current):
        current = os.path.dirname(current)
        candidate = os.path.join(current, file_name)
        if os.path.exists(candidate):
            logger.debug("Located %s for %s at %s", file_name, editor_file, candidate)
            return os.path.abspath(candidate)

    logger.debug("%s not found above %s", file_name, editor_file)
    return ""


def create_path(
    parent: PathArg,
    file_name: PathArg,
    callback: Optional[Callable[[str], T]] = None,
) -> Union[str, T]:
    """Resolve `file_name` against `parent` into an absolute path.

    A directory `parent` is used as-is; for anything else its containing
    directory is used. A missing `parent` raises FileNotFoundError before
    `callback` is considered.
    """
    parent = os.fspath(parent)
    st = os.stat(parent)
    base = parent if stat.S_ISDIR(st.st_mode) else os.path.dirname(parent)
    resolved = os.path.abspath(os.path.join(base, os.fspath(file_name)))

    if callback is not None:
        return callback(resolved)
    return resolved


def get_ext(file: Optional[PathArg]) -> str:
    """Return the lowercase extension of `file` without the dot, or ''."""
    m = _EXT_RE.search(os.fspath(file) if file is not None else "")
    return m.group(1).lower() if m else ""
