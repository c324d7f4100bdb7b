"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_HTTP_TIMEOUT = "EDITORFILE_HTTP_TIMEOUT"
ENV_CHUNK_SIZE = "EDITORFILE_CHUNK_SIZE"
ENV_LOG_LEVEL = "EDITORFILE_LOG_LEVEL"

DEFAULT_CHUNK_SIZE = 8192
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    # None means wait forever, as a plain socket would
    http_timeout: Optional[float] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_timeout(raw: str) -> Optional[float]:
    if raw.strip().lower() in ("", "none", "0"):
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_HTTP_TIMEOUT} must be a number of seconds, got {raw!r}")
    if value < 0:
        raise ValueError(f"{ENV_HTTP_TIMEOUT} cannot be negative, got {raw!r}")
    return value


def _parse_chunk_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_CHUNK_SIZE} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{ENV_CHUNK_SIZE} must be positive, got {raw!r}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ)."""
    env = os.environ if environ is None else environ

    timeout = _parse_timeout(env[ENV_HTTP_TIMEOUT]) if ENV_HTTP_TIMEOUT in env else None
    chunk_size = _parse_chunk_size(env[ENV_CHUNK_SIZE]) if ENV_CHUNK_SIZE in env else DEFAULT_CHUNK_SIZE
    log_level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()

    return Settings(http_timeout=timeout, chunk_size=chunk_size, log_level=log_level)
