"""Internal shared utilities for unutf16."""

from __future__ import annotations

from typing import Any

#: Default number of bytes pulled from the source per transcoding step.
DEFAULT_CHUNK_SIZE: int = 65_536

#: Codec error handlers accepted by the UTF-16 decoder.
ERROR_HANDLERS: frozenset[str] = frozenset(
    {"strict", "replace", "ignore", "backslashreplace"}
)


def _validate_chunk_size(chunk_size: int) -> None:
    """Raise ValueError if *chunk_size* is not a positive integer."""
    if (
        isinstance(chunk_size, bool)
        or not isinstance(chunk_size, int)
        or chunk_size < 1
    ):
        msg = "chunk_size must be a positive integer"
        raise ValueError(msg)


def _validate_errors(errors: str) -> None:
    """Raise ValueError if *errors* is not a supported codec error handler."""
    if errors not in ERROR_HANDLERS:
        msg = f"errors must be one of {sorted(ERROR_HANDLERS)}, got {errors!r}"
        raise ValueError(msg)


def read_chunk(source: Any, size: int) -> bytes:
    """Read up to *size* bytes from *source*, returning ``b""`` at end of stream.

    ``EOFError`` is treated as end of stream, not as a failure.
    """
    try:
        data = source.read(size)
    except EOFError:
        return b""
    return bytes(data) if data else b""


def readinto(source: Any, buffer: Any) -> int | None:
    """Fill *buffer* from *source* using ``readinto`` when the source has one."""
    if hasattr(source, "readinto"):
        try:
            return source.readinto(buffer)
        except EOFError:
            return 0
    data = read_chunk(source, len(buffer))
    n = len(data)
    buffer[:n] = data
    return n
