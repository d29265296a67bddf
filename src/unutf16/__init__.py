"""Transparent UTF-16 to UTF-8 conversion for byte streams."""

from __future__ import annotations

import io
import os
from pathlib import Path

from unutf16._utils import DEFAULT_CHUNK_SIZE
from unutf16.bom import detect_bom
from unutf16.enums import Strategy
from unutf16.errors import BOMPeekError, UnUTF16Error
from unutf16.reader import BOMReader

__version__ = "1.0.0"
__all__ = [
    "BOMPeekError",
    "BOMReader",
    "Strategy",
    "UnUTF16Error",
    "decode",
    "detect_bom",
    "open_utf8",
]


def decode(data: bytes | bytearray, errors: str = "strict") -> bytes:
    """Convert a complete buffer to UTF-8.

    BOM-marked UTF-16 is transcoded; anything else is returned unchanged.

    :param data: The raw bytes.
    :param errors: Codec error handler for malformed UTF-16.
    :returns: The UTF-8 bytes.
    """
    with BOMReader(io.BytesIO(bytes(data)), errors=errors) as reader:
        return reader.readall()


def open_utf8(
    path: str | os.PathLike[str],
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    errors: str = "strict",
) -> BOMReader:
    """Open *path* for binary reading through a :class:`BOMReader`.

    The returned reader owns the file and closes it when it is closed.
    """
    f = Path(path).open("rb")
    try:
        return BOMReader(f, chunk_size=chunk_size, errors=errors, closefd=True)
    except BaseException:
        f.close()
        raise
