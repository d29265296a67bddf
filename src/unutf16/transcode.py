"""UTF-16 to UTF-8 transcoding over raw byte streams.

The heavy lifting, BOM included, is done by the :mod:`codecs` ``utf-16``
incremental decoder; this module only adapts it to the pull-read
``readinto()`` contract.
"""

from __future__ import annotations

import codecs
import io
from typing import Any

from unutf16._utils import (
    DEFAULT_CHUNK_SIZE,
    _validate_chunk_size,
    _validate_errors,
    read_chunk,
)
from unutf16.enums import Strategy


class UTF16Transcoder(io.RawIOBase):
    """Raw stream that reads BOM-marked UTF-16 from *source* and yields UTF-8.

    The stream must start with the BOM that selected *strategy*; the codec
    takes the byte order from it and drops it from the output.  Reads pull
    *chunk_size* bytes from the source at a time; decoded output that does
    not fit the caller's buffer is kept for the next read, so chunking on
    either side never changes the result.  A truncated trailing byte or an
    unpaired surrogate raises :class:`UnicodeDecodeError` under
    ``errors="strict"``.  Closing the transcoder does not close *source*.
    """

    def __init__(
        self,
        source: Any,
        strategy: Strategy,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        errors: str = "strict",
    ) -> None:
        super().__init__()
        self._source = source
        self._pending = bytearray()
        self._eof = False
        if not strategy.transcodes:
            msg = f"{strategy} does not decode UTF-16"
            raise ValueError(msg)
        _validate_chunk_size(chunk_size)
        _validate_errors(errors)
        self._strategy = strategy
        self._chunk_size = chunk_size
        self._decoder = codecs.getincrementaldecoder("utf-16")(errors)

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:  # type: ignore[override]
        size = len(buffer)
        if size == 0:
            return 0
        while not self._pending and not self._eof:
            self._fill()
        n = min(size, len(self._pending))
        buffer[:n] = self._pending[:n]
        del self._pending[:n]
        return n

    def _fill(self) -> None:
        chunk = read_chunk(self._source, self._chunk_size)
        if chunk:
            text = self._decoder.decode(chunk)
        else:
            self._eof = True
            text = self._decoder.decode(b"", final=True)
        if text:
            self._pending.extend(text.encode("utf-8"))
