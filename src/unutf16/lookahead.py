"""Non-destructive lookahead over a byte source.

Two ways of seeing the first bytes of a stream without losing them:

* **peek** -- sources with a ``peek()`` method (``io.BufferedReader`` and
  friends) are inspected in place and handed on unchanged.
* **restitch** -- everything else is read destructively and rebuilt as a
  :class:`PrefixedStream` that replays the consumed bytes before the rest of
  the source.

Both produce exactly the byte sequence the source would have produced.
"""

from __future__ import annotations

import io
from typing import Any

from unutf16._utils import read_chunk, readinto
from unutf16.bom import BOM_LENGTH


class PrefixedStream(io.RawIOBase):
    """Raw stream yielding *prefix* followed by the remainder of *source*.

    Closing a :class:`PrefixedStream` does not close *source*.
    """

    def __init__(self, prefix: bytes, source: Any) -> None:
        super().__init__()
        self._prefix = bytes(prefix)
        self._offset = 0
        self._source = source

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int | None:  # type: ignore[override]
        remaining = len(self._prefix) - self._offset
        if remaining > 0:
            n = min(len(buffer), remaining)
            buffer[:n] = self._prefix[self._offset : self._offset + n]
            self._offset += n
            return n
        return readinto(self._source, buffer)


def take_lookahead(
    source: Any, pending: bytearray, size: int = BOM_LENGTH
) -> tuple[bytes, Any]:
    """Look at the first *size* bytes of *source* without losing them.

    *pending* holds bytes already consumed by an earlier attempt that failed
    part-way; it is extended in place, so a retry after an I/O error resumes
    where the previous attempt stopped.

    :param source: The byte source to inspect.
    :param pending: Bytes consumed from *source* by previous attempts.
    :param size: How many bytes to look at.
    :returns: A ``(head, stream)`` tuple.  *head* holds up to *size* bytes
        (fewer only at end of stream) and *stream* yields *head* followed by
        the rest of the source.
    """
    if not pending:
        peek = getattr(source, "peek", None)
        if peek is not None:
            head = bytes(peek(size)[:size])
            if len(head) == size:
                return head, source
            # A short peek is either end of stream or a single short raw
            # read; fall through and read the rest.

    while len(pending) < size:
        chunk = read_chunk(source, size - len(pending))
        if not chunk:
            break
        pending.extend(chunk)

    head = bytes(pending)
    if not head:
        return head, source
    return head, PrefixedStream(head, source)
