"""BOMReader -- lazy BOM-sensing UTF-16 to UTF-8 stream adapter."""

from __future__ import annotations

import dataclasses
import io
import logging
import threading
from typing import Any

from unutf16._utils import (
    DEFAULT_CHUNK_SIZE,
    _validate_chunk_size,
    _validate_errors,
    readinto,
)
from unutf16.bom import detect_bom
from unutf16.enums import Strategy
from unutf16.errors import BOMPeekError
from unutf16.lookahead import take_lookahead
from unutf16.transcode import UTF16Transcoder

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class _Active:
    """The strategy chosen on first read and the stream that implements it."""

    strategy: Strategy
    stream: Any


class BOMReader(io.RawIOBase):
    """Byte stream that converts BOM-marked UTF-16 input to UTF-8.

    Wraps any binary source with a ``read()`` method.  Nothing is read until
    the first call to :meth:`readinto` (or any method built on it, such as
    :meth:`read`).  That call looks at the first two bytes of the source:

    * ``FF FE`` -- the rest of the stream is decoded as UTF-16-LE,
    * ``FE FF`` -- the rest of the stream is decoded as UTF-16-BE,
    * anything else -- the source is passed through untouched.

    The BOM itself is consumed by the decoder and never appears in the
    output.  The choice is made once and every later read is forwarded to it.

    If reading the first bytes fails with :class:`OSError` or
    :class:`ValueError`, :class:`~unutf16.errors.BOMPeekError` is raised and
    the reader stays uninitialized; the next read tries again, starting with
    any bytes the failed attempt already consumed.  Other exceptions, such as
    an :class:`AttributeError` from a source without ``read()``, propagate
    unwrapped.

    Initialization is serialized with a lock, but steady-state reads are
    not: share one reader across threads only with external locking.
    """

    def __init__(
        self,
        source: Any,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        errors: str = "strict",
        closefd: bool = False,
    ) -> None:
        """Wrap *source* without reading from it.

        :param source: Binary stream to read from.  Borrowed: it is closed
            only when *closefd* is true.
        :param chunk_size: Bytes pulled from the source per decoding step.
        :param errors: Codec error handler for malformed UTF-16
            (``"strict"``, ``"replace"``, ``"ignore"`` or
            ``"backslashreplace"``).
        :param closefd: Close *source* when this reader is closed.
        :raises ValueError: If *chunk_size* or *errors* is invalid.
        """
        super().__init__()
        self._source = source
        self._closefd = closefd
        self._active: _Active | None = None
        self._lookahead = bytearray()
        self._init_lock = threading.Lock()
        _validate_chunk_size(chunk_size)
        _validate_errors(errors)
        self._chunk_size = chunk_size
        self._errors = errors

    @property
    def source(self) -> Any:
        """The wrapped byte source."""
        return self._source

    @property
    def initialized(self) -> bool:
        """Whether the decoding strategy has been chosen."""
        return self._active is not None

    @property
    def strategy(self) -> Strategy | None:
        """The chosen strategy, or ``None`` before the first successful read."""
        active = self._active
        return active.strategy if active is not None else None

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int | None:  # type: ignore[override]
        """Read up to ``len(buffer)`` bytes of UTF-8 into *buffer*.

        :returns: The number of bytes written; ``0`` at end of stream.
        :raises BOMPeekError: If the source fails while its first bytes are
            being examined.
        :raises UnicodeDecodeError: If UTF-16 input is malformed and
            *errors* is ``"strict"``.
        """
        if self.closed:
            msg = "I/O operation on closed file"
            raise ValueError(msg)
        active = self._active
        if active is None:
            active = self._initialize()
        return readinto(active.stream, buffer)

    def _initialize(self) -> _Active:
        with self._init_lock:
            if self._active is not None:
                return self._active
            try:
                head, stream = take_lookahead(self._source, self._lookahead)
            except (OSError, ValueError) as exc:
                logger.debug("BOM lookahead failed: %r", exc)
                raise BOMPeekError(exc) from exc

            strategy = detect_bom(head)
            if strategy.transcodes:
                stream = UTF16Transcoder(
                    stream,
                    strategy,
                    chunk_size=self._chunk_size,
                    errors=self._errors,
                )
            logger.debug("selected %s for %r", strategy.value, self._source)
            active = _Active(strategy, stream)
            self._install(active)
            self._lookahead.clear()
            return active

    def _install(self, active: _Active) -> None:
        if self._active is not None:
            msg = "decoding strategy already chosen"
            raise RuntimeError(msg)
        self._active = active

    def close(self) -> None:
        """Close the reader, and the source when *closefd* was set."""
        if self.closed:
            return
        try:
            active = self._active
            if active is not None and active.stream is not self._source:
                active.stream.close()
            if self._closefd:
                self._source.close()
        finally:
            super().close()
