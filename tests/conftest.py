# tests/conftest.py
"""Shared test helpers."""

from __future__ import annotations

import io

HELLO_LE = bytes([0xFF, 0xFE, 0x68, 0x00, 0x65, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0x6F, 0x00])
HELLO_BE = bytes([0xFE, 0xFF, 0x00, 0x68, 0x00, 0x65, 0x00, 0x6C, 0x00, 0x6C, 0x00, 0x6F])


class FailingSource:
    """Byte source whose reads raise *error* until *failures* reads have failed."""

    def __init__(self, data: bytes, error: BaseException, failures: int = 1) -> None:
        self._stream = io.BytesIO(data)
        self._error = error
        self.failures = failures
        self.calls = 0

    def read(self, size: int = -1) -> bytes:
        self.calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise self._error
        return self._stream.read(size)


class TrickleSource:
    """Byte source that returns at most *step* bytes per read, like a slow pipe."""

    def __init__(self, data: bytes, step: int = 1) -> None:
        self._stream = io.BytesIO(data)
        self._step = step
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if size < 0 or size > self._step:
            size = self._step
        return self._stream.read(size)


def read_in_chunks(reader: io.RawIOBase, size: int) -> bytes:
    out = bytearray()
    while True:
        chunk = reader.read(size)
        if not chunk:
            return bytes(out)
        assert len(chunk) <= size
        out.extend(chunk)

