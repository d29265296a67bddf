"""Exceptions raised by unutf16."""

from __future__ import annotations


class UnUTF16Error(Exception):
    """Base class for unutf16 errors."""


class BOMPeekError(UnUTF16Error, OSError):
    """Reading the leading bytes of the source failed.

    Raised from the first read of a :class:`~unutf16.BOMReader` when the
    source fails with anything other than end of stream.  The original
    exception is available as :attr:`cause` and as ``__cause__``.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"failed to peek BOM: {cause}")
        self.cause = cause
