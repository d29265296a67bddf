"""BOM (Byte Order Mark) classification of the first bytes of a stream."""

from __future__ import annotations

import codecs

from unutf16.enums import Strategy

#: Number of bytes inspected to choose a strategy.
BOM_LENGTH: int = 2

_BOMS: tuple[tuple[bytes, Strategy], ...] = (
    (codecs.BOM_UTF16_LE, Strategy.UTF16_LE),
    (codecs.BOM_UTF16_BE, Strategy.UTF16_BE),
)


def detect_bom(data: bytes | bytearray) -> Strategy:
    """Classify the leading bytes of a stream.

    Only the first :data:`BOM_LENGTH` bytes are examined.  ``FF FE`` selects
    little-endian UTF-16, ``FE FF`` selects big-endian UTF-16 and anything
    else, including input shorter than two bytes, selects pass-through.

    :param data: Lookahead bytes, usually exactly two.
    :returns: The :class:`Strategy` to use for the rest of the stream.
    """
    head = bytes(data[:BOM_LENGTH])
    for bom_bytes, strategy in _BOMS:
        if head == bom_bytes:
            return strategy
    return Strategy.PASSTHROUGH
