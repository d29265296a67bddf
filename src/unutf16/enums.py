"""Enumerations for unutf16."""

import enum


class Strategy(enum.Enum):
    """Decoding strategy chosen once per :class:`~unutf16.BOMReader`."""

    PASSTHROUGH = "passthrough"
    UTF16_LE = "utf-16-le"
    UTF16_BE = "utf-16-be"

    @property
    def transcodes(self) -> bool:
        """Whether this strategy runs the stream through a UTF-16 decoder."""
        return self is not Strategy.PASSTHROUGH
