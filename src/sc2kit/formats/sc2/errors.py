"""
Decode errors for SC2 containers.

Everything derives from CityDecodeError (a ValueError), so callers can catch
one type. Errors raised by leaf code (codec, tile iterator, decoders) start
without segment context; the dispatcher fills in ``segment`` and ``offset``
before re-raising.
"""

from typing import Optional


class CityDecodeError(ValueError):
    """Base class for anything that stops a city from decoding."""

    def __init__(self, message: str, segment: Optional[str] = None, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.segment = segment
        self.offset = offset

    def __str__(self) -> str:
        if self.segment is None:
            return self.message
        where = f"segment {self.segment}"
        if self.offset is not None:
            where += f" at offset {self.offset:#x}"
        return f"{where}: {self.message}"


class InvalidContainerError(CityDecodeError):
    """Header signature, container type or file size is wrong."""


class MalformedSegmentError(CityDecodeError):
    """A segment's payload does not match the layout its type requires."""


class CompressionError(MalformedSegmentError):
    """A run-length block asks for bytes outside its compressed budget."""


class TileRangeError(MalformedSegmentError):
    """The tile iterator was advanced past the final tile."""


class StatisticIndexError(CityDecodeError):
    """MISC holds fewer integers than the statistic table refers to."""
