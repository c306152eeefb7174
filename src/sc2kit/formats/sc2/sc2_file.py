"""
SC2 File Parser

An SC2 file is an IFF-style container: a 12-byte "FORM....SCDH" header
followed by segments, each a 4-char tag, a big-endian 32-bit length and that
many payload bytes. Most payloads are run-length compressed (see rle.py).

Sc2File walks the segments in file order, hands the known ones to their
registered decoder and skips the rest by length. In quick mode only the
city name, the statistics and the mayor's name are decoded.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from . import rle
from . import segments  # noqa: F401  (registers the decoders)
from .base import get_decoder_class
from .errors import CityDecodeError, MalformedSegmentError
from .validator import HEADER_SIZE, check_container
from ...entities.building import BuildingFactory
from ...entities.city import City
from ...utils.binary import IoBuffer, ByteOrder


logger = logging.getLogger(__name__)

SEGMENT_HEADER_SIZE = 8

# Decoded in quick mode; XLAB only contributes the mayor's name there.
QUICK_SEGMENTS = frozenset({"CNAM", "MISC", "XLAB"})


@dataclass
class SegmentRecord:
    """Where a segment sat in the file and what happened to it."""
    name: str
    offset: int
    length: int
    decoded: bool = False
    decompressed_length: Optional[int] = None

    def __str__(self) -> str:
        state = "decoded" if self.decoded else "skipped"
        return f"{self.name} @ {self.offset:#07x} ({self.length} bytes, {state})"


@dataclass
class Sc2File:
    """
    A decoded SC2 save: the City plus the segment layout it came from.

    The input stream is only used while decoding and is not kept.
    """
    filename: str = ""
    quick: bool = False
    city: City = field(default_factory=City)
    declared_length: int = 0
    segments: list[SegmentRecord] = field(default_factory=list)

    @classmethod
    def read(cls, path: Union[str, Path], quick: bool = False,
             building_factory: Optional[BuildingFactory] = None) -> 'Sc2File':
        """Read an SC2 file from disk."""
        with open(path, 'rb') as f:
            return cls.from_stream(f, filename=str(path), quick=quick, building_factory=building_factory)

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "", quick: bool = False,
                   building_factory: Optional[BuildingFactory] = None) -> 'Sc2File':
        """Read an SC2 file from bytes."""
        io = IoBuffer.from_bytes(data, ByteOrder.BIG_ENDIAN)
        return cls._decode(io, filename, quick, building_factory)

    @classmethod
    def from_stream(cls, stream: BinaryIO, filename: str = "", quick: bool = False,
                    building_factory: Optional[BuildingFactory] = None) -> 'Sc2File':
        """Read an SC2 file from a seekable binary stream, starting at offset 0."""
        io = IoBuffer.from_stream(stream, ByteOrder.BIG_ENDIAN)
        return cls._decode(io, filename, quick, building_factory)

    @classmethod
    def _decode(cls, io: IoBuffer, filename: str, quick: bool,
                building_factory: Optional[BuildingFactory]) -> 'Sc2File':
        sc2 = cls(filename=filename, quick=quick, city=City(building_factory=building_factory))
        sc2._read_from_stream(io)
        return sc2

    def _read_from_stream(self, io: IoBuffer):
        """Parse header and segments."""
        self.declared_length = check_container(io.stream)

        total = io.length
        if self.declared_length != total - SEGMENT_HEADER_SIZE:
            logger.warning(
                f"{self.filename or 'stream'}: header declares {self.declared_length} bytes, "
                f"file holds {total - SEGMENT_HEADER_SIZE}"
            )

        io.position = HEADER_SIZE
        while io.position < total:
            self._read_segment(io)

        decoded = sum(1 for s in self.segments if s.decoded)
        logger.info(
            f"Decoded {self.city.city_name or 'unnamed city'!r}: "
            f"{decoded}/{len(self.segments)} segments ({'quick' if self.quick else 'full'})"
        )

    def _read_segment(self, io: IoBuffer):
        """Read one segment header and either decode or skip its payload."""
        start = io.position
        if not io.has_bytes(SEGMENT_HEADER_SIZE):
            raise MalformedSegmentError(
                f"Truncated segment header ({io.remaining} bytes left)", offset=start
            )

        name = io.read_cstring(4, trim_null=False)
        length = io.read_uint32()
        record = SegmentRecord(name=name, offset=start, length=length)
        self.segments.append(record)

        if not io.has_bytes(length):
            raise MalformedSegmentError(
                f"Declared length {length} runs past end of file ({io.remaining} bytes left)",
                segment=name, offset=start,
            )

        decoder_class = get_decoder_class(name)
        if decoder_class is None:
            logger.info(f"Skipping unknown segment {name} ({length} bytes)")
            io.skip(length)
            return
        if self.quick and name not in QUICK_SEGMENTS:
            logger.debug(f"Quick mode: skipping {name} ({length} bytes)")
            io.skip(length)
            return

        decoder = decoder_class(segment_name=name)
        try:
            payload = io.read_bytes(length)
            if decoder.compressed:
                payload = rle.decompress(payload)
                record.decompressed_length = len(payload)
            logger.debug(f"{name} @ {start:#x}: {length} bytes -> {len(payload)} decoded by {decoder}")
            decoder.read(self.city, IoBuffer.from_bytes(payload, ByteOrder.BIG_ENDIAN), quick=self.quick)
        except CityDecodeError as e:
            if e.segment is None:
                e.segment = name
                e.offset = start
            raise
        except EOFError as e:
            raise MalformedSegmentError(f"Payload ended early: {e}", segment=name, offset=start) from e

        record.decoded = True

    def get_segment(self, name: str) -> Optional[SegmentRecord]:
        """First segment record with this tag."""
        for record in self.segments:
            if record.name == name:
                return record
        return None

    def __iter__(self) -> Iterator[SegmentRecord]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def summary(self) -> str:
        """Get a summary of segments in this file."""
        lines = [f"SC2: {self.filename}", f"Segments: {len(self.segments)}"]
        for record in self.segments:
            lines.append(f"  {record}")
        return "\n".join(lines)


def decode(stream: BinaryIO, quick: bool = False,
           building_factory: Optional[BuildingFactory] = None) -> City:
    """Decode a seekable binary stream into a City."""
    return Sc2File.from_stream(stream, quick=quick, building_factory=building_factory).city


def read_city(path: Union[str, Path], quick: bool = False,
              building_factory: Optional[BuildingFactory] = None) -> City:
    """Decode the SC2 file at ``path`` into a City."""
    return Sc2File.read(path, quick=quick, building_factory=building_factory).city
