"""
SC2 segment decoder base classes.

Each segment type has one decoder class, registered under its 4-char tag.
The dispatcher reads the segment header, decompresses the payload when the
decoder asks for it, and hands the decoder an IoBuffer over exactly that
payload plus the City to write into.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Optional

from .errors import MalformedSegmentError
from .tile_iterator import TileIterator
from ...entities.city import TILE_COUNT

if TYPE_CHECKING:
    from ...entities.city import City
    from ...utils.binary import IoBuffer


@dataclass
class SegmentDecoder(ABC):
    """Base class for all segment decoders."""
    segment_name: str = ""

    # True when the payload is run-length compressed.
    compressed: ClassVar[bool] = True

    @abstractmethod
    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        """Decode the payload in ``io`` into ``city``."""
        pass

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.segment_name})"


@dataclass
class TileSegmentDecoder(SegmentDecoder):
    """
    Decoder for segments holding a fixed number of bytes per tile.

    The payload must cover every tile exactly once; anything shorter or
    longer is malformed.
    """
    tile_width: ClassVar[int] = 1

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        for x, y, value in self.iter_tiles(io.read_bytes(io.remaining)):
            self.read_tile(city, x, y, value)

    def iter_tiles(self, payload: bytes) -> Iterator[tuple[int, int, bytes]]:
        """Yield (x, y, tile_bytes) for every tile in raster order."""
        expected = TILE_COUNT * self.tile_width
        if len(payload) != expected:
            raise MalformedSegmentError(
                f"Expected {expected} bytes ({TILE_COUNT} tiles x {self.tile_width}), got {len(payload)}"
            )

        tiles = TileIterator()
        width = self.tile_width
        for offset in range(0, len(payload), width):
            if offset:
                tiles.increment()
            yield tiles.x, tiles.y, payload[offset:offset + width]

    @abstractmethod
    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        """Apply one tile's bytes."""
        pass


# Segment registry - maps 4-char tags to decoder classes
SEGMENT_DECODERS: dict[str, type] = {}


def register_segment(*segment_names: str):
    """Decorator to register a decoder for one or more segment tags."""
    def decorator(cls):
        for name in segment_names:
            SEGMENT_DECODERS[name] = cls
        return cls
    return decorator


def get_decoder_class(segment_name: str) -> Optional[type]:
    """Get the decoder class for a tag, or None for segments we skip."""
    return SEGMENT_DECODERS.get(segment_name)
