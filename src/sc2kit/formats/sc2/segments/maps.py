"""
Integer map segments - XPLC, XFIR, XPOP, XROG, XTRF, XPLT, XVAL, XCRM

Compressed, 1 byte per tile, each byte a plain 0-255 value. They are kept
as separate layers on the City rather than merged into the tiles.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import TileSegmentDecoder, register_segment
from ....entities.city import MapLayer, TILE_COUNT, TILES_PER_SIDE

if TYPE_CHECKING:
    from ....entities.city import City
    from ....utils.binary import IoBuffer


INTEGER_MAP_SEGMENTS = frozenset(layer.value for layer in MapLayer)


@register_segment(*sorted(INTEGER_MAP_SEGMENTS))
@dataclass
class IntegerMap(TileSegmentDecoder):
    """One named per-tile integer layer."""

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        self._values = bytearray(TILE_COUNT)
        super().read(city, io, quick)
        city.set_map(MapLayer(self.segment_name), bytes(self._values))

    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        self._values[x + y * TILES_PER_SIDE] = value[0]
