"""
ALTM - Altitude map

Uncompressed, 2 bytes per tile. The first byte is not used here; the low
5 bits of the second give the height step, 50m each, starting at 50m.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import TileSegmentDecoder, register_segment

if TYPE_CHECKING:
    from ....entities.city import City


ALTITUDE_MASK = 0x1F
ALTITUDE_STEP = 50
ALTITUDE_BASE = 50


def altitude_from_byte(value: int) -> int:
    """Convert the packed height step into meters (50-1600)."""
    return (value & ALTITUDE_MASK) * ALTITUDE_STEP + ALTITUDE_BASE


@register_segment("ALTM")
@dataclass
class ALTM(TileSegmentDecoder):
    """Altitude segment."""
    compressed = False
    tile_width = 2

    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        city.set_altitude(x, y, altitude_from_byte(value[1]))
