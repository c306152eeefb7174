"""
XBIT - Tile utility flags

Compressed, 1 byte per tile. See entities.tile.TileFlag for the bit layout.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import TileSegmentDecoder, register_segment
from ....entities.tile import TileFlag

if TYPE_CHECKING:
    from ....entities.city import City


# Bits 1 and 3 carry nothing we know of.
XBIT_MASK = int(
    TileFlag.SALTY | TileFlag.WATER_COVERED | TileFlag.WATER_SUPPLIED
    | TileFlag.PIPED | TileFlag.POWERED | TileFlag.CONDUCTIVE
)


def flags_from_byte(value: int) -> TileFlag:
    return TileFlag(value & XBIT_MASK)


@register_segment("XBIT")
@dataclass
class XBIT(TileSegmentDecoder):
    """Salt water, water cover, water supply, pipes, power, conductivity."""

    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        city.set_tile_flags(x, y, flags_from_byte(value[0]))
