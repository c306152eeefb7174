"""
XBLD - Buildings

Compressed, 1 byte per tile. The byte is a building code; it goes to the
city's building factory untouched.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import TileSegmentDecoder, register_segment

if TYPE_CHECKING:
    from ....entities.city import City


@register_segment("XBLD")
@dataclass
class XBLD(TileSegmentDecoder):
    """Building code segment."""

    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        city.set_building(x, y, value[0])
