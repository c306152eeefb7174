"""
XUND - Underground items

Compressed, 1 byte per tile. The byte is a code from one of a few ranges;
the variants inside a range are orientations of the same piece, which this
decoder does not keep. Codes outside every range leave the tile empty.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..base import TileSegmentDecoder, register_segment
from ....entities.tile import UndergroundItem

if TYPE_CHECKING:
    from ....entities.city import City
    from ....utils.binary import IoBuffer


logger = logging.getLogger(__name__)

# (first code, last code, item), inclusive
UNDERGROUND_RANGES: tuple[tuple[int, int, UndergroundItem], ...] = (
    (0x00, 0x00, UndergroundItem.NONE),
    (0x01, 0x0F, UndergroundItem.SUBWAY),
    (0x10, 0x1E, UndergroundItem.PIPE),
    (0x1F, 0x20, UndergroundItem.PIPE_AND_SUBWAY),
    (0x21, 0x22, UndergroundItem.TUNNEL),
    (0x23, 0x23, UndergroundItem.SUBWAY_STATION),
)


def underground_from_byte(value: int) -> Optional[UndergroundItem]:
    """Map a code to its item, or None if the code is not in any range."""
    for low, high, item in UNDERGROUND_RANGES:
        if low <= value <= high:
            return item
    return None


@register_segment("XUND")
@dataclass
class XUND(TileSegmentDecoder):
    """Pipes, subways and tunnels."""

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        self._ignored = 0
        super().read(city, io, quick)
        if self._ignored:
            logger.debug(f"XUND: ignored {self._ignored} tiles with unknown underground codes")

    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        item = underground_from_byte(value[0])
        if item is None:
            self._ignored += 1
            return
        city.set_underground_item(x, y, item)
