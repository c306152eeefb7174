"""
XZON - Zones and building corners

Compressed, 1 byte per tile. The low nibble is the zone code (0-9); each of
the top four bits marks one building corner on the tile.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..base import TileSegmentDecoder, register_segment
from ....entities.tile import BuildingCorner, Zone

if TYPE_CHECKING:
    from ....entities.city import City
    from ....utils.binary import IoBuffer


logger = logging.getLogger(__name__)

ZONE_MASK = 0x0F

ZONE_CODES: dict[int, Zone] = {zone.value: zone for zone in Zone}

CORNER_MASKS: tuple[BuildingCorner, ...] = (
    BuildingCorner.TOP_RIGHT,
    BuildingCorner.BOTTOM_RIGHT,
    BuildingCorner.BOTTOM_LEFT,
    BuildingCorner.TOP_LEFT,
)


def zone_from_byte(value: int) -> Optional[Zone]:
    """Zone for the low nibble, or None for codes 10-15."""
    return ZONE_CODES.get(value & ZONE_MASK)


def corners_from_byte(value: int) -> BuildingCorner:
    corners = BuildingCorner(0)
    for mask in CORNER_MASKS:
        if (value & mask) != 0:
            corners |= mask
    return corners


@register_segment("XZON")
@dataclass
class XZON(TileSegmentDecoder):
    """Zoning and building corner segment."""

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        self._ignored = 0
        super().read(city, io, quick)
        if self._ignored:
            logger.debug(f"XZON: ignored {self._ignored} tiles with unknown zone codes")

    def read_tile(self, city: 'City', x: int, y: int, value: bytes):
        code = value[0]
        zone = zone_from_byte(code)
        if zone is None:
            self._ignored += 1
        else:
            city.set_zone(x, y, zone)
        city.set_building_corners(x, y, corners_from_byte(code))
