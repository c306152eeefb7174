"""
Tile - one cell of the city grid.

Categories are plain enums. Bit-packed fields (utility flags, building
corners) are IntFlags whose values are the masks used in the save file.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any, Optional


class UndergroundItem(Enum):
    """What sits below a tile."""
    NONE = "none"
    PIPE = "pipe"
    SUBWAY = "subway"
    PIPE_AND_SUBWAY = "pipe_and_subway"
    TUNNEL = "tunnel"
    SUBWAY_STATION = "subway_station"


class Zone(Enum):
    """Zone codes as stored in the low nibble of XZON."""
    NONE = 0
    LIGHT_RESIDENTIAL = 1
    DENSE_RESIDENTIAL = 2
    LIGHT_COMMERCIAL = 3
    DENSE_COMMERCIAL = 4
    LIGHT_INDUSTRIAL = 5
    DENSE_INDUSTRIAL = 6
    MILITARY_BASE = 7
    AIRPORT = 8
    SEAPORT = 9


class TileFlag(IntFlag):
    """XBIT bits. Bits 1 and 3 are unused."""
    SALTY = 0x01
    WATER_COVERED = 0x04
    WATER_SUPPLIED = 0x10
    PIPED = 0x20
    POWERED = 0x40
    CONDUCTIVE = 0x80


class BuildingCorner(IntFlag):
    """XZON high-nibble bits marking which corners of a building touch the tile."""
    TOP_RIGHT = 0x10
    BOTTOM_RIGHT = 0x20
    BOTTOM_LEFT = 0x40
    TOP_LEFT = 0x80


@dataclass
class Tile:
    """
    A single 1x1 city tile.

    A 1x1 building (a small park, say) has all four corner flags set; a tile
    in the middle of a 3x3 building has none.
    """
    x: int = 0
    y: int = 0
    altitude: int = 0

    is_salty: bool = False
    is_water_covered: bool = False
    is_water_supplied: bool = False
    is_piped: bool = False
    is_powered: bool = False
    is_conductive: bool = False

    underground: UndergroundItem = UndergroundItem.NONE
    zone: Zone = Zone.NONE

    has_corner_top_left: bool = False
    has_corner_top_right: bool = False
    has_corner_bottom_left: bool = False
    has_corner_bottom_right: bool = False

    building_code: Optional[int] = None
    building: Any = None

    # XLAB does not record which tile a sign belongs to, so this stays empty.
    sign_text: Optional[str] = None

    @property
    def flags(self) -> TileFlag:
        value = TileFlag(0)
        for flag, is_set in (
            (TileFlag.SALTY, self.is_salty),
            (TileFlag.WATER_COVERED, self.is_water_covered),
            (TileFlag.WATER_SUPPLIED, self.is_water_supplied),
            (TileFlag.PIPED, self.is_piped),
            (TileFlag.POWERED, self.is_powered),
            (TileFlag.CONDUCTIVE, self.is_conductive),
        ):
            if is_set:
                value |= flag
        return value

    @property
    def corners(self) -> BuildingCorner:
        value = BuildingCorner(0)
        for corner, is_set in (
            (BuildingCorner.TOP_LEFT, self.has_corner_top_left),
            (BuildingCorner.TOP_RIGHT, self.has_corner_top_right),
            (BuildingCorner.BOTTOM_LEFT, self.has_corner_bottom_left),
            (BuildingCorner.BOTTOM_RIGHT, self.has_corner_bottom_right),
        ):
            if is_set:
                value |= corner
        return value

    @property
    def has_pipe(self) -> bool:
        return self.underground in (UndergroundItem.PIPE, UndergroundItem.PIPE_AND_SUBWAY)

    @property
    def has_subway(self) -> bool:
        return self.underground in (UndergroundItem.SUBWAY, UndergroundItem.PIPE_AND_SUBWAY)

    @property
    def has_tunnel(self) -> bool:
        return self.underground is UndergroundItem.TUNNEL

    @property
    def has_subway_station(self) -> bool:
        return self.underground is UndergroundItem.SUBWAY_STATION

    @property
    def is_residential(self) -> bool:
        return self.zone in (Zone.LIGHT_RESIDENTIAL, Zone.DENSE_RESIDENTIAL)

    @property
    def is_commercial(self) -> bool:
        return self.zone in (Zone.LIGHT_COMMERCIAL, Zone.DENSE_COMMERCIAL)

    @property
    def is_industrial(self) -> bool:
        return self.zone in (Zone.LIGHT_INDUSTRIAL, Zone.DENSE_INDUSTRIAL)

    def to_dict(self) -> dict:
        """Plain-data view, used by the CLI's JSON output."""
        return {
            "x": self.x,
            "y": self.y,
            "altitude": self.altitude,
            "flags": {
                "salty": self.is_salty,
                "water_covered": self.is_water_covered,
                "water_supplied": self.is_water_supplied,
                "piped": self.is_piped,
                "powered": self.is_powered,
                "conductive": self.is_conductive,
            },
            "underground": self.underground.value,
            "zone": self.zone.name.lower(),
            "corners": {
                "top_left": self.has_corner_top_left,
                "top_right": self.has_corner_top_right,
                "bottom_left": self.has_corner_bottom_left,
                "bottom_right": self.has_corner_bottom_right,
            },
            "building_code": self.building_code,
        }

    def __str__(self) -> str:
        return f"Tile({self.x}, {self.y}) alt={self.altitude}m zone={self.zone.name}"
