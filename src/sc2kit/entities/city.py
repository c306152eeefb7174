"""
City - aggregate root for one decoded save.

Owns the 128x128 tile grid, the per-tile integer maps, the MISC statistics
and the label strings. Decoders write through the setters below; callers
read through the getters. Nothing here knows about the file format.
"""

from enum import Enum
from typing import Iterator, Optional, Sequence, Union

import numpy as np

from .building import BuildingFactory, default_building_factory
from .statistics import MiscStatistic
from .tile import BuildingCorner, Tile, TileFlag, UndergroundItem, Zone


TILES_PER_SIDE = 128
TILE_COUNT = TILES_PER_SIDE * TILES_PER_SIDE


class MapLayer(Enum):
    """Integer-only map layers, keyed by the segment they come from."""
    POLICE = "XPLC"
    FIRE = "XFIR"
    POPULATION = "XPOP"
    POPULATION_GROWTH = "XROG"
    TRAFFIC = "XTRF"
    POLLUTION = "XPLT"
    PROPERTY_VALUE = "XVAL"
    CRIME = "XCRM"

    @classmethod
    def resolve(cls, key: Union['MapLayer', str]) -> 'MapLayer':
        """Accept a MapLayer, a segment tag ("XPLT") or a name ("pollution")."""
        if isinstance(key, cls):
            return key
        text = str(key).upper()
        for layer in cls:
            if text in (layer.value, layer.name):
                return layer
        raise KeyError(f"Unknown map layer: {key!r}")


class City:
    """
    A simulated city.

    Tiles are addressed as (x, y) with 0 <= x, y < TILES_PER_SIDE and stored
    in raster order, so tile (x, y) sits at index ``x + y * TILES_PER_SIDE``
    just like every per-tile segment and every named map.
    """

    def __init__(self, building_factory: Optional[BuildingFactory] = None):
        self.city_name: str = ""
        self.mayor_name: str = ""
        self.building_factory: BuildingFactory = building_factory or default_building_factory

        self._tiles: list[Tile] = [
            Tile(x=i % TILES_PER_SIDE, y=i // TILES_PER_SIDE) for i in range(TILE_COUNT)
        ]
        self._maps: dict[MapLayer, np.ndarray] = {}
        self._misc_values: tuple[int, ...] = ()
        self._statistics: dict[MiscStatistic, int] = {}
        self._signs: list[str] = []

    # ------------------------------------------------------------------ tiles

    @staticmethod
    def _index(x: int, y: int) -> int:
        if not (0 <= x < TILES_PER_SIDE and 0 <= y < TILES_PER_SIDE):
            raise IndexError(f"Tile ({x}, {y}) is outside the {TILES_PER_SIDE}x{TILES_PER_SIDE} grid")
        return x + y * TILES_PER_SIDE

    def get_tile(self, x: int, y: int) -> Tile:
        """Get the tile at (x, y)."""
        return self._tiles[self._index(x, y)]

    @property
    def tiles(self) -> Iterator[Tile]:
        """All tiles in raster order."""
        return iter(self._tiles)

    def set_tile_flags(self, x: int, y: int, flags: TileFlag):
        """Set the six XBIT utility flags for the tile at (x, y)."""
        tile = self.get_tile(x, y)
        tile.is_salty = bool(flags & TileFlag.SALTY)
        tile.is_water_covered = bool(flags & TileFlag.WATER_COVERED)
        tile.is_water_supplied = bool(flags & TileFlag.WATER_SUPPLIED)
        tile.is_piped = bool(flags & TileFlag.PIPED)
        tile.is_powered = bool(flags & TileFlag.POWERED)
        tile.is_conductive = bool(flags & TileFlag.CONDUCTIVE)

    def set_underground_item(self, x: int, y: int, item: UndergroundItem):
        self.get_tile(x, y).underground = item

    def set_zone(self, x: int, y: int, zone: Zone):
        self.get_tile(x, y).zone = zone

    def set_building_corners(self, x: int, y: int, corners: BuildingCorner):
        """Mark which building corners fall on the tile at (x, y)."""
        tile = self.get_tile(x, y)
        tile.has_corner_top_left = bool(corners & BuildingCorner.TOP_LEFT)
        tile.has_corner_top_right = bool(corners & BuildingCorner.TOP_RIGHT)
        tile.has_corner_bottom_left = bool(corners & BuildingCorner.BOTTOM_LEFT)
        tile.has_corner_bottom_right = bool(corners & BuildingCorner.BOTTOM_RIGHT)

    def set_building(self, x: int, y: int, code: int):
        """Store the raw building code and whatever the factory makes of it."""
        tile = self.get_tile(x, y)
        tile.building_code = code
        tile.building = self.building_factory(code, x, y)

    def set_altitude(self, x: int, y: int, altitude: int):
        """Set altitude in meters."""
        self.get_tile(x, y).altitude = altitude

    # ------------------------------------------------------------------- maps

    def set_map(self, layer: Union[MapLayer, str], values: Union[bytes, Sequence[int], np.ndarray]):
        """Store one full integer map (TILE_COUNT values, raster order)."""
        layer = MapLayer.resolve(layer)
        if isinstance(values, (bytes, bytearray)):
            data = np.frombuffer(values, dtype=np.uint8).copy()
        else:
            data = np.array(values, dtype=np.uint8).reshape(-1)
        if data.size != TILE_COUNT:
            raise ValueError(f"{layer.name} map needs {TILE_COUNT} values, got {data.size}")
        data.setflags(write=False)
        self._maps[layer] = data

    def has_map(self, layer: Union[MapLayer, str]) -> bool:
        return MapLayer.resolve(layer) in self._maps

    def get_map(self, layer: Union[MapLayer, str]) -> np.ndarray:
        """
        Get a map as a flat, read-only uint8 array in raster order.

        Raises:
            KeyError: If the layer is unknown or was not in the file
        """
        layer = MapLayer.resolve(layer)
        if layer not in self._maps:
            raise KeyError(f"City has no {layer.name} map")
        return self._maps[layer]

    def get_map_grid(self, layer: Union[MapLayer, str]) -> np.ndarray:
        """Same data as get_map(), shaped [y, x]."""
        return self.get_map(layer).reshape(TILES_PER_SIDE, TILES_PER_SIDE)

    @property
    def map_layers(self) -> list[MapLayer]:
        return list(self._maps)

    # ------------------------------------------------------------- statistics

    def set_misc_values(self, values: Sequence[int]):
        """Record the full MISC integer array."""
        self._misc_values = tuple(values)

    @property
    def misc_values(self) -> tuple[int, ...]:
        return self._misc_values

    def get_misc_value(self, index: int) -> int:
        """Raw MISC integer by position, for indices the statistic table does not name."""
        if not 0 <= index < len(self._misc_values):
            raise IndexError(f"MISC index {index} out of range (have {len(self._misc_values)} values)")
        return self._misc_values[index]

    def set_statistic(self, key: MiscStatistic, value: int):
        self._statistics[key] = value

    def has_statistic(self, key: MiscStatistic) -> bool:
        return key in self._statistics

    def get_statistic(self, key: MiscStatistic) -> int:
        """
        Get a named statistic.

        Raises:
            KeyError: If MISC was never decoded
        """
        if key not in self._statistics:
            raise KeyError(f"City has no statistic {key.name}")
        return self._statistics[key]

    @property
    def statistics(self) -> dict[MiscStatistic, int]:
        return dict(self._statistics)

    # ----------------------------------------------------------------- labels

    def add_sign_text(self, text: str):
        """Record user-generated sign text."""
        self._signs.append(text)

    @property
    def sign_texts(self) -> list[str]:
        return list(self._signs)

    def __str__(self) -> str:
        name = self.city_name or "<unnamed>"
        return f"City {name!r} (mayor {self.mayor_name!r}, {len(self._maps)} maps, {len(self._statistics)} statistics)"
