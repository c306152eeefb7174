"""City model - what a decoded save file turns into."""
from .city import City, MapLayer, TILES_PER_SIDE, TILE_COUNT
from .tile import Tile, TileFlag, BuildingCorner, UndergroundItem, Zone
from .building import Building, BuildingFactory, default_building_factory
from .statistics import MiscStatistic, Industry, STATISTIC_INDEX, MAX_STATISTIC_INDEX

__all__ = [
    'City', 'MapLayer', 'TILES_PER_SIDE', 'TILE_COUNT',
    'Tile', 'TileFlag', 'BuildingCorner', 'UndergroundItem', 'Zone',
    'Building', 'BuildingFactory', 'default_building_factory',
    'MiscStatistic', 'Industry', 'STATISTIC_INDEX', 'MAX_STATISTIC_INDEX',
]
