"""
sc2kit - reader for SimCity 2000 city save files.

    from sc2kit import read_city, MiscStatistic

    city = read_city("dustropolis.sc2")
    print(city.city_name, city.get_statistic(MiscStatistic.AVAILABLE_FUNDS))
"""
from .formats.sc2 import (
    Sc2File, SegmentRecord, decode, read_city, validate, validate_file,
    CityDecodeError, InvalidContainerError, MalformedSegmentError,
    CompressionError, TileRangeError, StatisticIndexError,
)
from .entities import (
    City, MapLayer, Tile, TileFlag, BuildingCorner, UndergroundItem, Zone,
    Building, MiscStatistic, Industry, TILES_PER_SIDE, TILE_COUNT,
)

__version__ = "1.0.0"

__all__ = [
    'Sc2File', 'SegmentRecord', 'decode', 'read_city', 'validate', 'validate_file',
    'CityDecodeError', 'InvalidContainerError', 'MalformedSegmentError',
    'CompressionError', 'TileRangeError', 'StatisticIndexError',
    'City', 'MapLayer', 'Tile', 'TileFlag', 'BuildingCorner', 'UndergroundItem', 'Zone',
    'Building', 'MiscStatistic', 'Industry', 'TILES_PER_SIDE', 'TILE_COUNT',
]
