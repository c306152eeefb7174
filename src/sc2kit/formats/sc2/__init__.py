"""SC2 format package - SimCity 2000 city save files."""
from .sc2_file import Sc2File, SegmentRecord, QUICK_SEGMENTS, decode, read_city
from .base import SegmentDecoder, TileSegmentDecoder, register_segment, get_decoder_class, SEGMENT_DECODERS
from .validator import validate, validate_file, check_container, HEADER_SIZE, MAX_FILE_SIZE
from .rle import decompress, read_compressed
from .tile_iterator import TileIterator
from .errors import (
    CityDecodeError, InvalidContainerError, MalformedSegmentError,
    CompressionError, TileRangeError, StatisticIndexError,
)

__all__ = [
    'Sc2File', 'SegmentRecord', 'QUICK_SEGMENTS', 'decode', 'read_city',
    'SegmentDecoder', 'TileSegmentDecoder', 'register_segment', 'get_decoder_class', 'SEGMENT_DECODERS',
    'validate', 'validate_file', 'check_container', 'HEADER_SIZE', 'MAX_FILE_SIZE',
    'decompress', 'read_compressed',
    'TileIterator',
    'CityDecodeError', 'InvalidContainerError', 'MalformedSegmentError',
    'CompressionError', 'TileRangeError', 'StatisticIndexError',
]
