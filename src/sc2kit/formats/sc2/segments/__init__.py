"""
SC2 segment decoders.

Importing this package registers every decoder with the segment registry.
"""
from .cnam import CNAM
from .misc import MISC
from .xlab import XLAB, LABEL_COUNT, LABEL_SLOT_SIZE, LABEL_TEXT_WIDTH
from .altm import ALTM, altitude_from_byte
from .xbit import XBIT, flags_from_byte
from .xund import XUND, UNDERGROUND_RANGES, underground_from_byte
from .xzon import XZON, ZONE_CODES, CORNER_MASKS, zone_from_byte, corners_from_byte
from .xbld import XBLD
from .maps import IntegerMap, INTEGER_MAP_SEGMENTS

__all__ = [
    'CNAM', 'MISC', 'XLAB', 'ALTM', 'XBIT', 'XUND', 'XZON', 'XBLD', 'IntegerMap',
    'LABEL_COUNT', 'LABEL_SLOT_SIZE', 'LABEL_TEXT_WIDTH',
    'altitude_from_byte', 'flags_from_byte',
    'UNDERGROUND_RANGES', 'underground_from_byte',
    'ZONE_CODES', 'CORNER_MASKS', 'zone_from_byte', 'corners_from_byte',
    'INTEGER_MAP_SEGMENTS',
]
