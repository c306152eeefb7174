"""sc2kit formats package - file format parsers."""
from .sc2 import Sc2File, SegmentRecord, decode, read_city, validate, validate_file

__all__ = ['Sc2File', 'SegmentRecord', 'decode', 'read_city', 'validate', 'validate_file']
