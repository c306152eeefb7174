"""
CNAM - City name

Uncompressed. A 1-byte length, then that many ASCII bytes. Whatever follows
up to the declared segment length is padding. The name itself often carries
junk after a NUL, so it is cut at the first one.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import SegmentDecoder, register_segment
from ..errors import MalformedSegmentError

if TYPE_CHECKING:
    from ....entities.city import City
    from ....utils.binary import IoBuffer


@register_segment("CNAM")
@dataclass
class CNAM(SegmentDecoder):
    """City name segment."""
    compressed = False

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        segment_length = io.remaining
        if segment_length < 1:
            raise MalformedSegmentError("Empty city name segment")

        name_length = io.read_byte()
        if name_length > segment_length - 1:
            raise MalformedSegmentError(
                f"City name length {name_length} exceeds segment length {segment_length}"
            )

        city.city_name = io.read_cstring(name_length, trim_null=True)

        # Ignore padding at the end of the name.
        io.skip(segment_length - name_length - 1)
