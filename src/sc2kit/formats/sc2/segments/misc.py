"""
MISC - Miscellaneous statistics

Compressed. A flat run of big-endian signed 32-bit integers (about 1200 of
them). Most positions are still unidentified; the ones with known meanings
are listed in entities.statistics.STATISTIC_INDEX.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import SegmentDecoder, register_segment
from ..errors import MalformedSegmentError, StatisticIndexError
from ....entities.statistics import STATISTIC_INDEX, MAX_STATISTIC_INDEX

if TYPE_CHECKING:
    from ....entities.city import City
    from ....utils.binary import IoBuffer


logger = logging.getLogger(__name__)


@register_segment("MISC")
@dataclass
class MISC(SegmentDecoder):
    """Statistics segment."""

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        payload_length = io.remaining
        if payload_length % 4:
            raise MalformedSegmentError(
                f"Statistics payload of {payload_length} bytes is not a whole number of 32-bit integers"
            )

        values = io.read_int32_array(payload_length // 4)
        if len(values) <= MAX_STATISTIC_INDEX:
            raise StatisticIndexError(
                f"MISC holds {len(values)} integers but statistic index {MAX_STATISTIC_INDEX} is mapped"
            )

        city.set_misc_values(values)
        for statistic, index in STATISTIC_INDEX.items():
            city.set_statistic(statistic, values[index])

        logger.debug(f"MISC: {len(values)} integers, {len(STATISTIC_INDEX)} named")
