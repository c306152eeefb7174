"""
XLAB - Labels

Compressed. 256 fixed slots of 25 bytes: a length byte followed by a
24-byte, zero-padded text area. Slot 0 is the mayor's name; the rest are
sign texts. Slots do not say which tile their sign stands on.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..base import SegmentDecoder, register_segment
from ..errors import MalformedSegmentError

if TYPE_CHECKING:
    from ....entities.city import City
    from ....utils.binary import IoBuffer


LABEL_COUNT = 256
LABEL_TEXT_WIDTH = 24
LABEL_SLOT_SIZE = 1 + LABEL_TEXT_WIDTH
MAYOR_SLOT = 0


@register_segment("XLAB")
@dataclass
class XLAB(SegmentDecoder):
    """Mayor name and sign texts."""

    def read(self, city: 'City', io: 'IoBuffer', quick: bool = False):
        slot_count = 1 if quick else LABEL_COUNT
        needed = slot_count * LABEL_SLOT_SIZE
        if io.remaining < needed:
            raise MalformedSegmentError(
                f"Label payload has {io.remaining} bytes, {slot_count} slots need {needed}"
            )

        for slot in range(slot_count):
            text = self.read_slot(io, slot)
            if slot == MAYOR_SLOT:
                city.mayor_name = text
            elif text:
                city.add_sign_text(text)

    @staticmethod
    def read_slot(io: 'IoBuffer', slot: int) -> str:
        """Read one 25-byte slot and return its text."""
        length = io.read_byte()
        if length > LABEL_TEXT_WIDTH:
            raise MalformedSegmentError(
                f"Label slot {slot} claims {length} characters, slots hold {LABEL_TEXT_WIDTH}"
            )
        text = io.read_cstring(length, trim_null=True)
        io.skip(LABEL_TEXT_WIDTH - length)
        return text
