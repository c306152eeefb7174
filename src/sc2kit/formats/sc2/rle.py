"""
SC2 run-length decompression.

Most SC2 segments are packed with a byte-oriented run-length scheme made of
two block kinds, each introduced by a control byte:

  - 0x00-0x7E: literal block. The control byte is a count ``n``; the next
    ``n`` bytes are copied through unchanged.
  - 0x7F-0xFF: repeat block. ``control - 127`` copies (0-128) of the single
    byte that follows. 0x7F is a legal block that produces nothing.

The compressed length is known up front from the segment header, so the
decoder runs until that budget is spent. There is no end marker.
"""

from .errors import CompressionError
from ...utils.binary import IoBuffer


REPEAT_THRESHOLD = 127


def decompress(data: bytes) -> bytes:
    """
    Decompress a complete run-length encoded payload.

    Args:
        data: Exactly the compressed bytes of one segment

    Returns:
        Decompressed bytes

    Raises:
        CompressionError: If a block needs bytes past the end of ``data``
    """
    output = bytearray()
    pos = 0
    end = len(data)

    while pos < end:
        control = data[pos]
        pos += 1

        if control < REPEAT_THRESHOLD:
            if pos + control > end:
                raise CompressionError(
                    f"Literal block of {control} bytes at offset {pos - 1} "
                    f"overruns compressed length {end}"
                )
            output += data[pos:pos + control]
            pos += control
        else:
            if pos >= end:
                raise CompressionError(
                    f"Repeat block at offset {pos - 1} is missing its fill byte"
                )
            output += bytes((data[pos],)) * (control - REPEAT_THRESHOLD)
            pos += 1

    return bytes(output)


def read_compressed(io: IoBuffer, length: int) -> bytes:
    """Read ``length`` compressed bytes from ``io`` and decompress them."""
    return decompress(io.read_bytes(length))
