"""Binary I/O utilities for SC2 parsing."""

import struct
from enum import Enum
from typing import BinaryIO
from io import BytesIO


class ByteOrder(Enum):
    """Byte order enum for struct unpacking."""
    BIG_ENDIAN = ">"
    LITTLE_ENDIAN = "<"


class IoBuffer:
    """
    Binary reader with endian support.

    Every read is exact: asking for more bytes than the stream still holds
    raises EOFError instead of returning a short result.
    """

    def __init__(self, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN):
        self.stream = stream
        self.byte_order = byte_order

    @classmethod
    def from_bytes(cls, data: bytes, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> 'IoBuffer':
        """Create from bytes."""
        return cls(BytesIO(data), byte_order)

    @classmethod
    def from_stream(cls, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> 'IoBuffer':
        """Wrap an already open, seekable binary stream."""
        return cls(stream, byte_order)

    @property
    def position(self) -> int:
        """Current position in stream."""
        return self.stream.tell()

    @position.setter
    def position(self, value: int):
        """Seek to position."""
        self.stream.seek(value)

    @property
    def length(self) -> int:
        """Total stream length in bytes."""
        current = self.stream.tell()
        end = self.stream.seek(0, 2)
        self.stream.seek(current)
        return end

    @property
    def remaining(self) -> int:
        """Bytes left between the current position and the end."""
        return self.length - self.position

    def has_bytes(self, num_bytes: int) -> bool:
        """Check if there are at least num_bytes remaining."""
        return self.remaining >= num_bytes

    def skip(self, num_bytes: int):
        """Skip bytes from current position."""
        if not self.has_bytes(num_bytes):
            raise EOFError(f"Cannot skip {num_bytes} bytes at offset {self.position}: only {self.remaining} left")
        self.stream.seek(num_bytes, 1)

    def read_bytes(self, count: int) -> bytes:
        """Read exactly count raw bytes."""
        data = self.stream.read(count)
        if len(data) != count:
            raise EOFError(f"Wanted {count} bytes at offset {self.position - len(data)}, got {len(data)}")
        return data

    def read_byte(self) -> int:
        """Read single byte (0-255)."""
        return self.read_bytes(1)[0]

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        fmt = f"{self.byte_order.value}I"
        return struct.unpack(fmt, self.read_bytes(4))[0]

    def read_int32_array(self, count: int) -> list[int]:
        """Read count signed 32-bit integers in one go."""
        fmt = f"{self.byte_order.value}{count}i"
        return list(struct.unpack(fmt, self.read_bytes(4 * count)))

    def read_cstring(self, length: int, trim_null: bool = True) -> str:
        """Read fixed-length ASCII string."""
        data = self.read_bytes(length)
        result = data.decode('ascii', errors='replace')
        if trim_null:
            null_idx = result.find('\0')
            if null_idx != -1:
                result = result[:null_idx]
        return result
