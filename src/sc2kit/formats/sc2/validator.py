"""
SC2 container validation.

A quick look at the 12-byte header and the overall size, used to decide
whether a stream is worth decoding at all. The stream is always rewound to
offset 0 afterwards so the caller can read it from the start.

Header layout (big endian):
  - "FORM" (4 bytes)
  - Declared length of the rest of the file (4 bytes, not checked)
  - "SCDH" (4 bytes)
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union

from .errors import InvalidContainerError


logger = logging.getLogger(__name__)

HEADER_SIZE = 12
FORM_SIGNATURE = b"FORM"
CONTAINER_TYPE = b"SCDH"

# Real saves are well under this; anything bigger is rejected without reading it.
MAX_FILE_SIZE = 307200


def _stream_length(stream: BinaryIO) -> int:
    stream.seek(0, 2)
    return stream.tell()


def check_container(stream: BinaryIO) -> int:
    """
    Check size bounds and magic bytes of a seekable stream.

    Returns:
        The declared container length from bytes 4-7

    Raises:
        InvalidContainerError: Naming the first check that failed
    """
    try:
        size = _stream_length(stream)
        if size <= HEADER_SIZE:
            raise InvalidContainerError(f"File too small for an SC2 header ({size} bytes)")
        if size > MAX_FILE_SIZE:
            raise InvalidContainerError(f"File too large for an SC2 city ({size} bytes, limit {MAX_FILE_SIZE})")

        stream.seek(0)
        header = stream.read(HEADER_SIZE)
        signature, declared, container_type = header[0:4], header[4:8], header[8:12]

        if signature != FORM_SIGNATURE:
            raise InvalidContainerError(f"Invalid IFF signature: {signature!r}")
        if container_type != CONTAINER_TYPE:
            raise InvalidContainerError(f"Not a city file, container type is {container_type!r}")

        return int.from_bytes(declared, "big")
    finally:
        stream.seek(0)


def validate(stream: BinaryIO) -> bool:
    """Determine if ``stream`` looks like SC2 data. Leaves it at offset 0."""
    try:
        check_container(stream)
    except InvalidContainerError as e:
        logger.debug(f"Validation failed: {e}")
        return False
    return True


def validate_file(path: Union[str, Path]) -> bool:
    """Open ``path`` and run validate() on it."""
    with open(path, 'rb') as f:
        return validate(f)
