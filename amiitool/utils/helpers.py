"""Helper utility functions."""

from typing import BinaryIO

from ..models import AMIIBO_SIZE, NTAG_SIZE, BufferTooSmallError


def read_dump(stream: BinaryIO, max_size: int = NTAG_SIZE) -> bytes:
    """Read a dump of at least 520 and at most max_size bytes.

    Args:
        stream: Binary stream to read from

    Returns:
        The bytes read

    Raises:
        BufferTooSmallError: if fewer than 520 bytes are available
    """
    data = bytearray()
    while len(data) < max_size:
        chunk = stream.read(max_size - len(data))
        if not chunk:
            break
        data += chunk

    if len(data) < AMIIBO_SIZE:
        raise BufferTooSmallError("input", len(data), AMIIBO_SIZE)
    return bytes(data)


def merge_trailing(transformed: bytes, original: bytes) -> bytes:
    """Append the bytes of original past the transformed record.

    Pages beyond the 520-byte record are not authenticated and are copied
    verbatim from the input dump.
    """
    return transformed[:AMIIBO_SIZE] + original[AMIIBO_SIZE:]
