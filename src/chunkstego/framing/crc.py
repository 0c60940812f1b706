"""CRC helper functions."""

from __future__ import annotations

import zlib

CRC32_INITIAL = 0


def crc32(data: bytes, value: int = CRC32_INITIAL) -> int:
    """Compute the CRC-32/ISO-HDLC checksum of *data*.

    The checksum uses the same polynomial as :func:`zlib.crc32` and returns an
    unsigned 32-bit integer.  Passing a previous result as *value* continues
    the computation over concatenated input.
    """

    return zlib.crc32(data, value) & 0xFFFFFFFF


def chunk_crc(type_bytes: bytes, data: bytes) -> int:
    """Return the CRC of a chunk, computed over ``type_bytes ++ data``."""

    return crc32(data, crc32(type_bytes))
