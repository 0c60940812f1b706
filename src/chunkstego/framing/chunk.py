"""Chunk building and parsing utilities."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .chunk_type import CHUNK_TYPE_SIZE, ChunkType
from .crc import chunk_crc
from .errors import (
    ChecksumMismatchError,
    ChunkTooLargeError,
    LengthMismatchError,
    PayloadDecodeError,
    TruncatedInputError,
    TypeCodeError,
)

# Largest payload the 32-bit big-endian length field can describe.
MAX_CHUNK_LENGTH = 0xFFFFFFFF

_LENGTH_STRUCT = struct.Struct(">I")
_CRC_STRUCT = struct.Struct(">I")


@dataclass(frozen=True)
class Chunk:
    """A single length-prefixed, type-tagged and checksummed PNG record."""

    DATA_LENGTH_BYTES = _LENGTH_STRUCT.size
    CHUNK_TYPE_BYTES = CHUNK_TYPE_SIZE
    CRC_BYTES = _CRC_STRUCT.size
    OVERHEAD = DATA_LENGTH_BYTES + CHUNK_TYPE_BYTES + CRC_BYTES

    chunk_type: ChunkType
    data: bytes
    length: int = field(init=False)
    crc: int = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.chunk_type, ChunkType):
            raise TypeCodeError("chunk_type must be a ChunkType")
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("chunk data must be bytes")
        data = bytes(self.data)
        if len(data) > MAX_CHUNK_LENGTH:
            raise ChunkTooLargeError(
                f"chunk payload of {len(data)} bytes exceeds the {MAX_CHUNK_LENGTH} byte limit"
            )
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "length", len(data))
        object.__setattr__(self, "crc", chunk_crc(self.chunk_type.raw_bytes(), data))

    @classmethod
    def from_bytes(cls, raw: bytes, *, strict: bool = False) -> "Chunk":
        """Parse one encoded chunk record.

        *raw* must hold exactly one record: a big-endian length, the four type
        bytes, ``length`` payload bytes and a big-endian CRC.  With *strict*
        the type code must also pass :meth:`ChunkType.is_valid`.
        """

        raw = bytes(raw)
        if len(raw) < cls.OVERHEAD:
            raise TruncatedInputError(
                f"chunk record needs at least {cls.OVERHEAD} bytes, got {len(raw)}"
            )

        (length,) = _LENGTH_STRUCT.unpack_from(raw, 0)
        if len(raw) < cls.OVERHEAD + length:
            raise TruncatedInputError(
                f"chunk declares {length} data bytes but only {len(raw) - cls.OVERHEAD} are present"
            )

        type_start = cls.DATA_LENGTH_BYTES
        data_start = type_start + cls.CHUNK_TYPE_BYTES
        type_bytes = raw[type_start:data_start]
        data = raw[data_start:-cls.CRC_BYTES]
        if len(data) != length:
            raise LengthMismatchError(
                f"chunk declares {length} data bytes but the record holds {len(data)}"
            )

        # The CRC covers the raw type bytes, so a corrupted type is reported
        # as a checksum failure rather than as an illegal type code.
        (stored_crc,) = _CRC_STRUCT.unpack_from(raw, len(raw) - cls.CRC_BYTES)
        actual_crc = chunk_crc(type_bytes, data)
        if stored_crc != actual_crc:
            raise ChecksumMismatchError(
                f"CRC mismatch in {type_bytes!r} chunk: stored {stored_crc:#010x}, computed {actual_crc:#010x}"
            )

        chunk_type = ChunkType.from_bytes(type_bytes)
        if strict and not chunk_type.is_valid():
            raise TypeCodeError(f"chunk type '{chunk_type}' has the reserved bit set")

        return cls(chunk_type, data)

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                _LENGTH_STRUCT.pack(self.length),
                self.chunk_type.raw_bytes(),
                self.data,
                _CRC_STRUCT.pack(self.crc),
            )
        )

    def data_as_string(self) -> str:
        """Render the payload one Latin-1 code point per byte.

        This is a display helper: it never fails and does not decode UTF-8, so
        multi-byte sequences show up as several characters.  Use
        :meth:`data_as_utf8` for a validating decode.
        """

        return self.data.decode("latin-1")

    def data_as_utf8(self) -> str:
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadDecodeError(f"'{self.chunk_type}' chunk payload is not valid UTF-8") from exc

    def is_empty(self) -> bool:
        return self.length == 0

    def __str__(self) -> str:
        return "\n".join(
            [
                "Chunk {",
                f"  Length: {self.length}",
                f"  Type: {self.chunk_type}",
                f"  Data: {len(self.data)} bytes",
                f"  Message: {self.data_as_string()}",
                f"  Crc: {self.crc}",
                "}",
            ]
        )
