"""Chunk framing for PNG files: type codes, chunks and the chunk container."""

from .errors import (
    FramingError,
    TypeCodeError,
    FormatError,
    ChunkTooLargeError,
    PayloadDecodeError,
    DecodeError,
    LengthMismatchError,
    ChecksumMismatchError,
    TruncatedInputError,
    SignatureMismatchError,
)
from .crc import crc32, chunk_crc
from .chunk_type import ChunkType
from .chunk import MAX_CHUNK_LENGTH, Chunk
from .png import Png

__all__ = [
    "FramingError",
    "TypeCodeError",
    "FormatError",
    "ChunkTooLargeError",
    "PayloadDecodeError",
    "DecodeError",
    "LengthMismatchError",
    "ChecksumMismatchError",
    "TruncatedInputError",
    "SignatureMismatchError",
    "crc32",
    "chunk_crc",
    "ChunkType",
    "MAX_CHUNK_LENGTH",
    "Chunk",
    "Png",
]
