"""PNG chunk steganography toolkit."""

from .exceptions import (
    ChunkNotFoundError,
    ChunkStegoError,
)
from .framing import Chunk, ChunkType, FramingError, Png

__all__ = [
    "Chunk",
    "ChunkNotFoundError",
    "ChunkStegoError",
    "ChunkType",
    "FramingError",
    "Png",
]
