"""Custom exception hierarchy for the PNG chunk steganography toolkit."""
from __future__ import annotations

from dataclasses import dataclass


class ChunkStegoError(Exception):
    """Base class for all chunkstego errors."""


@dataclass
class ChunkNotFoundError(ChunkStegoError):
    """Raised when a PNG file holds no chunk of the requested type."""

    chunk_type: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"no chunk of type '{self.chunk_type}' found"


__all__ = [
    "ChunkNotFoundError",
    "ChunkStegoError",
]
