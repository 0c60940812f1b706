"""Shared fixtures: a minimal 1x1 PNG written to a temporary directory."""

from __future__ import annotations

import struct
import zlib
from pathlib import Path

import pytest

from chunkstego.framing import Chunk, ChunkType, Png


def build_minimal_png() -> Png:
    ihdr = struct.pack(">IIBBBBB", 1, 1, 8, 0, 0, 0, 0)
    idat = zlib.compress(b"\x00\x00")
    return Png.from_chunks(
        [
            Chunk(ChunkType.from_string("IHDR"), ihdr),
            Chunk(ChunkType.from_string("IDAT"), idat),
            Chunk(ChunkType.from_string("IEND"), b""),
        ]
    )


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    path = tmp_path / "image.png"
    path.write_bytes(build_minimal_png().to_bytes())
    return path
