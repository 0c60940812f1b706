"""High level API for hiding messages in PNG chunks on disk."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .exceptions import ChunkNotFoundError
from .framing import Chunk, ChunkType, Png

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_png(path: PathLike, *, strict: bool = False) -> Png:
    """Read and decode the PNG file at *path*."""

    raw = Path(path).read_bytes()
    logger.debug("read %d bytes from %s", len(raw), path)
    return Png.from_bytes(raw, strict=strict)


def write_png(path: PathLike, png: Png) -> None:
    """Encode *png* and write it to *path*, replacing any existing file."""

    raw = png.to_bytes()
    Path(path).write_bytes(raw)
    logger.debug("wrote %d bytes to %s", len(raw), path)


def hide_message(
    png_path: PathLike,
    chunk_type: str,
    message: Union[str, bytes],
    *,
    output_path: Optional[PathLike] = None,
) -> Chunk:
    """Append a chunk carrying *message* and save the result.

    Text messages are stored as UTF-8.  The file is written to *output_path*,
    or back over *png_path* when no output is given.
    """

    ctype = ChunkType.from_string(chunk_type)
    if not ctype.is_valid():
        logger.warning("chunk type '%s' has the reserved bit set; PNG readers may reject it", ctype)

    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    png = read_png(png_path)
    chunk = Chunk(ctype, payload)
    png.append_chunk(chunk)

    destination = output_path if output_path is not None else png_path
    write_png(destination, png)
    logger.info("hid %d bytes in a '%s' chunk of %s", chunk.length, ctype, destination)
    return chunk


def find_messages(png_path: PathLike, chunk_type: str) -> List[Chunk]:
    """Return every chunk of *chunk_type* in storage order."""

    ctype = ChunkType.from_string(chunk_type)
    png = read_png(png_path)
    found = [chunk for chunk in png.chunks if chunk.chunk_type == ctype]
    logger.info("found %d '%s' chunk(s) in %s", len(found), ctype, png_path)
    return found


def remove_message(
    png_path: PathLike,
    chunk_type: str,
    *,
    output_path: Optional[PathLike] = None,
) -> Chunk:
    """Remove the first chunk of *chunk_type* and save the result.

    Raises :class:`ChunkNotFoundError` when the file holds no such chunk; the
    file is not rewritten in that case.
    """

    ctype = ChunkType.from_string(chunk_type)
    png = read_png(png_path)
    removed = png.remove_first_chunk(str(ctype))
    if removed is None:
        raise ChunkNotFoundError(str(ctype))

    destination = output_path if output_path is not None else png_path
    write_png(destination, png)
    logger.info("removed a '%s' chunk of %d bytes from %s", ctype, removed.length, destination)
    return removed


def list_chunks(png_path: PathLike) -> Tuple[Chunk, ...]:
    """Return all chunks of the PNG file at *png_path*."""

    return read_png(png_path).chunks


__all__ = [
    "find_messages",
    "hide_message",
    "list_chunks",
    "read_png",
    "remove_message",
    "write_png",
]
