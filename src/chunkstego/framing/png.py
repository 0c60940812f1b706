"""The PNG chunk container: a fixed signature followed by ordered chunks."""

from __future__ import annotations

import struct
from typing import Iterable, List, Optional, Tuple

from .chunk import Chunk
from .errors import SignatureMismatchError, TruncatedInputError

_LENGTH_STRUCT = struct.Struct(">I")


class Png:
    """An ordered sequence of chunks behind the 8-byte PNG signature."""

    STANDARD_HEADER = b"\x89PNG\r\n\x1a\n"

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None) -> None:
        self._chunks: List[Chunk] = []
        for chunk in chunks or ():
            self.append_chunk(chunk)

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> "Png":
        return cls(chunks)

    @classmethod
    def from_bytes(cls, data: bytes, *, strict: bool = False) -> "Png":
        """Decode a complete PNG byte buffer.

        Every record must be well formed; the first failing chunk aborts the
        whole decode and its error propagates unchanged.
        """

        data = bytes(data)
        header_size = len(cls.STANDARD_HEADER)
        if data[:header_size] != cls.STANDARD_HEADER:
            raise SignatureMismatchError(
                f"expected PNG signature {cls.STANDARD_HEADER!r}, got {data[:header_size]!r}"
            )

        chunks: List[Chunk] = []
        offset = header_size
        total = len(data)
        while offset < total:
            remaining = total - offset
            if remaining < Chunk.OVERHEAD:
                raise TruncatedInputError(
                    f"{remaining} trailing bytes at offset {offset} are too short for a chunk"
                )
            (length,) = _LENGTH_STRUCT.unpack_from(data, offset)
            end = offset + Chunk.OVERHEAD + length
            if end > total:
                raise TruncatedInputError(
                    f"chunk at offset {offset} declares {length} data bytes, past the end of input"
                )
            chunks.append(Chunk.from_bytes(data[offset:end], strict=strict))
            offset = end

        return cls(chunks)

    @property
    def header(self) -> bytes:
        return self.STANDARD_HEADER

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        if not isinstance(chunk, Chunk):
            raise TypeError("only Chunk instances can be appended")
        self._chunks.append(chunk)

    def remove_first_chunk(self, chunk_type: str) -> Optional[Chunk]:
        """Remove the first chunk whose type renders as *chunk_type*.

        Returns the removed chunk, or ``None`` when no chunk matched.
        """

        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return self._chunks.pop(index)
        return None

    def to_bytes(self) -> bytes:
        return self.STANDARD_HEADER + b"".join(chunk.to_bytes() for chunk in self._chunks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __repr__(self) -> str:
        types = ", ".join(str(chunk.chunk_type) for chunk in self._chunks)
        return f"Png(chunks=[{types}])"

    def __str__(self) -> str:
        lines = [f"Png {{ {len(self._chunks)} chunks"]
        lines.extend(str(chunk) for chunk in self._chunks)
        lines.append("}")
        return "\n".join(lines)
