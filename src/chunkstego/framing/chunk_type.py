"""Four-letter PNG chunk type codes."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import FormatError, TypeCodeError

CHUNK_TYPE_SIZE = 4

# Bit 5 of each type byte is the ASCII case bit.
_PROPERTY_BIT = 0x20


def _is_ascii_letter(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


@dataclass(frozen=True)
class ChunkType:
    """A validated chunk type code such as ``IHDR`` or ``teXt``.

    Each of the four letters carries one property in its case:

    ========  ==================  =======================
    byte      uppercase           lowercase
    ========  ==================  =======================
    0         critical            ancillary
    1         public              private
    2         reserved bit valid  reserved bit set
    3         unsafe to copy      safe to copy
    ========  ==================  =======================
    """

    code: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.code, (bytes, bytearray, memoryview)):
            raise TypeCodeError("chunk type must be a bytes-like object")
        code = bytes(self.code)
        if len(code) != CHUNK_TYPE_SIZE:
            raise TypeCodeError(f"chunk type must be {CHUNK_TYPE_SIZE} bytes, got {len(code)}")
        if not all(_is_ascii_letter(b) for b in code):
            raise TypeCodeError(f"chunk type {code!r} contains a byte that is not an ASCII letter")
        object.__setattr__(self, "code", code)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        return cls(raw)

    @classmethod
    def from_string(cls, text: str) -> "ChunkType":
        if not isinstance(text, str):
            raise FormatError("chunk type must be a string")
        if len(text) != CHUNK_TYPE_SIZE:
            raise FormatError(f"chunk type must be exactly {CHUNK_TYPE_SIZE} characters: {text!r}")
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError:
            raise FormatError(f"chunk type must be ASCII letters only: {text!r}") from None
        if not all(_is_ascii_letter(b) for b in raw):
            raise FormatError(f"chunk type must be ASCII letters only: {text!r}")
        return cls(raw)

    def raw_bytes(self) -> bytes:
        return self.code

    def is_critical(self) -> bool:
        return self.code[0] & _PROPERTY_BIT == 0

    def is_public(self) -> bool:
        return self.code[1] & _PROPERTY_BIT == 0

    def is_reserved_bit_valid(self) -> bool:
        return self.code[2] & _PROPERTY_BIT == 0

    def is_safe_to_copy(self) -> bool:
        return self.code[3] & _PROPERTY_BIT != 0

    def is_valid(self) -> bool:
        """Return ``True`` when the type is legal in a conforming PNG file."""

        return all(_is_ascii_letter(b) for b in self.code) and self.is_reserved_bit_valid()

    def __str__(self) -> str:
        return self.code.decode("ascii")
