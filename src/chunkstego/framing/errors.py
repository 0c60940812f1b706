"""Exception types for the chunk framing subsystem."""

from __future__ import annotations

from ..exceptions import ChunkStegoError


class FramingError(ChunkStegoError):
    """Base class for chunk codec errors."""


class TypeCodeError(FramingError):
    """Raised when chunk type bytes are not four ASCII letters."""


class FormatError(TypeCodeError):
    """Raised when a chunk type string is not exactly four ASCII letters."""


class ChunkTooLargeError(FramingError):
    """Raised when a payload does not fit the 32-bit length field."""


class PayloadDecodeError(FramingError):
    """Raised when a payload is requested as UTF-8 but is not valid UTF-8."""


class DecodeError(FramingError):
    """Base class for errors raised while decoding encoded bytes."""


class LengthMismatchError(DecodeError):
    """Raised when the declared length disagrees with the payload present."""


class ChecksumMismatchError(DecodeError):
    """Raised when the stored CRC differs from the recomputed one."""


class TruncatedInputError(DecodeError):
    """Raised when fewer bytes remain than a well-formed record requires."""


class SignatureMismatchError(DecodeError):
    """Raised when a buffer does not start with the PNG signature."""
