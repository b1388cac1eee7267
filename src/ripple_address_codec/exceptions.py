"""Custom exception hierarchy for ripple_address_codec."""

from __future__ import annotations


class CodecError(Exception):
    """Base exception for all ripple_address_codec errors."""


class DecodeError(CodecError):
    """An encoded identifier could not be decoded.

    Raised for a bad alphabet symbol, a wrong decoded length, a wrong
    prefix, or a checksum mismatch.  The message is the same in every
    case so callers cannot tell which check rejected the input.
    """

    def __init__(self, message: str = "decode error") -> None:
        super().__init__(message)


class EncodeError(CodecError, ValueError):
    """Invalid arguments passed to an encode function (wrong payload size or type)."""
