"""Identifier formats: prefix and payload length per identifier kind.

Each :class:`IdentifierFormat` instance is static configuration.  The
codec engine is parameterised by one of these descriptors and never
mutates it.
"""

from __future__ import annotations

import enum

from pydantic import Field, field_validator

from ripple_address_codec._constants import ACCOUNT_ID_LENGTH, CHECKSUM_LENGTH, ENTROPY_LENGTH
from ripple_address_codec.models._base import CodecBaseModel

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class Algorithm(enum.StrEnum):
    """Signature algorithm a seed is intended to be used with."""

    SECP256K1 = "secp256k1"
    ED25519 = "ed25519"

    @classmethod
    def default(cls) -> Algorithm:
        """Return the algorithm assumed when none is given (secp256k1)."""
        return cls.SECP256K1


class IdentifierKind(enum.StrEnum):
    """Kinds of identifier the codec knows how to frame."""

    ACCOUNT_ID = "account_id"
    SECP256K1_SEED = "secp256k1_seed"
    ED25519_SEED = "ed25519_seed"


# ------------------------------------------------------------------
# Descriptor
# ------------------------------------------------------------------


class IdentifierFormat(CodecBaseModel):
    """Byte-level framing for one identifier kind.

    The framed byte sequence is ``prefix + payload + checksum``.
    """

    kind: IdentifierKind
    prefix: bytes = b""
    payload_length: int = Field(gt=0)

    @field_validator("prefix", mode="before")
    @classmethod
    def _coerce_prefix(cls, value: object) -> object:
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @property
    def prefix_length(self) -> int:
        return len(self.prefix)

    @property
    def minimum_length(self) -> int:
        """Shortest decoded buffer that may be sliced safely."""
        return self.prefix_length + CHECKSUM_LENGTH + 1

    @property
    def encoded_length(self) -> int:
        """Exact decoded buffer length for a well-formed identifier."""
        return self.prefix_length + self.payload_length + CHECKSUM_LENGTH


ACCOUNT_ID = IdentifierFormat(
    kind=IdentifierKind.ACCOUNT_ID,
    prefix=b"\x00",
    payload_length=ACCOUNT_ID_LENGTH,
)

SEED_SECP256K1 = IdentifierFormat(
    kind=IdentifierKind.SECP256K1_SEED,
    prefix=b"\x21",
    payload_length=ENTROPY_LENGTH,
)

SEED_ED25519 = IdentifierFormat(
    kind=IdentifierKind.ED25519_SEED,
    prefix=b"\x01\xe1\x4b",
    payload_length=ENTROPY_LENGTH,
)

FORMATS: dict[IdentifierKind, IdentifierFormat] = {
    fmt.kind: fmt for fmt in (ACCOUNT_ID, SEED_SECP256K1, SEED_ED25519)
}

# Seed decoding tries these in order and reports the last failure.
SEED_FORMATS: tuple[tuple[Algorithm, IdentifierFormat], ...] = (
    (Algorithm.SECP256K1, SEED_SECP256K1),
    (Algorithm.ED25519, SEED_ED25519),
)


def format_for_algorithm(algorithm: Algorithm) -> IdentifierFormat:
    """Return the seed descriptor for *algorithm*.

    Raises :class:`KeyError` if *algorithm* has no seed format.
    """
    for candidate, fmt in SEED_FORMATS:
        if candidate == algorithm:
            return fmt
    raise KeyError(algorithm)
