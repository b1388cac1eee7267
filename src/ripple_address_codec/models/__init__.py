"""Identifier format descriptors."""

from ripple_address_codec.models._base import CodecBaseModel
from ripple_address_codec.models.formats import (
    ACCOUNT_ID,
    FORMATS,
    SEED_ED25519,
    SEED_FORMATS,
    SEED_SECP256K1,
    Algorithm,
    IdentifierFormat,
    IdentifierKind,
    format_for_algorithm,
)

__all__ = [
    "ACCOUNT_ID",
    "Algorithm",
    "CodecBaseModel",
    "FORMATS",
    "IdentifierFormat",
    "IdentifierKind",
    "SEED_ED25519",
    "SEED_FORMATS",
    "SEED_SECP256K1",
    "format_for_algorithm",
]
