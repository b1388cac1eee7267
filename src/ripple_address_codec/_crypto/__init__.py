"""Cryptographic primitives for identifier checksums."""

from __future__ import annotations

from ripple_address_codec._crypto.hashing import compute_checksum, sha256_digest, verify_checksum

__all__ = [
    "compute_checksum",
    "sha256_digest",
    "verify_checksum",
]
