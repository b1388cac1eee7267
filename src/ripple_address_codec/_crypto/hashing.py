"""Checksum helpers for base-58 identifiers.

The checksum is the first four bytes of a double SHA-256 over the
prefixed payload.
"""

from __future__ import annotations

import hashlib
import hmac

from ripple_address_codec._constants import CHECKSUM_LENGTH


def sha256_digest(data: bytes) -> bytes:
    """Compute the 32-byte SHA-256 digest of *data*.

    Parameters
    ----------
    data : bytes
        The bytes to hash.

    Returns
    -------
    bytes
        32-byte raw digest.
    """
    return hashlib.sha256(data).digest()


def compute_checksum(data: bytes) -> bytes:
    """Compute the 4-byte integrity tag appended to an identifier.

    Algorithm:
      1. SHA-256 digest of *data* -> 32 bytes
      2. SHA-256 digest of that digest -> 32 bytes
      3. Keep the first ``CHECKSUM_LENGTH`` (4) bytes

    Parameters
    ----------
    data : bytes
        Prefix followed by payload.

    Returns
    -------
    bytes
        4-byte checksum.
    """
    return sha256_digest(sha256_digest(data))[:CHECKSUM_LENGTH]


def verify_checksum(data: bytes, checksum: bytes) -> bool:
    """Return ``True`` when *checksum* matches the checksum of *data*.

    The claimed value is compared against a freshly computed one and
    is never overwritten.
    """
    if len(checksum) != CHECKSUM_LENGTH:
        return False
    return hmac.compare_digest(compute_checksum(data), checksum)
