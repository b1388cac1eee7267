"""Encode and decode XRP Ledger account IDs and seeds.

An identifier is framed as ``prefix + payload + checksum`` and rendered
with the ledger's base-58 alphabet.  Decoding reverses the transform and
validates, in order, the length, the prefix and the checksum before
returning the payload.
"""

from __future__ import annotations

import logging
import secrets

import base58

from ripple_address_codec._constants import (
    ACCOUNT_ID_LENGTH,
    ALPHABET,
    ALPHABET_SYMBOLS,
    CHECKSUM_LENGTH,
    ENTROPY_LENGTH,
)
from ripple_address_codec._crypto.hashing import compute_checksum, verify_checksum
from ripple_address_codec._redact import redact_for_log
from ripple_address_codec.exceptions import DecodeError, EncodeError
from ripple_address_codec.models.formats import (
    ACCOUNT_ID,
    SEED_FORMATS,
    Algorithm,
    IdentifierFormat,
    format_for_algorithm,
)

_logger = logging.getLogger(__name__)

_ALPHABET_BYTES = ALPHABET.encode("ascii")


# ------------------------------------------------------------------
# Base-58 transform
# ------------------------------------------------------------------


def _encode_with_alphabet(data: bytes) -> str:
    return base58.b58encode(data, alphabet=_ALPHABET_BYTES).decode("ascii")


def _decode_with_alphabet(encoded: str) -> bytes:
    # base58 strips surrounding whitespace; reject anything off-alphabet first.
    if not isinstance(encoded, str) or not ALPHABET_SYMBOLS.issuperset(encoded):
        raise DecodeError()
    try:
        return base58.b58decode(encoded, alphabet=_ALPHABET_BYTES)
    except ValueError:
        raise DecodeError() from None


# ------------------------------------------------------------------
# Codec engine
# ------------------------------------------------------------------


def _as_payload(payload: bytes, *, expected_length: int, name: str) -> bytes:
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise EncodeError(f"{name} must be bytes-like (got {type(payload).__name__})")
    data = bytes(payload)
    if len(data) != expected_length:
        raise EncodeError(f"{name} must be {expected_length} bytes (got {len(data)})")
    return data


def _get_payload(raw: bytes, fmt: IdentifierFormat) -> bytes:
    # Length first: nothing below may slice a short buffer.
    if len(raw) < fmt.minimum_length or len(raw) != fmt.encoded_length:
        raise DecodeError()

    if not raw.startswith(fmt.prefix):
        raise DecodeError()

    body, checksum = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if not verify_checksum(body, checksum):
        raise DecodeError()

    return body[fmt.prefix_length :]


def encode_with_prefix(prefix: bytes, payload: bytes) -> str:
    """Frame *payload* behind *prefix*, append the checksum and base-58 encode.

    Parameters
    ----------
    prefix : bytes
        Type-tag bytes (may be empty).
    payload : bytes
        Identifier body.

    Returns
    -------
    str
        Encoded identifier over the ledger alphabet.
    """
    data = bytes(prefix) + bytes(payload)
    return _encode_with_alphabet(data + compute_checksum(data))


def decode_with_format(fmt: IdentifierFormat, encoded: str) -> bytes:
    """Decode *encoded* against *fmt* and return the payload bytes.

    Parameters
    ----------
    fmt : IdentifierFormat
        Expected prefix and payload length.
    encoded : str
        Candidate identifier string.

    Returns
    -------
    bytes
        Exactly ``fmt.payload_length`` bytes.

    Raises
    ------
    DecodeError
        If any symbol is outside the alphabet, or the length, prefix or
        checksum does not match.
    """
    try:
        return _get_payload(_decode_with_alphabet(encoded), fmt)
    except DecodeError:
        _logger.debug("Rejected %s candidate %s", fmt.kind, redact_for_log(encoded))
        raise


# ------------------------------------------------------------------
# Account IDs
# ------------------------------------------------------------------


def encode_account_id(account_id: bytes) -> str:
    """Encode a 20-byte account ID as a classic address (``r...``).

    Raises
    ------
    EncodeError
        If *account_id* is not 20 bytes.
    """
    payload = _as_payload(account_id, expected_length=ACCOUNT_ID_LENGTH, name="account ID")
    return encode_with_prefix(ACCOUNT_ID.prefix, payload)


def decode_account_id(address: str) -> bytes:
    """Decode a classic address (``r...``) to its 20 raw bytes.

    Raises
    ------
    DecodeError
        If *address* is not a valid classic address.
    """
    return decode_with_format(ACCOUNT_ID, address)


def is_valid_account_id(address: str) -> bool:
    """Return ``True`` when *address* decodes as a classic address."""
    try:
        decode_account_id(address)
    except DecodeError:
        return False
    return True


# ------------------------------------------------------------------
# Seeds
# ------------------------------------------------------------------


def _as_algorithm(algorithm: Algorithm | str | None) -> Algorithm:
    if algorithm is None:
        return Algorithm.default()
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise EncodeError(f"unsupported seed algorithm: {algorithm!r}") from None


def encode_seed(entropy: bytes, algorithm: Algorithm | str | None = None) -> str:
    """Encode 16 bytes of entropy as a seed for *algorithm*.

    Secp256k1 seeds start with ``s``; Ed25519 seeds start with ``sEd``.
    In the real world the entropy **must** come from a secure random
    source.

    Parameters
    ----------
    entropy : bytes
        Exactly 16 bytes.
    algorithm : Algorithm or str, optional
        Defaults to :meth:`Algorithm.default` (secp256k1).

    Raises
    ------
    EncodeError
        If *entropy* is not 16 bytes or *algorithm* is unknown.
    """
    payload = _as_payload(entropy, expected_length=ENTROPY_LENGTH, name="entropy")
    fmt = format_for_algorithm(_as_algorithm(algorithm))
    return encode_with_prefix(fmt.prefix, payload)


def decode_seed(seed: str) -> tuple[bytes, Algorithm]:
    """Decode a seed into its entropy and algorithm.

    Secp256k1 is tried first, then Ed25519.  When neither matches the
    error from the last attempt is raised.

    Raises
    ------
    DecodeError
        If *seed* is not a valid seed of either kind.
    """
    error = DecodeError()
    for algorithm, fmt in SEED_FORMATS:
        try:
            return decode_with_format(fmt, seed), algorithm
        except DecodeError as exc:
            error = exc
    raise error


def is_valid_seed(seed: str) -> bool:
    """Return ``True`` when *seed* decodes as a seed of either algorithm."""
    try:
        decode_seed(seed)
    except DecodeError:
        return False
    return True


def generate_seed(algorithm: Algorithm | str | None = None) -> str:
    """Encode 16 fresh bytes from :mod:`secrets` as a seed for *algorithm*."""
    return encode_seed(secrets.token_bytes(ENTROPY_LENGTH), algorithm)
