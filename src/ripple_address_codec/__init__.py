"""ripple_address_codec - base-58 codec for XRP Ledger account IDs and seeds."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ripple-address-codec")
except PackageNotFoundError:
    __version__ = "0+local"
from ripple_address_codec._constants import ACCOUNT_ID_LENGTH, ALPHABET, CHECKSUM_LENGTH, ENTROPY_LENGTH
from ripple_address_codec.codec import (
    decode_account_id,
    decode_seed,
    decode_with_format,
    encode_account_id,
    encode_seed,
    encode_with_prefix,
    generate_seed,
    is_valid_account_id,
    is_valid_seed,
)
from ripple_address_codec.exceptions import CodecError, DecodeError, EncodeError
from ripple_address_codec.models import (
    ACCOUNT_ID,
    SEED_ED25519,
    SEED_SECP256K1,
    Algorithm,
    IdentifierFormat,
    IdentifierKind,
)

__all__ = [
    "__version__",
    "ACCOUNT_ID",
    "ACCOUNT_ID_LENGTH",
    "ALPHABET",
    "Algorithm",
    "CHECKSUM_LENGTH",
    "CodecError",
    "DecodeError",
    "ENTROPY_LENGTH",
    "EncodeError",
    "IdentifierFormat",
    "IdentifierKind",
    "SEED_ED25519",
    "SEED_SECP256K1",
    "decode_account_id",
    "decode_seed",
    "decode_with_format",
    "encode_account_id",
    "encode_seed",
    "encode_with_prefix",
    "generate_seed",
    "is_valid_account_id",
    "is_valid_seed",
]
