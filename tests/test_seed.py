from __future__ import annotations

import logging
import secrets

import pytest

from ripple_address_codec import (
    SEED_ED25519,
    SEED_SECP256K1,
    Algorithm,
    DecodeError,
    EncodeError,
    IdentifierFormat,
    decode_seed,
    decode_with_format,
    encode_seed,
    encode_with_prefix,
    generate_seed,
    is_valid_seed,
)
from ripple_address_codec import codec

SECP_SEED = "sn259rEFXrQrWyx3Q7XneWcwV6dfL"
SECP_HEX = "CF2DE378FBDD7E2EE87D486DFB5A7BFF"
ED_SEED = "sEdTM1uX8pu2do5XvTnutH6HsouMaM2"
ED_HEX = "4C3A1D213FBDFB14C7C28D609469B341"


# ------------------------------------------------------------------
# secp256k1
# ------------------------------------------------------------------


def test_secp256k1_encode_known_vector() -> None:
    assert encode_seed(bytes.fromhex(SECP_HEX), Algorithm.SECP256K1) == SECP_SEED


def test_secp256k1_decode_known_vector() -> None:
    entropy, algorithm = decode_seed(SECP_SEED)
    assert entropy.hex().upper() == SECP_HEX
    assert algorithm is Algorithm.SECP256K1


def test_secp256k1_zero_entropy() -> None:
    assert encode_seed(bytes(16), Algorithm.SECP256K1) == "sp6JS7f14BuwFY8Mw6bTtLKWauoUs"
    assert decode_seed("sp6JS7f14BuwFY8Mw6bTtLKWauoUs") == (bytes(16), Algorithm.SECP256K1)


def test_secp256k1_random_round_trip() -> None:
    entropy = secrets.token_bytes(16)
    encoded = encode_seed(entropy, Algorithm.SECP256K1)
    assert encoded.startswith("s")
    assert decode_seed(encoded) == (entropy, Algorithm.SECP256K1)


@pytest.mark.parametrize(
    "seed",
    [
        "s_000",
        "sn259rEFXrQrWcwV6dfL",
        "Sn259rEFXrQrWyx3Q7XneWcwV6dfL",
        "sn259rEFXrQrWyx3Q7XneWcwV6dfA",
    ],
)
def test_secp256k1_decode_rejects_invalid(seed: str) -> None:
    with pytest.raises(DecodeError):
        decode_seed(seed)
    assert not is_valid_seed(seed)


# ------------------------------------------------------------------
# Ed25519
# ------------------------------------------------------------------


def test_ed25519_encode_known_vector() -> None:
    assert encode_seed(bytes.fromhex(ED_HEX), Algorithm.ED25519) == ED_SEED


def test_ed25519_decode_known_vector() -> None:
    entropy, algorithm = decode_seed(ED_SEED)
    assert entropy.hex().upper() == ED_HEX
    assert algorithm is Algorithm.ED25519


def test_ed25519_zero_entropy() -> None:
    assert encode_seed(bytes(16), Algorithm.ED25519) == "sEdSJHS4oiAdz7w2X2ni1gFiqtbJHqE"
    assert decode_seed("sEdSJHS4oiAdz7w2X2ni1gFiqtbJHqE") == (bytes(16), Algorithm.ED25519)


def test_ed25519_random_round_trip() -> None:
    entropy = secrets.token_bytes(16)
    encoded = encode_seed(entropy, Algorithm.ED25519)
    assert encoded.startswith("sEd")
    assert decode_seed(encoded) == (entropy, Algorithm.ED25519)


@pytest.mark.parametrize(
    "seed",
    [
        "sEd_000",
        "sEdTM1uX8",
        "SEdTM1uX8pu2do5XvTnutH6HsouMaM2",
        "sEdTM1uX8pu2do5XvTnutH6HsouMaMA",
    ],
)
def test_ed25519_decode_rejects_invalid(seed: str) -> None:
    with pytest.raises(DecodeError):
        decode_seed(seed)


# ------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------


def test_seed_formats_do_not_overlap() -> None:
    with pytest.raises(DecodeError):
        decode_with_format(SEED_ED25519, SECP_SEED)
    with pytest.raises(DecodeError):
        decode_with_format(SEED_SECP256K1, ED_SEED)


def test_account_id_is_not_a_seed() -> None:
    with pytest.raises(DecodeError):
        decode_seed("rJrRMgiRgrU6hDF4pgu5DXQdWyPbY35ErN")


def test_decode_seed_rejects_secp256k1_prefix_on_ed25519_length() -> None:
    encoded = encode_with_prefix(b"\x21", bytes(18))
    with pytest.raises(DecodeError):
        decode_seed(encoded)


def test_decode_seed_raises_last_attempt_error(monkeypatch: pytest.MonkeyPatch) -> None:
    errors = {SEED_SECP256K1.kind: DecodeError(), SEED_ED25519.kind: DecodeError()}
    attempted = []

    def fake_decode(fmt: IdentifierFormat, encoded: str) -> bytes:
        attempted.append(fmt.kind)
        raise errors[fmt.kind]

    monkeypatch.setattr(codec, "decode_with_format", fake_decode)

    with pytest.raises(DecodeError) as excinfo:
        decode_seed(SECP_SEED)

    assert attempted == [SEED_SECP256K1.kind, SEED_ED25519.kind]
    assert excinfo.value is errors[SEED_ED25519.kind]


def test_decode_seed_logs_without_seed_text(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="ripple_address_codec.codec"):
        decode_seed(ED_SEED)
    assert "secp256k1_seed" in caplog.text
    assert ED_SEED not in caplog.text


# ------------------------------------------------------------------
# Encode arguments
# ------------------------------------------------------------------


def test_encode_seed_defaults_to_secp256k1() -> None:
    assert encode_seed(bytes.fromhex(SECP_HEX)) == SECP_SEED


def test_encode_seed_accepts_algorithm_value() -> None:
    assert encode_seed(bytes.fromhex(ED_HEX), "ed25519") == ED_SEED


def test_encode_seed_rejects_unknown_algorithm() -> None:
    with pytest.raises(EncodeError, match="unsupported seed algorithm"):
        encode_seed(bytes(16), "rsa")


@pytest.mark.parametrize("entropy", [bytes(15), bytes(17), bytes(20)])
def test_encode_seed_rejects_wrong_length(entropy: bytes) -> None:
    with pytest.raises(EncodeError, match="16 bytes"):
        encode_seed(entropy, Algorithm.SECP256K1)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_generate_seed(algorithm: Algorithm) -> None:
    seed = generate_seed(algorithm)
    _entropy, decoded_algorithm = decode_seed(seed)
    assert decoded_algorithm is algorithm
    assert is_valid_seed(seed)
