#!/usr/bin/env python3
"""Inspect, encode, or generate XRP Ledger account IDs and seeds.

Usage
-----
    python scripts/inspect_identifier.py decode rJrRMgiRgrU6hDF4pgu5DXQdWyPbY35ErN
    python scripts/inspect_identifier.py encode-account BA8E78626EE42C41B46D46C3048DF3A1C3C87072
    python scripts/inspect_identifier.py encode-seed CF2DE378FBDD7E2EE87D486DFB5A7BFF --algorithm ed25519
    python scripts/inspect_identifier.py generate-seed --algorithm ed25519

Options
-------
    --verbose / -v       Enable debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys

from ripple_address_codec import (
    Algorithm,
    CodecError,
    DecodeError,
    decode_account_id,
    decode_seed,
    encode_account_id,
    encode_seed,
    generate_seed,
)

LOG = logging.getLogger("inspect_identifier")


def _parse_hex(text: str) -> bytes:
    value = text.strip()
    if value.startswith(("0x", "0X")):
        value = value[2:]
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise CodecError(f"not a hex string: {text!r}") from exc


def _cmd_decode(args: argparse.Namespace) -> None:
    try:
        account_id = decode_account_id(args.identifier)
    except DecodeError:
        LOG.debug("Not an account ID, trying seed formats")
    else:
        print(f"kind:    account_id\npayload: {account_id.hex().upper()}")
        return

    entropy, algorithm = decode_seed(args.identifier)
    print(f"kind:    {algorithm.value}_seed\npayload: {entropy.hex().upper()}")


def _cmd_encode_account(args: argparse.Namespace) -> None:
    print(encode_account_id(_parse_hex(args.hex)))


def _cmd_encode_seed(args: argparse.Namespace) -> None:
    print(encode_seed(_parse_hex(args.hex), args.algorithm))


def _cmd_generate_seed(args: argparse.Namespace) -> None:
    print(generate_seed(args.algorithm))


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect XRP Ledger base-58 identifiers.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_decode = sub.add_parser("decode", help="Decode an account ID or seed")
    p_decode.add_argument("identifier")
    p_decode.set_defaults(func=_cmd_decode)

    p_account = sub.add_parser("encode-account", help="Encode 20 hex bytes as an account ID")
    p_account.add_argument("hex")
    p_account.set_defaults(func=_cmd_encode_account)

    algorithms = [a.value for a in Algorithm]

    p_seed = sub.add_parser("encode-seed", help="Encode 16 hex bytes of entropy as a seed")
    p_seed.add_argument("hex")
    p_seed.add_argument("--algorithm", choices=algorithms, default=Algorithm.default().value)
    p_seed.set_defaults(func=_cmd_encode_seed)

    p_generate = sub.add_parser("generate-seed", help="Generate a random seed")
    p_generate.add_argument("--algorithm", choices=algorithms, default=Algorithm.default().value)
    p_generate.set_defaults(func=_cmd_generate_seed)

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        args.func(args)
    except CodecError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
