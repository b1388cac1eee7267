"""Internal constants shared across the library."""

# Order is significant: a symbol's index is its base-58 digit value.
ALPHABET = "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz"
ALPHABET_SYMBOLS: frozenset[str] = frozenset(ALPHABET)

CHECKSUM_LENGTH = 4
ENTROPY_LENGTH = 16
ACCOUNT_ID_LENGTH = 20
