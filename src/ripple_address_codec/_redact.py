"""Helpers for safe debug logging.

Encoded seeds are secrets and account IDs are still worth keeping out of
logs verbatim.  This module renders identifiers and raw bytes as a short
shape description before they reach a DEBUG record.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

# Leading symbols that mark an encoded seed ("s..." / "sEd...").
_SEED_MARKERS: tuple[str, ...] = ("s",)


def redact_for_log(value: Any, *, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    Strings keep their first symbol and length. Seed-looking strings
    keep only their length. Bytes are reduced to their length.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if not value:
            return "<str:0>"
        if value.startswith(_SEED_MARKERS):
            return f"<seed:{len(value)}>"
        return f"<{value[0]}…:{len(value)}>"

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {str(k): redact_for_log(v, _depth=_depth + 1) for k, v in value.items()}

    if isinstance(value, Sequence):
        return [redact_for_log(v, _depth=_depth + 1) for v in value]

    # Fallback: never dump internals of unknown objects.
    return f"<{type(value).__name__}>"
