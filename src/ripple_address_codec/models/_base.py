"""Base model for ripple_address_codec value objects.

Every model inherits from :class:`CodecBaseModel` which makes instances
immutable (and therefore hashable) and rejects unknown fields, so a
descriptor can only ever hold what it declares.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CodecBaseModel(BaseModel):
    """Base for static codec descriptors."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
