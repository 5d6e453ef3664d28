# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-element outcome of a heterogeneous decode."""

from __future__ import annotations

from enum import Enum


class EnumDecodeOutcome(str, Enum):
    """Outcome recorded for each element of a heterogeneous list decode.

    Values:
        DECODED: The element resolved to a shape compatible with the expected
            type and was decoded.
        SKIPPED_UNRESOLVED: Neither the element's type name nor any of its
            supertypes is registered, and the opaque shape is not what the
            caller asked for.
        SKIPPED_MISMATCHED: The element resolved to a registered shape that
            is not a subclass of the expected type.
    """

    DECODED = "decoded"
    SKIPPED_UNRESOLVED = "skipped_unresolved"
    SKIPPED_MISMATCHED = "skipped_mismatched"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumDecodeOutcome"]
