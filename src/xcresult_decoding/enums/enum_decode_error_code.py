# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes attached to decode errors."""

from __future__ import annotations

from enum import Enum


class EnumDecodeErrorCode(str, Enum):
    """Classification of errors raised by the decoding core.

    Attributes:
        MALFORMED_INPUT: Bad JSON syntax or a missing required structural field.
        TYPE_CHAIN_TOO_DEEP: A supertype chain exceeded the configured depth.
        SHAPE_MISMATCH: Resolved shape differs from the caller's expected type
            (strict mode only).
        REGISTRY_MISUSE: Invalid registration or query on a type family.
        INVALID_CONFIGURATION: Decoder configuration could not be loaded.
    """

    MALFORMED_INPUT = "malformed_input"
    TYPE_CHAIN_TOO_DEEP = "type_chain_too_deep"
    SHAPE_MISMATCH = "shape_mismatch"
    REGISTRY_MISUSE = "registry_misuse"
    INVALID_CONFIGURATION = "invalid_configuration"


__all__ = ["EnumDecodeErrorCode"]
