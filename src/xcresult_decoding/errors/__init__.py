# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decoding error classes and structured error context."""

from xcresult_decoding.errors.error_type_family_registry import (
    TypeFamilyRegistryError,
)
from xcresult_decoding.errors.error_xcresult_decode import (
    DecoderConfigurationError,
    MalformedDocumentError,
    ShapeMismatchError,
    TypeChainDepthError,
    XCResultDecodeError,
)
from xcresult_decoding.errors.model_decode_error_context import (
    ModelDecodeErrorContext,
)

__all__: list[str] = [
    "DecoderConfigurationError",
    "MalformedDocumentError",
    "ModelDecodeErrorContext",
    "ShapeMismatchError",
    "TypeChainDepthError",
    "TypeFamilyRegistryError",
    "XCResultDecodeError",
]
