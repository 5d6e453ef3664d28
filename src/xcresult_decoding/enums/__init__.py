# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the xcresult decoding core.

Exports:
    EnumDecodeErrorCode: Classification of decode errors
    EnumDecodeOutcome: Per-element outcome of heterogeneous list decoding
    EnumResultTypeName: Closed set of discriminator values in the document model
    EnumScalarTypeName: Type names of coercible scalar leaves
"""

from xcresult_decoding.enums.enum_decode_error_code import EnumDecodeErrorCode
from xcresult_decoding.enums.enum_decode_outcome import EnumDecodeOutcome
from xcresult_decoding.enums.enum_result_type_name import EnumResultTypeName
from xcresult_decoding.enums.enum_scalar_type_name import EnumScalarTypeName

__all__: list[str] = [
    "EnumDecodeErrorCode",
    "EnumDecodeOutcome",
    "EnumResultTypeName",
    "EnumScalarTypeName",
]
