# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for scalar coercion and path rendering."""

from xcresult_decoding.utils.util_decode_path import PathSegment, format_decode_path
from xcresult_decoding.utils.util_scalar_coercion import (
    ScalarValue,
    coerce_bool,
    coerce_date,
    coerce_double,
    coerce_int,
    coerce_scalar,
)

__all__: list[str] = [
    "PathSegment",
    "ScalarValue",
    "coerce_bool",
    "coerce_date",
    "coerce_double",
    "coerce_int",
    "coerce_scalar",
    "format_decode_path",
]
