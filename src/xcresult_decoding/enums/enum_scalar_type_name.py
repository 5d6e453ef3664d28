# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type names of scalar leaf values."""

from __future__ import annotations

from enum import Enum


class EnumScalarTypeName(str, Enum):
    """Type names whose `_value` is coerced to a primitive.

    Any other type name carried by a value envelope is treated as a string.
    """

    BOOL = "Bool"
    DATE = "Date"
    DOUBLE = "Double"
    INT = "Int"
    STRING = "String"


__all__ = ["EnumScalarTypeName"]
