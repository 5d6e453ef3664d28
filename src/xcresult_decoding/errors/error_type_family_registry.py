# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Type Family Registry Error.

Provides the TypeFamilyRegistryError class for type family registry
operations.

Related:
    - RegistryTypeFamily: Registry that raises this error
"""

from __future__ import annotations

__all__ = [
    "TypeFamilyRegistryError",
]

from xcresult_decoding.enums import EnumDecodeErrorCode
from xcresult_decoding.errors.error_xcresult_decode import XCResultDecodeError
from xcresult_decoding.errors.model_decode_error_context import (
    ModelDecodeErrorContext,
)


class TypeFamilyRegistryError(XCResultDecodeError):
    """Error raised when type family registry operations fail.

    Used for:
    - Registration after freeze
    - Queries before freeze
    - Empty type names
    - Shapes that are not ModelResultNode subclasses
    - Duplicate registration attempts
    - A default family that does not cover the closed type-name set

    Example:
        >>> try:
        ...     family.register("ActionRecord", ModelActionRecord)
        ... except TypeFamilyRegistryError as e:
        ...     print(f"Registration rejected: {e}")
        ...
    """

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        context: ModelDecodeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize TypeFamilyRegistryError.

        Args:
            message: Human-readable error message
            type_name: The type name that caused the error
            context: Bundled decode context for correlation_id
            **extra_context: Additional context information
        """
        extra: dict[str, object] = dict(extra_context)
        if type_name is not None:
            extra["type_name"] = type_name

        super().__init__(
            message=message,
            error_code=EnumDecodeErrorCode.REGISTRY_MISUSE,
            context=context,
            **extra,
        )
