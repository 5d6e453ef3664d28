# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decode Error Classes.

Error Hierarchy:
    XCResultDecodeError (base decoding error)
    ├── MalformedDocumentError
    │   └── TypeChainDepthError
    ├── ShapeMismatchError
    ├── TypeFamilyRegistryError (see error_type_family_registry)
    └── DecoderConfigurationError

All errors:
    - Carry an EnumDecodeErrorCode classification
    - Accept ModelDecodeErrorContext for bundled context parameters
    - Support error chaining with ``raise ... from e``
    - Derive from Exception, not ValueError. Pydantic folds ValueError
      raised inside validators into a ValidationError; these errors must
      instead surface unchanged from nested decodes.
"""

from __future__ import annotations

from uuid import UUID

from xcresult_decoding.enums import EnumDecodeErrorCode
from xcresult_decoding.errors.model_decode_error_context import (
    ModelDecodeErrorContext,
)


class XCResultDecodeError(Exception):
    """Base error class for the decoding core.

    Structured Fields (via ModelDecodeErrorContext):
        operation: Decode operation being performed
        path: Dotted document path of the offending value
        type_name: Declared type name, when known
        correlation_id: Correlation ID for tracing

    Example:
        >>> context = ModelDecodeErrorContext(operation="decode_object")
        >>> raise XCResultDecodeError("Decode failed", context=context)

        # Or with extra context:
        >>> raise XCResultDecodeError(
        ...     "Decode failed",
        ...     context=context,
        ...     expected_type="ModelActionRecord",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: EnumDecodeErrorCode | None = None,
        context: ModelDecodeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize XCResultDecodeError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to MALFORMED_INPUT)
            context: Bundled decode context (operation, path, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: UUID | None = None
        path: str | None = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.path is not None:
                structured_context["path"] = context.path
            if context.type_name is not None:
                structured_context["type_name"] = context.type_name
            correlation_id = context.correlation_id
            path = context.path

        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumDecodeErrorCode.MALFORMED_INPUT
        self.correlation_id = correlation_id
        self.path = path
        self.context = structured_context

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path})"
        return self.message


class MalformedDocumentError(XCResultDecodeError):
    """Raised when the input cannot be decoded structurally.

    Used for bad JSON syntax, truncated buffers, objects missing their
    ``_type`` discriminator, and required fields that are missing or whose
    scalar value could not be coerced.
    """

    def __init__(
        self,
        message: str,
        context: ModelDecodeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDecodeErrorCode.MALFORMED_INPUT,
            context=context,
            **extra_context,
        )


class TypeChainDepthError(MalformedDocumentError):
    """Raised when a supertype chain is longer than the configured bound.

    Example:
        >>> raise TypeChainDepthError(
        ...     "Supertype chain exceeds 64 levels",
        ...     context=ModelDecodeErrorContext(type_name="ActionTestSummary"),
        ...     max_depth=64,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelDecodeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        XCResultDecodeError.__init__(
            self,
            message=message,
            error_code=EnumDecodeErrorCode.TYPE_CHAIN_TOO_DEEP,
            context=context,
            **extra_context,
        )


class ShapeMismatchError(XCResultDecodeError):
    """Raised in strict mode when a resolved shape does not fit the caller.

    By default a single-object decode whose resolved shape is not a subclass
    of the expected type falls back to decoding the expected type directly.
    With ``strict_shape_match`` enabled this error is raised instead.
    """

    def __init__(
        self,
        message: str,
        *,
        expected_type: str | None = None,
        resolved_type: str | None = None,
        context: ModelDecodeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        extra: dict[str, object] = dict(extra_context)
        if expected_type is not None:
            extra["expected_type"] = expected_type
        if resolved_type is not None:
            extra["resolved_type"] = resolved_type

        super().__init__(
            message=message,
            error_code=EnumDecodeErrorCode.SHAPE_MISMATCH,
            context=context,
            **extra,
        )


class DecoderConfigurationError(XCResultDecodeError):
    """Raised when decoder configuration cannot be loaded or validated."""

    def __init__(
        self,
        message: str,
        context: ModelDecodeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumDecodeErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


__all__ = [
    "DecoderConfigurationError",
    "MalformedDocumentError",
    "ShapeMismatchError",
    "TypeChainDepthError",
    "XCResultDecodeError",
]
