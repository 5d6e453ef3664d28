# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decode Error Context Model.

Bundles the structured fields shared by every decode error so that error
constructors keep a small parameter count.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelDecodeErrorContext(BaseModel):
    """Structured context attached to decode errors.

    Attributes:
        operation: Decode operation being performed (decode_object, resolve, ...)
        path: Dotted path of the offending value within the document
        type_name: Declared type name of the object being decoded, if known
        correlation_id: Correlation ID for tracing a single document decode

    Example:
        >>> context = ModelDecodeErrorContext(
        ...     operation="decode_list",
        ...     path="actions[0].actionResult",
        ...     type_name="ActionResult",
        ... )
        >>> raise MalformedDocumentError("Missing field", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Decode operation being performed",
    )
    path: str | None = Field(
        default=None,
        description="Dotted path of the offending value within the document",
    )
    type_name: str | None = Field(
        default=None,
        description="Declared type name of the object being decoded",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing a single document decode",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelDecodeErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelDecodeErrorContext"]
