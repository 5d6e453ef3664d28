# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base class of structured xcresult objects.

Subclasses declare plain pydantic fields; a ``mode="before"`` validator runs
each declared field through the heterogeneous decoder, choosing the decode
strategy from the field annotation:

    class ModelActionRecord(ModelResultObject):
        title: str | None = None                            # scalar envelope
        run_destination: ModelActionRunDestinationRecord    # polymorphic object
        subsections: list[ModelActivityLogSection] = []     # heterogeneous Array

The decode context (type family, configuration, document path) is read from
pydantic's validation context. Validating without one uses the default
family and configuration.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationInfo, model_validator

from xcresult_decoding.models.model_decode_context import ModelDecodeContext
from xcresult_decoding.models.model_result_node import ModelResultNode
from xcresult_decoding.runtime.decoder_heterogeneous import decode_fields


def resolve_decode_context(info: ValidationInfo) -> ModelDecodeContext:
    """Return the decode context of a validation, or a default one."""
    context = ModelDecodeContext.from_validation_context(info.context)
    if context is not None:
        return context
    # Deferred: the default family imports every shape module.
    from xcresult_decoding.shapes.type_family_default import get_default_type_family

    return ModelDecodeContext(family=get_default_type_family())


class ModelResultObject(ModelResultNode):
    """A structured object of the document model."""

    @model_validator(mode="before")
    @classmethod
    def _decode_xcresult_fields(cls, data: object, info: ValidationInfo) -> object:
        if not isinstance(data, Mapping):
            return data
        return decode_fields(cls, data, resolve_decode_context(info))


__all__ = ["ModelResultObject", "resolve_decode_context"]
