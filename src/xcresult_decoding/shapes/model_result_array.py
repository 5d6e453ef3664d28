# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Generic heterogeneous array shape."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import Field, ValidationInfo, model_validator

from xcresult_decoding.models.model_result_node import ModelResultNode
from xcresult_decoding.runtime.decoder_heterogeneous import (
    ARRAY_VALUES_KEY,
    decode_list,
    unwrap_array,
)
from xcresult_decoding.shapes.model_result_object import resolve_decode_context


class ModelResultArray(ModelResultNode):
    """Shape registered for the ``Array`` type name.

    Elements are resolved through the same type family as the array itself
    and kept whatever their shape (scalars, objects or opaque nodes).
    """

    values: list[ModelResultNode] = Field(default_factory=list, alias=ARRAY_VALUES_KEY)

    @model_validator(mode="before")
    @classmethod
    def _decode_values(cls, data: object, info: ValidationInfo) -> object:
        if not isinstance(data, Mapping):
            return data
        context = resolve_decode_context(info)
        return {
            **data,
            ARRAY_VALUES_KEY: decode_list(
                unwrap_array(data, context),
                ModelResultNode,
                context.child(ARRAY_VALUES_KEY),
            ),
        }

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["ModelResultArray"]
