# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scalar value envelope shape."""

from __future__ import annotations

from pydantic import Field

from xcresult_decoding.models.model_result_node import ModelResultNode
from xcresult_decoding.utils.util_scalar_coercion import ScalarValue, coerce_scalar


class ModelResultValue(ModelResultNode):
    """A primitive leaf: ``{"_type": {"_name": "Int"}, "_value": "42"}``.

    Registered for the Bool, Date, Double, Int and String type names; the
    type name selects the coercion applied by ``get_value()``.
    """

    value: str = Field(alias="_value")

    def get_value(self) -> ScalarValue | None:
        """Return the coerced value, or None if the literal is malformed."""
        return coerce_scalar(self.type_name, self.value)


__all__ = ["ModelResultValue"]
