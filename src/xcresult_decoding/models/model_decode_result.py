# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-element result of a heterogeneous decode."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from xcresult_decoding.enums import EnumDecodeOutcome
from xcresult_decoding.models.model_result_node import ModelResultNode


class ModelDecodeResult(BaseModel):
    """Decode outcome of a single list element.

    Plain list decoding keeps only DECODED values; this model lets callers
    and tests tell apart elements that were skipped because their type was
    unknown from those skipped because they resolved to another shape.

    Attributes:
        index: Position of the element in the input array.
        outcome: Whether the element was decoded or why it was skipped.
        type_name: Declared leaf type name of the element.
        resolved_name: Registered name the element resolved to, if any.
        value: The decoded node, set only for DECODED outcomes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: int = Field(ge=0)
    outcome: EnumDecodeOutcome
    type_name: str
    resolved_name: str | None = None
    value: ModelResultNode | None = None

    @property
    def is_decoded(self) -> bool:
        return self.outcome is EnumDecodeOutcome.DECODED


__all__ = ["ModelDecodeResult"]
