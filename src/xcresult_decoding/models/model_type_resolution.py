# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outcome of resolving a type descriptor through a type family."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from xcresult_decoding.models.model_result_node import ModelResultNode


class ModelTypeResolution(BaseModel):
    """Shape selected for a descriptor chain.

    Attributes:
        requested_name: Leaf type name of the descriptor that was resolved.
        resolved_name: The registered name that matched (the leaf or an
            ancestor), or None when no name in the chain is registered.
        shape: Shape class to decode with; the opaque shape when unresolved.
        depth: Number of chain links walked before the match (0 = leaf).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    requested_name: str
    resolved_name: str | None = None
    shape: type[ModelResultNode]
    depth: int = Field(default=0, ge=0)

    @property
    def is_resolved(self) -> bool:
        """True when some name in the chain is registered."""
        return self.resolved_name is not None


__all__ = ["ModelTypeResolution"]
