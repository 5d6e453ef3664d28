# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Comparison of type names seen in a document against a type family."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ModelRegistryDriftReport(BaseModel):
    """Registry drift found while auditing a document.

    Attributes:
        seen: Every type name found in ``_type``/``_supertype`` descriptors.
        unregistered: Seen names with no registry entry.
        unseen: Registered names that never occurred in the document.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    seen: tuple[str, ...] = ()
    unregistered: tuple[str, ...] = ()
    unseen: tuple[str, ...] = ()

    @property
    def has_drift(self) -> bool:
        """True when the document uses names the family does not know."""
        return bool(self.unregistered)


__all__ = ["ModelRegistryDriftReport"]
