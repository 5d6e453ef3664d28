# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Thin envelope used to decide how to decode an object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from xcresult_decoding.models.model_result_object_type import ModelResultObjectType


class ModelObjectEnvelope(BaseModel):
    """Minimal parse of an object: only its ``_type`` descriptor.

    Every polymorphic object is first parsed into this envelope, the
    descriptor is resolved through a type family, and the same raw payload
    is then validated against the resolved shape. All other keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    result_type: ModelResultObjectType = Field(alias="_type")


__all__ = ["ModelObjectEnvelope"]
