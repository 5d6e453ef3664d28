# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Root of every decodable shape and the opaque fallback shape."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from xcresult_decoding.models.model_result_object_type import ModelResultObjectType


class ModelResultNode(BaseModel):
    """Base class of all shapes a type family can resolve to.

    Field names are snake_case in Python and camelCase in documents; the
    alias generator maps between them. Fields whose document key does not
    follow plain camelCase (``targetSDKRecord``, ``modelUTI``) declare an
    explicit alias.

    Attributes:
        result_type: The object's declared type descriptor (``_type``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    result_type: ModelResultObjectType = Field(alias="_type")

    @property
    def type_name(self) -> str:
        """Declared (leaf) type name of this node."""
        return self.result_type.name


class ModelOpaqueObject(ModelResultNode):
    """Generic shape for objects whose type chain is entirely unregistered.

    Only the declared type descriptor is retained; no structural decode of
    the remaining keys is attempted. Unknown types are expected when newer
    tool versions add object kinds.
    """


__all__ = ["ModelOpaqueObject", "ModelResultNode"]
