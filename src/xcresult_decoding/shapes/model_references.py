# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reference and location shapes shared across the document model."""

from __future__ import annotations

from pydantic import Field

from xcresult_decoding.shapes.model_result_object import ModelResultObject


class ModelTypeDefinition(ModelResultObject):
    """Declared type of a referenced object (``Reference.targetType``).

    Unlike the ``_type`` descriptor, a TypeDefinition is itself a document
    object whose ``name`` is a String value envelope.
    """

    name: str
    supertype: ModelTypeDefinition | None = None


class ModelReference(ModelResultObject):
    """Pointer to another object in the result bundle."""

    id: str
    target_type: ModelTypeDefinition | None = None


class ModelObjectID(ModelResultObject):
    hash_value: str = Field(alias="hash")


class ModelEntityIdentifier(ModelResultObject):
    entity_name: str
    container_name: str
    entity_type: str
    shared_state: str


class ModelDocumentLocation(ModelResultObject):
    """Source location of an issue or log message."""

    url: str
    concrete_type_name: str


class ModelArchiveInfo(ModelResultObject):
    path: str | None = None


__all__ = [
    "ModelArchiveInfo",
    "ModelDocumentLocation",
    "ModelEntityIdentifier",
    "ModelObjectID",
    "ModelReference",
    "ModelTypeDefinition",
]
