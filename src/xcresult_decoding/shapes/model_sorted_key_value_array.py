# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Ordered key/value containers, kept opaque.

Attachment ``userInfo`` payloads use these types. Their contents are not
decoded structurally; only the declared type is retained.
"""

from __future__ import annotations

from xcresult_decoding.models.model_result_node import ModelOpaqueObject


class ModelSortedKeyValueArray(ModelOpaqueObject):
    """Opaque ``SortedKeyValueArray``."""


class ModelSortedKeyValueArrayPair(ModelOpaqueObject):
    """Opaque ``SortedKeyValueArrayPair``."""


__all__ = ["ModelSortedKeyValueArray", "ModelSortedKeyValueArrayPair"]
