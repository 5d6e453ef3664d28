# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Protocol definition for type families.

A type family maps discriminator names to shape classes and resolves a
type descriptor chain to the nearest registered shape.

Design Principles:
    - Protocol-based interface so decoders accept any conforming family
    - Runtime-checkable for isinstance() validation
    - Freeze-after-init pattern for safe concurrent reads
    - Unknown names resolve to an opaque shape, never raise
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from xcresult_decoding.models.model_result_node import ModelResultNode
from xcresult_decoding.models.model_result_object_type import ModelResultObjectType
from xcresult_decoding.models.model_type_resolution import ModelTypeResolution


@runtime_checkable
class ProtocolTypeFamily(Protocol):
    """
    Protocol for type family implementations.

    Implementations must follow the freeze-after-init pattern:
    1. Registration phase: register() calls available
    2. Freeze: freeze() locks the family
    3. Query phase: get/has/resolve/list_types available

    Thread Safety Requirements:
        - After freeze(), all query methods must be safe for concurrent access
    """

    def register(self, type_name: str, shape: type[ModelResultNode]) -> None:
        """
        Register a shape class for a discriminator name.

        Raises:
            TypeFamilyRegistryError: If frozen, the name is empty or already
                registered, or shape is not a ModelResultNode subclass.
        """
        ...

    def freeze(self) -> None:
        """Freeze the family; idempotent."""
        ...

    def get(self, type_name: str) -> type[ModelResultNode] | None:
        """
        Exact, case-sensitive lookup of a single name.

        Raises:
            TypeFamilyRegistryError: If the family is not frozen.
        """
        ...

    def has(self, type_name: str) -> bool:
        """Check whether a name is registered."""
        ...

    def resolve(
        self,
        descriptor: ModelResultObjectType,
        *,
        max_depth: int = ...,
    ) -> ModelTypeResolution:
        """
        Resolve a descriptor chain to the nearest registered shape.

        Tries the leaf name, then each supertype in turn. An exhausted chain
        resolves to the opaque shape with ``resolved_name=None``.

        Raises:
            TypeChainDepthError: If the chain is longer than max_depth.
            TypeFamilyRegistryError: If the family is not frozen.
        """
        ...

    def list_types(self) -> list[str]:
        """List registered names, sorted."""
        ...

    @property
    def is_frozen(self) -> bool:
        """True once registration is closed."""
        ...

    @property
    def entry_count(self) -> int:
        """Number of registered names."""
        ...


__all__ = ["ProtocolTypeFamily"]
