# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type Family Registry - maps discriminator names to shape classes.

A type family is the closed set of shapes a document model supports, keyed by
the ``_name`` each object declares in its ``_type`` descriptor. Resolution of
a descriptor walks its supertype chain until a registered name is found, so a
newer subtype still decodes as its nearest known ancestor. A chain with no
registered name resolves to ModelOpaqueObject; unknown types are not errors.

Lifecycle:
    1. Registration phase: register()/register_many() under a lock
    2. freeze(): entries become a read-only mapping
    3. Query phase: get()/has()/resolve()/list_types() without locking

Example:
    >>> family = RegistryTypeFamily()
    >>> family.register("ActionRecord", ModelActionRecord)
    >>> family.freeze()
    >>> descriptor = ModelResultObjectType(name="ActionRecord")
    >>> family.resolve(descriptor).shape is ModelActionRecord
    True
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from xcresult_decoding.errors import TypeFamilyRegistryError
from xcresult_decoding.models.model_decoder_config import DEFAULT_MAX_TYPE_DEPTH
from xcresult_decoding.models.model_result_node import (
    ModelOpaqueObject,
    ModelResultNode,
)
from xcresult_decoding.models.model_result_object_type import ModelResultObjectType
from xcresult_decoding.models.model_type_resolution import ModelTypeResolution

logger = logging.getLogger(__name__)


class RegistryTypeFamily:
    """Registry of shape classes keyed by discriminator name.

    Lookups are exact and case-sensitive. Each name maps to exactly one
    shape; several names may share a shape (the scalar names all map to
    ModelResultValue).

    Thread Safety:
        Registration is guarded by a threading.Lock. After freeze() the
        entries are exposed through a MappingProxyType and never change, so
        queries take no lock.

    Attributes:
        name: Label of the family, used in log messages and errors.
    """

    def __init__(self, name: str = "xcresult") -> None:
        self.name = name
        self._entries: dict[str, type[ModelResultNode]] = {}
        self._frozen_entries: Mapping[str, type[ModelResultNode]] | None = None
        self._lock = threading.Lock()

    # =========================================================================
    # Registration Methods (available before freeze)
    # =========================================================================

    def register(self, type_name: str, shape: type[ModelResultNode]) -> None:
        """Register a shape class for a discriminator name.

        Args:
            type_name: Discriminator value, e.g. "ActionTestSummary".
            shape: ModelResultNode subclass to decode matching objects with.

        Raises:
            TypeFamilyRegistryError: If the family is frozen, the name is
                empty or already registered, or shape is not a
                ModelResultNode subclass.
        """
        if not isinstance(type_name, str) or not type_name:
            raise TypeFamilyRegistryError(
                f"Type family {self.name!r}: type name must be a non-empty string",
                type_name=repr(type_name),
            )
        if not isinstance(shape, type) or not issubclass(shape, ModelResultNode):
            raise TypeFamilyRegistryError(
                f"Type family {self.name!r}: shape for {type_name!r} must be a "
                f"ModelResultNode subclass, got {shape!r}",
                type_name=type_name,
            )

        with self._lock:
            if self._frozen_entries is not None:
                raise TypeFamilyRegistryError(
                    f"Type family {self.name!r} is frozen; cannot register {type_name!r}",
                    type_name=type_name,
                )
            existing = self._entries.get(type_name)
            if existing is not None:
                raise TypeFamilyRegistryError(
                    f"Type family {self.name!r}: {type_name!r} is already registered "
                    f"to {existing.__name__}",
                    type_name=type_name,
                    existing_shape=existing.__name__,
                )
            self._entries[type_name] = shape

    def register_many(self, shapes: Mapping[str, type[ModelResultNode]]) -> None:
        """Register every (type_name, shape) pair of a mapping."""
        for type_name, shape in shapes.items():
            self.register(type_name, shape)

    def freeze(self) -> None:
        """Close registration. Calling freeze() again has no effect."""
        with self._lock:
            if self._frozen_entries is not None:
                return
            self._frozen_entries = MappingProxyType(dict(self._entries))
        logger.debug(
            "Type family %s frozen with %d entries",
            self.name,
            len(self._entries),
            extra={"family": self.name, "entry_count": len(self._entries)},
        )

    # =========================================================================
    # Query Methods (available after freeze)
    # =========================================================================

    def get(self, type_name: str) -> type[ModelResultNode] | None:
        """Return the shape registered for an exact name, or None."""
        return self._require_frozen("get").get(type_name)

    def has(self, type_name: str) -> bool:
        return type_name in self._require_frozen("has")

    def resolve(
        self,
        descriptor: ModelResultObjectType,
        *,
        max_depth: int = DEFAULT_MAX_TYPE_DEPTH,
    ) -> ModelTypeResolution:
        """Resolve a descriptor chain to the nearest registered shape.

        Args:
            descriptor: The object's ``_type`` descriptor.
            max_depth: Maximum number of descriptors to walk.

        Returns:
            ModelTypeResolution naming the matched shape, or the opaque shape
            with ``resolved_name=None`` when nothing in the chain is known.

        Raises:
            TypeChainDepthError: If the chain is longer than max_depth.
            TypeFamilyRegistryError: If the family is not frozen.
        """
        entries = self._require_frozen("resolve")
        for depth, node in enumerate(descriptor.iter_chain(max_depth)):
            shape = entries.get(node.name)
            if shape is not None:
                return ModelTypeResolution(
                    requested_name=descriptor.name,
                    resolved_name=node.name,
                    shape=shape,
                    depth=depth,
                )
        return ModelTypeResolution(
            requested_name=descriptor.name,
            shape=ModelOpaqueObject,
        )

    def list_types(self) -> list[str]:
        return sorted(self._require_frozen("list_types"))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def is_frozen(self) -> bool:
        return self._frozen_entries is not None

    @property
    def entry_count(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and self.has(type_name)

    def __len__(self) -> int:
        return self.entry_count

    def __repr__(self) -> str:
        state = "frozen" if self.is_frozen else "open"
        return f"RegistryTypeFamily<{self.name}, {self.entry_count} entries, {state}>"

    def _require_frozen(self, operation: str) -> Mapping[str, type[ModelResultNode]]:
        entries = self._frozen_entries
        if entries is None:
            raise TypeFamilyRegistryError(
                f"Type family {self.name!r} must be frozen before {operation}()",
                operation=operation,
            )
        return entries


__all__ = ["RegistryTypeFamily"]
