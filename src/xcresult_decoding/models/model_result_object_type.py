# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type descriptor carried by every xcresult object.

Each object declares its runtime type as a ``_type`` descriptor that may link
to its supertype::

    {
        "_name": "ActionTestSummary",
        "_supertype": {
            "_name": "ActionTestSummaryIdentifiableObject",
            "_supertype": {"_name": "ActionAbstractTestSummary"}
        }
    }

The chain is singly linked and terminates at a root with no supertype. It is
parsed iteratively, root first, and walked with an explicit bound, so long
chains never recurse.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from xcresult_decoding.errors import ModelDecodeErrorContext, TypeChainDepthError

_SUPERTYPE_KEY = "_supertype"


class ModelResultObjectType(BaseModel):
    """Declared type of an xcresult object: a name plus optional supertype.

    Attributes:
        name: The declared type name (registry key).
        supertype: Descriptor of the parent type, None at the chain root.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    name: str = Field(
        alias="_name",
        min_length=1,
        description="Declared type name",
    )
    supertype: ModelResultObjectType | None = Field(
        default=None,
        alias="_supertype",
        description="Descriptor of the parent type",
    )

    @model_validator(mode="before")
    @classmethod
    def _link_supertype_chain(cls, data: object) -> object:
        """Validate the raw ``_supertype`` chain root first.

        Each ancestor is validated on its own with its parent already built,
        so nesting depth never reaches pydantic's recursion guard.
        """
        if not isinstance(data, Mapping):
            return data
        ancestors: list[Mapping[str, object]] = []
        node = data.get(_SUPERTYPE_KEY)
        while isinstance(node, Mapping):
            ancestors.append(node)
            node = node.get(_SUPERTYPE_KEY)
        if not ancestors:
            return data

        # node is the root's own supertype value: None, or invalid input
        # left for pydantic to reject.
        parent: object = node
        for ancestor in reversed(ancestors):
            parent = cls.model_validate({**ancestor, _SUPERTYPE_KEY: parent})
        return {**data, _SUPERTYPE_KEY: parent}

    def iter_chain(self, max_depth: int) -> Iterator[ModelResultObjectType]:
        """Yield this descriptor followed by each ancestor, leaf first.

        Args:
            max_depth: Maximum number of descriptors the chain may contain.

        Raises:
            TypeChainDepthError: If the chain holds more than max_depth nodes.
        """
        node: ModelResultObjectType | None = self
        depth = 0
        while node is not None:
            depth += 1
            if depth > max_depth:
                raise TypeChainDepthError(
                    f"Supertype chain of {self.name!r} exceeds {max_depth} levels",
                    context=ModelDecodeErrorContext(
                        operation="resolve_type",
                        type_name=self.name,
                    ),
                    max_depth=max_depth,
                )
            yield node
            node = node.supertype

    def chain_names(self, max_depth: int) -> tuple[str, ...]:
        """Return the type names of the chain, leaf first."""
        return tuple(node.name for node in self.iter_chain(max_depth))


__all__ = ["ModelResultObjectType"]
