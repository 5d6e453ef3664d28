# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry drift audit.

Compares the type names a parsed document actually uses against the names a
type family registers. Unregistered names still decode (as their nearest
registered ancestor, or opaquely), so drift never fails a decode; the audit
only makes it visible.
"""

from __future__ import annotations

from collections.abc import Mapping

from xcresult_decoding.models.model_registry_drift_report import (
    ModelRegistryDriftReport,
)
from xcresult_decoding.protocols import ProtocolTypeFamily

_TYPE_KEY = "_type"
_NAME_KEY = "_name"
_SUPERTYPE_KEY = "_supertype"


def collect_type_names(raw: object) -> set[str]:
    """Collect every ``_name`` declared by a ``_type`` descriptor in raw JSON.

    Supertype names are included. A bare string ``_type`` counts as a name.
    Values that are not descriptors are ignored.
    """
    names: set[str] = set()
    pending: list[object] = [raw]
    while pending:
        node = pending.pop()
        if isinstance(node, list):
            pending.extend(node)
            continue
        if not isinstance(node, Mapping):
            continue
        for key, value in node.items():
            if key == _TYPE_KEY:
                names.update(_descriptor_names(value))
            else:
                pending.append(value)
    return names


def audit_registry_drift(
    raw: object,
    family: ProtocolTypeFamily,
) -> ModelRegistryDriftReport:
    """Report names used by ``raw`` that ``family`` does not register, and
    registered names ``raw`` never uses.

    Raises:
        TypeFamilyRegistryError: If the family is not frozen.
    """
    seen = collect_type_names(raw)
    registered = set(family.list_types())
    return ModelRegistryDriftReport(
        seen=tuple(sorted(seen)),
        unregistered=tuple(sorted(seen - registered)),
        unseen=tuple(sorted(registered - seen)),
    )


def _descriptor_names(descriptor: object) -> list[str]:
    if isinstance(descriptor, str):
        return [descriptor]
    names: list[str] = []
    # Malformed chains are the decoder's concern; stop at the first bad link.
    while isinstance(descriptor, Mapping):
        name = descriptor.get(_NAME_KEY)
        if not isinstance(name, str):
            break
        names.append(name)
        descriptor = descriptor.get(_SUPERTYPE_KEY)
    return names


__all__ = ["audit_registry_drift", "collect_type_names"]
