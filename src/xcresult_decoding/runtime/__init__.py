# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decoding runtime: type family registry, decoders and config loading.

Concrete shapes and the default family live in ``xcresult_decoding.shapes``;
this package does not import them.
"""

from xcresult_decoding.runtime.decoder_config_loader import load_decoder_config
from xcresult_decoding.runtime.decoder_document import (
    decode_document,
    decode_document_results,
)
from xcresult_decoding.runtime.decoder_heterogeneous import (
    decode_field_value,
    decode_fields,
    decode_list,
    decode_list_results,
    decode_object,
    decode_object_optional,
    decode_scalar,
    decode_scalar_list,
    decode_scalar_optional,
    unwrap_array,
)
from xcresult_decoding.runtime.registry_drift_audit import (
    audit_registry_drift,
    collect_type_names,
)
from xcresult_decoding.runtime.registry_type_family import RegistryTypeFamily

__all__: list[str] = [
    "RegistryTypeFamily",
    "audit_registry_drift",
    "collect_type_names",
    "decode_document",
    "decode_document_results",
    "decode_field_value",
    "decode_fields",
    "decode_list",
    "decode_list_results",
    "decode_object",
    "decode_object_optional",
    "decode_scalar",
    "decode_scalar_list",
    "decode_scalar_optional",
    "load_decoder_config",
    "unwrap_array",
]
