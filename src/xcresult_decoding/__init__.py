# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""xcresult decoding - discriminator-driven decoder for xcresult JSON.

Every object in an xcresult document carries its own runtime type name
(``_type: {_name, _supertype?}``). This package resolves that name through a
frozen type family, walking the supertype chain to the nearest registered
shape, and validates the payload into immutable pydantic models.

Key Components:
    - decode_document: Bytes in, list of matching top-level shapes out
    - RegistryTypeFamily: Freeze-after-init map of type names to shapes
    - get_default_type_family: Family covering every EnumResultTypeName
    - ModelDecoderConfig: Depth bound, strict shape matching, drift audit

Example:
    >>> from xcresult_decoding import (
    ...     ModelActionsInvocationRecord,
    ...     decode_document,
    ...     get_default_type_family,
    ... )
    >>> records = decode_document(
    ...     payload, ModelActionsInvocationRecord, get_default_type_family()
    ... )
"""

from xcresult_decoding.enums import (
    EnumDecodeErrorCode,
    EnumDecodeOutcome,
    EnumResultTypeName,
    EnumScalarTypeName,
)
from xcresult_decoding.errors import (
    DecoderConfigurationError,
    MalformedDocumentError,
    ModelDecodeErrorContext,
    ShapeMismatchError,
    TypeChainDepthError,
    TypeFamilyRegistryError,
    XCResultDecodeError,
)
from xcresult_decoding.models import (
    ModelDecodeContext,
    ModelDecodeResult,
    ModelDecoderConfig,
    ModelOpaqueObject,
    ModelRegistryDriftReport,
    ModelResultNode,
    ModelResultObjectType,
    ModelResultValue,
    ModelTypeResolution,
)
from xcresult_decoding.protocols import ProtocolTypeFamily
from xcresult_decoding.runtime import (
    RegistryTypeFamily,
    audit_registry_drift,
    collect_type_names,
    decode_document,
    decode_document_results,
    decode_list,
    decode_list_results,
    decode_object,
    decode_object_optional,
    decode_scalar,
    decode_scalar_optional,
    load_decoder_config,
)
from xcresult_decoding.shapes import (
    ModelActionRecord,
    ModelActionsInvocationRecord,
    ModelActionTestPlanRunSummaries,
    ModelActionTestSummary,
    ModelActionTestSummaryGroup,
    ModelResultArray,
    ModelResultObject,
    build_default_type_family,
    get_default_type_family,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "DecoderConfigurationError",
    "EnumDecodeErrorCode",
    "EnumDecodeOutcome",
    "EnumResultTypeName",
    "EnumScalarTypeName",
    "MalformedDocumentError",
    "ModelActionRecord",
    "ModelActionTestPlanRunSummaries",
    "ModelActionTestSummary",
    "ModelActionTestSummaryGroup",
    "ModelActionsInvocationRecord",
    "ModelDecodeContext",
    "ModelDecodeErrorContext",
    "ModelDecodeResult",
    "ModelDecoderConfig",
    "ModelOpaqueObject",
    "ModelRegistryDriftReport",
    "ModelResultArray",
    "ModelResultNode",
    "ModelResultObject",
    "ModelResultObjectType",
    "ModelResultValue",
    "ModelTypeResolution",
    "ProtocolTypeFamily",
    "RegistryTypeFamily",
    "ShapeMismatchError",
    "TypeChainDepthError",
    "TypeFamilyRegistryError",
    "XCResultDecodeError",
    "audit_registry_drift",
    "build_default_type_family",
    "collect_type_names",
    "decode_document",
    "decode_document_results",
    "decode_list",
    "decode_list_results",
    "decode_object",
    "decode_object_optional",
    "decode_scalar",
    "decode_scalar_optional",
    "get_default_type_family",
    "load_decoder_config",
]
