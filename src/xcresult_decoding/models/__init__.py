# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Core models of the decoding pipeline.

Exports:
    ModelDecodeContext: Per-call decode state (family, config, path)
    ModelDecodeResult: Per-element outcome of a heterogeneous decode
    ModelDecoderConfig: Decoder configuration
    ModelObjectEnvelope: Discriminator-only parse of an object
    ModelOpaqueObject: Fallback shape for unregistered type chains
    ModelRegistryDriftReport: Type names seen vs. registered
    ModelResultNode: Base class of every decodable shape
    ModelResultObjectType: Type descriptor with supertype chain
    ModelResultValue: Scalar value envelope
    ModelTypeResolution: Shape selected for a descriptor chain
"""

from xcresult_decoding.models.model_decode_context import (
    DECODE_CONTEXT_KEY,
    ModelDecodeContext,
)
from xcresult_decoding.models.model_decode_result import ModelDecodeResult
from xcresult_decoding.models.model_decoder_config import ModelDecoderConfig
from xcresult_decoding.models.model_object_envelope import ModelObjectEnvelope
from xcresult_decoding.models.model_registry_drift_report import (
    ModelRegistryDriftReport,
)
from xcresult_decoding.models.model_result_node import (
    ModelOpaqueObject,
    ModelResultNode,
)
from xcresult_decoding.models.model_result_object_type import ModelResultObjectType
from xcresult_decoding.models.model_result_value import ModelResultValue
from xcresult_decoding.models.model_type_resolution import ModelTypeResolution

__all__: list[str] = [
    "DECODE_CONTEXT_KEY",
    "ModelDecodeContext",
    "ModelDecodeResult",
    "ModelDecoderConfig",
    "ModelObjectEnvelope",
    "ModelOpaqueObject",
    "ModelRegistryDriftReport",
    "ModelResultNode",
    "ModelResultObjectType",
    "ModelResultValue",
    "ModelTypeResolution",
]
