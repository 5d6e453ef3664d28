# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Document Decode Entry Point.

The only entry point that accepts raw bytes. A document is a top-level JSON
array of self-describing objects; each element is resolved through the type
family and kept only if its shape is a subclass of the expected type.

Element ``_type`` values may be a descriptor object (``{"_name": ...}``) or a
bare type-name string; strings are normalized to descriptors before
resolution.

Example:
    >>> records = decode_document(
    ...     payload,
    ...     ModelActionsInvocationRecord,
    ...     get_default_type_family(),
    ... )
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import cast
from uuid import UUID

from xcresult_decoding.errors import MalformedDocumentError, ModelDecodeErrorContext
from xcresult_decoding.models.model_decode_context import ModelDecodeContext
from xcresult_decoding.models.model_decode_result import ModelDecodeResult
from xcresult_decoding.models.model_decoder_config import ModelDecoderConfig
from xcresult_decoding.protocols import ProtocolTypeFamily
from xcresult_decoding.runtime.decoder_heterogeneous import (
    TYPE_KEY,
    T,
    decode_list_results,
)
from xcresult_decoding.runtime.registry_drift_audit import audit_registry_drift

logger = logging.getLogger(__name__)

_NAME_KEY = "_name"


def decode_document_results(
    data: bytes | str,
    expected: type[T],
    family: ProtocolTypeFamily,
    *,
    config: ModelDecoderConfig | None = None,
    correlation_id: UUID | None = None,
) -> list[ModelDecodeResult]:
    """Decode a document and report the outcome of every top-level element.

    Args:
        data: UTF-8 JSON bytes or text.
        expected: Shape class elements must be a subclass of to be decoded.
        family: Frozen type family used for resolution.
        config: Decoder configuration; defaults apply when None.
        correlation_id: ID attached to any error raised by this decode.

    Returns:
        One ModelDecodeResult per top-level element, in document order.

    Raises:
        MalformedDocumentError: If the buffer is not valid JSON, is nested
            too deeply, the top level is not an array, or an element cannot
            be decoded.
    """
    config = config or ModelDecoderConfig()
    context = ModelDecodeContext(family=family, config=config, correlation_id=correlation_id)

    raw = _parse_json(data, correlation_id)
    if not isinstance(raw, list):
        raise MalformedDocumentError(
            f"Document top level must be a JSON array, got {type(raw).__name__}",
            context=context.error_context("decode_document"),
        )

    if config.audit_registry_drift:
        _log_registry_drift(raw, family)

    elements = [_normalize_type_descriptor(element) for element in raw]
    try:
        results = decode_list_results(elements, expected, context)
    except RecursionError as e:
        raise MalformedDocumentError(
            "Document is nested too deeply to decode",
            context=context.error_context("decode_document"),
        ) from e
    logger.debug(
        "Decoded document: %d of %d elements matched %s",
        sum(1 for result in results if result.is_decoded),
        len(results),
        expected.__name__,
        extra={
            "expected_type": expected.__name__,
            "element_count": len(results),
            "correlation_id": str(correlation_id) if correlation_id else None,
        },
    )
    return results


def decode_document(
    data: bytes | str,
    expected: type[T],
    family: ProtocolTypeFamily,
    *,
    config: ModelDecoderConfig | None = None,
    correlation_id: UUID | None = None,
) -> list[T]:
    """Decode a document into the top-level elements that match ``expected``.

    Elements that resolve to an unrelated or unknown shape are skipped. Same
    arguments and errors as decode_document_results.
    """
    return [
        cast(T, result.value)
        for result in decode_document_results(
            data,
            expected,
            family,
            config=config,
            correlation_id=correlation_id,
        )
        if result.is_decoded
    ]


def _parse_json(data: bytes | str, correlation_id: UUID | None) -> object:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(
            f"Document is not valid JSON: {e}",
            context=ModelDecodeErrorContext(
                operation="parse_json",
                correlation_id=correlation_id,
            ),
        ) from e
    except RecursionError as e:
        raise MalformedDocumentError(
            "Document is nested too deeply to parse",
            context=ModelDecodeErrorContext(
                operation="parse_json",
                correlation_id=correlation_id,
            ),
        ) from e


def _normalize_type_descriptor(element: object) -> object:
    if isinstance(element, Mapping):
        type_value = element.get(TYPE_KEY)
        if isinstance(type_value, str):
            return {**element, TYPE_KEY: {_NAME_KEY: type_value}}
    return element


def _log_registry_drift(raw: list[object], family: ProtocolTypeFamily) -> None:
    report = audit_registry_drift(raw, family)
    if report.has_drift:
        logger.warning(
            "Document uses %d type name(s) not registered in the type family: %s",
            len(report.unregistered),
            ", ".join(report.unregistered),
            extra={"unregistered": list(report.unregistered)},
        )


__all__ = ["decode_document", "decode_document_results"]
