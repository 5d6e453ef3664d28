# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Heterogeneous object and field decoding.

Every polymorphic value is decoded in two passes over the same raw payload:

    1. Parse the thin envelope (``_type`` descriptor only)
    2. Resolve the descriptor through the type family
    3. Validate the raw payload against the resolved shape

Policies when the resolved shape is not a subclass of the caller's expected
type:

    - decode_object: retry the payload as the expected type (a WARNING is
      logged), or raise ShapeMismatchError with ``strict_shape_match``
    - decode_object_optional: return None
    - decode_list: skip the element; decode_list_results reports why

Unknown type chains resolve to ModelOpaqueObject and follow the same rules.
Scalar coercion failures yield None for that value only. A field with a
default falls back to it; a required field rejects the None, which surfaces
as a MalformedDocumentError carrying the document path.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from datetime import datetime
from typing import TypeVar, Union, cast, get_args, get_origin

from pydantic import BaseModel, ValidationError

from xcresult_decoding.enums import EnumDecodeOutcome
from xcresult_decoding.errors import (
    MalformedDocumentError,
    ShapeMismatchError,
    TypeChainDepthError,
)
from xcresult_decoding.models.model_decode_context import ModelDecodeContext
from xcresult_decoding.models.model_decode_result import ModelDecodeResult
from xcresult_decoding.models.model_object_envelope import ModelObjectEnvelope
from xcresult_decoding.models.model_result_node import ModelResultNode
from xcresult_decoding.models.model_result_value import ModelResultValue
from xcresult_decoding.models.model_type_resolution import ModelTypeResolution
from xcresult_decoding.utils.util_decode_path import format_decode_path
from xcresult_decoding.utils.util_scalar_coercion import ScalarValue

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ModelResultNode)

ARRAY_VALUES_KEY = "_values"
TYPE_KEY = "_type"

# =============================================================================
# Envelope and resolution
# =============================================================================


def parse_object_envelope(raw: object, context: ModelDecodeContext) -> ModelObjectEnvelope:
    """Parse only the ``_type`` descriptor of a raw object.

    Raises:
        MalformedDocumentError: If raw is not a JSON object or has no valid
            ``_type`` discriminator.
    """
    if not isinstance(raw, Mapping):
        raise MalformedDocumentError(
            f"Expected a JSON object, got {_json_kind(raw)}",
            context=context.error_context("parse_envelope"),
        )
    try:
        return ModelObjectEnvelope.model_validate(raw)
    except ValidationError as e:
        raise MalformedDocumentError(
            "Object is missing a valid '_type' discriminator",
            context=context.error_context("parse_envelope"),
            errors=[error["msg"] for error in e.errors()],
        ) from e


def resolve_shape(
    envelope: ModelObjectEnvelope,
    context: ModelDecodeContext,
) -> ModelTypeResolution:
    """Resolve an envelope's descriptor through the context's type family."""
    try:
        return context.family.resolve(
            envelope.result_type,
            max_depth=context.config.max_type_depth,
        )
    except TypeChainDepthError as e:
        raise TypeChainDepthError(
            e.message,
            context=context.error_context("resolve_type", envelope.result_type.name),
            max_depth=context.config.max_type_depth,
        ) from e


def validate_shape(
    shape: type[T],
    raw: object,
    context: ModelDecodeContext,
) -> T:
    """Validate a raw payload against a concrete shape.

    Raises:
        MalformedDocumentError: If pydantic rejects the payload. The path
            points at the first offending field.
    """
    try:
        return shape.model_validate(raw, context=context.as_validation_context())
    except ValidationError as e:
        first = e.errors()[0]
        location = (*context.path, *first["loc"])
        raise MalformedDocumentError(
            f"Failed to decode {shape.__name__}: {first['msg']}",
            context=context.error_context("validate_shape", shape.__name__).model_copy(
                update={"path": format_decode_path(location)}
            ),
            error_count=e.error_count(),
        ) from e


# =============================================================================
# Objects
# =============================================================================


def decode_object(
    raw: object,
    expected: type[T],
    context: ModelDecodeContext,
) -> T:
    """Decode a polymorphic object into its resolved shape.

    If the resolved shape is a subclass of ``expected`` the payload is
    validated against it. Otherwise the payload is validated directly as
    ``expected``; a genuinely incompatible payload then fails inside that
    fallback with a MalformedDocumentError. The fallback is logged at
    WARNING because it can mask a schema mismatch.

    Args:
        raw: The raw JSON object.
        expected: Shape class the caller requires.
        context: Decode context.

    Raises:
        MalformedDocumentError: If the payload cannot be decoded.
        ShapeMismatchError: If ``strict_shape_match`` is set and the
            resolved shape is not a subclass of ``expected``.
    """
    envelope = parse_object_envelope(raw, context)
    resolution = resolve_shape(envelope, context)
    if issubclass(resolution.shape, expected):
        return cast(T, validate_shape(resolution.shape, raw, context))

    if context.config.strict_shape_match:
        raise ShapeMismatchError(
            f"{resolution.requested_name!r} resolved to {resolution.shape.__name__}, "
            f"which is not a {expected.__name__}",
            expected_type=expected.__name__,
            resolved_type=resolution.shape.__name__,
            context=context.error_context("decode_object", resolution.requested_name),
        )

    logger.warning(
        "Type %s resolved to %s, not %s; decoding as %s at %s",
        resolution.requested_name,
        resolution.shape.__name__,
        expected.__name__,
        expected.__name__,
        context.path_text,
        extra={
            "type_name": resolution.requested_name,
            "resolved_name": resolution.resolved_name,
            "expected_type": expected.__name__,
            "path": context.path_text,
        },
    )
    return validate_shape(expected, raw, context)


def decode_object_optional(
    raw: object | None,
    expected: type[T],
    context: ModelDecodeContext,
) -> T | None:
    """Decode an optional polymorphic object.

    Returns None when the value is absent, and also when it resolves to a
    shape that is not a subclass of ``expected``.
    """
    if raw is None:
        return None
    envelope = parse_object_envelope(raw, context)
    resolution = resolve_shape(envelope, context)
    if not issubclass(resolution.shape, expected):
        logger.debug(
            "Dropping optional %s at %s: resolved to %s, expected %s",
            resolution.requested_name,
            context.path_text,
            resolution.shape.__name__,
            expected.__name__,
            extra={
                "type_name": resolution.requested_name,
                "expected_type": expected.__name__,
                "path": context.path_text,
            },
        )
        return None
    return cast(T, validate_shape(resolution.shape, raw, context))


# =============================================================================
# Lists
# =============================================================================


def unwrap_array(raw: object, context: ModelDecodeContext) -> list[object]:
    """Return the elements of an ``Array`` object or a bare JSON list.

    Raises:
        MalformedDocumentError: If raw is neither, or an Array object has no
            ``_values`` list.
    """
    if isinstance(raw, list):
        return raw
    if isinstance(raw, Mapping):
        values = raw.get(ARRAY_VALUES_KEY)
        if isinstance(values, list):
            return values
        raise MalformedDocumentError(
            f"Array object has no {ARRAY_VALUES_KEY!r} list",
            context=context.child(ARRAY_VALUES_KEY).error_context("unwrap_array"),
        )
    raise MalformedDocumentError(
        f"Expected an array, got {_json_kind(raw)}",
        context=context.error_context("unwrap_array"),
    )


def decode_list_results(
    raw_values: object,
    expected: type[T],
    context: ModelDecodeContext,
) -> list[ModelDecodeResult]:
    """Decode every element of a heterogeneous array and report each outcome.

    The array is walked once. Each element's envelope is parsed and resolved;
    elements whose shape is a subclass of ``expected`` are decoded, the rest
    are recorded as SKIPPED_UNRESOLVED or SKIPPED_MISMATCHED.

    Raises:
        MalformedDocumentError: If raw_values is not a list, or an element is
            missing its discriminator or fails to decode.
    """
    if not isinstance(raw_values, list):
        raise MalformedDocumentError(
            f"Expected an array, got {_json_kind(raw_values)}",
            context=context.error_context("decode_list"),
        )

    results: list[ModelDecodeResult] = []
    for index, raw in enumerate(raw_values):
        element_context = context.child(index)
        envelope = parse_object_envelope(raw, element_context)
        resolution = resolve_shape(envelope, element_context)

        if issubclass(resolution.shape, expected):
            results.append(
                ModelDecodeResult(
                    index=index,
                    outcome=EnumDecodeOutcome.DECODED,
                    type_name=resolution.requested_name,
                    resolved_name=resolution.resolved_name,
                    value=validate_shape(resolution.shape, raw, element_context),
                )
            )
            continue

        outcome = (
            EnumDecodeOutcome.SKIPPED_MISMATCHED
            if resolution.is_resolved
            else EnumDecodeOutcome.SKIPPED_UNRESOLVED
        )
        logger.debug(
            "Skipping %s at %s (%s)",
            resolution.requested_name,
            element_context.path_text,
            outcome,
            extra={
                "type_name": resolution.requested_name,
                "expected_type": expected.__name__,
                "outcome": outcome.value,
                "path": element_context.path_text,
            },
        )
        results.append(
            ModelDecodeResult(
                index=index,
                outcome=outcome,
                type_name=resolution.requested_name,
                resolved_name=resolution.resolved_name,
            )
        )
    return results


def decode_list(
    raw_values: object,
    expected: type[T],
    context: ModelDecodeContext,
) -> list[T]:
    """Decode a heterogeneous array, keeping only elements of ``expected``.

    Input order is preserved; skipped elements are omitted silently.
    """
    return [
        cast(T, result.value)
        for result in decode_list_results(raw_values, expected, context)
        if result.is_decoded
    ]


# =============================================================================
# Scalars
# =============================================================================


def decode_scalar(raw: object, context: ModelDecodeContext) -> ScalarValue | None:
    """Decode a scalar value envelope and coerce it by its type name.

    Returns None when the literal cannot be coerced.

    Raises:
        MalformedDocumentError: If raw is not a value envelope.
    """
    envelope = validate_shape(ModelResultValue, raw, context)
    return envelope.get_value()


def decode_scalar_optional(
    raw: object | None,
    context: ModelDecodeContext,
) -> ScalarValue | None:
    if raw is None:
        return None
    return decode_scalar(raw, context)


def decode_scalar_list(raw_values: list[object], context: ModelDecodeContext) -> list[ScalarValue]:
    """Decode an array of value envelopes, dropping values that fail coercion."""
    values: list[ScalarValue] = []
    for index, raw in enumerate(raw_values):
        value = decode_scalar(raw, context.child(index))
        if value is not None:
            values.append(value)
    return values


# =============================================================================
# Annotation-driven field dispatch
# =============================================================================

_SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool, datetime)


def decode_field_value(
    raw: object,
    annotation: object,
    context: ModelDecodeContext,
) -> object:
    """Decode one raw field according to its Python annotation.

    Supported annotations:
        - ``Shape`` / ``Shape | None``: decode_object / decode_object_optional
        - ``list[Shape]``: decode_list over an Array object or bare list
        - ``list[scalar]``: decode_scalar_list
        - scalar (``str``, ``int``, ``float``, ``bool``, ``datetime``),
          optional or not: decode_scalar

    JSON null is passed through as None and left for pydantic to accept or
    reject. Values that are not envelopes are passed through unchanged.
    """
    if raw is None:
        return None

    optional, inner = _unwrap_optional(annotation)
    if get_origin(inner) is list:
        args = get_args(inner)
        element = args[0] if args else object
        values = unwrap_array(raw, context)
        if _is_shape(element):
            return decode_list(values, element, context)
        return decode_scalar_list(values, context)

    if _is_shape(inner):
        if optional:
            return decode_object_optional(raw, inner, context)
        return decode_object(raw, inner, context)

    if isinstance(raw, Mapping) and (inner in _SCALAR_TYPES or inner is object):
        return decode_scalar(raw, context)
    return raw


def decode_fields(
    shape: type[BaseModel],
    data: Mapping[str, object],
    context: ModelDecodeContext,
) -> dict[str, object]:
    """Run every declared field of ``shape`` present in ``data`` through
    decode_field_value, keyed by document alias. The ``_type`` descriptor
    and undeclared keys are copied unchanged. A present value that decodes
    to None is dropped when the field has a default.
    """
    decoded = dict(data)
    for field_name, field_info in shape.model_fields.items():
        key = field_info.alias or field_name
        if key == TYPE_KEY or key not in data:
            continue
        raw = data[key]
        value = decode_field_value(raw, field_info.annotation, context.child(key))
        if value is None and raw is not None and not field_info.is_required():
            # Undecodable value; the field default applies.
            del decoded[key]
            continue
        decoded[key] = value
    return decoded


def _unwrap_optional(annotation: object) -> tuple[bool, object]:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return True, args[0]
    return False, annotation


def _is_shape(annotation: object) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, ModelResultNode)


def _json_kind(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


__all__ = [
    "ARRAY_VALUES_KEY",
    "decode_field_value",
    "decode_fields",
    "decode_list",
    "decode_list_results",
    "decode_object",
    "decode_object_optional",
    "decode_scalar",
    "decode_scalar_list",
    "decode_scalar_optional",
    "parse_object_envelope",
    "resolve_shape",
    "unwrap_array",
    "validate_shape",
]
