# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for heterogeneous object, list and field decoding.

Tests cover:
- decode_list keeps matching subtypes in order and skips the rest
- decode_list_results outcome reporting
- decode_object_optional absent / mismatched handling
- decode_object fallback (warned) and strict mode
- Opaque decoding of unknown chains
- Depth bound and document paths in errors
- Scalar envelopes and Array unwrapping
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import uuid4

import pytest

from xcresult_decoding.enums import EnumDecodeOutcome
from xcresult_decoding.errors import (
    MalformedDocumentError,
    ShapeMismatchError,
    TypeChainDepthError,
)
from xcresult_decoding.models import (
    ModelDecodeContext,
    ModelDecoderConfig,
    ModelOpaqueObject,
    ModelResultNode,
)
from xcresult_decoding.runtime import (
    RegistryTypeFamily,
    decode_list,
    decode_list_results,
    decode_object,
    decode_object_optional,
    decode_scalar,
    decode_scalar_optional,
    unwrap_array,
)
from xcresult_decoding.shapes import (
    ModelActionRecord,
    ModelActionTestMetadata,
    ModelActionTestSummary,
    ModelActionTestSummaryGroup,
    ModelActionTestSummaryIdentifiableObject,
    ModelIssueSummary,
    ModelResultMetrics,
    ModelTestFailureIssueSummary,
)
from tests.helpers import (
    action_record,
    date,
    descriptor,
    double,
    group_node,
    integer,
    issue,
    metadata_node,
    obj,
    string,
    summary_node,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def mixed_tests() -> list[object]:
    """Five elements of which three are identifiable test summaries."""
    return [
        summary_node("testLogin"),
        obj("FutureDiagnostic", "FutureBase", note=string("unknown")),
        group_node("LoginTests", summary_node("testLogout")),
        issue("not a test"),
        metadata_node("testSignup"),
    ]


# =============================================================================
# Lists
# =============================================================================


class TestDecodeList:
    """Tests for decode_list() and decode_list_results()."""

    def test_keeps_matching_subtypes_in_order(
        self, mixed_tests: list[object], decode_context: ModelDecodeContext
    ) -> None:
        decoded = decode_list(
            mixed_tests, ModelActionTestSummaryIdentifiableObject, decode_context
        )

        assert [type(node) for node in decoded] == [
            ModelActionTestSummary,
            ModelActionTestSummaryGroup,
            ModelActionTestMetadata,
        ]
        assert [node.name for node in decoded] == ["testLogin", "LoginTests", "testSignup"]

    def test_results_report_each_outcome(
        self, mixed_tests: list[object], decode_context: ModelDecodeContext
    ) -> None:
        results = decode_list_results(
            mixed_tests, ModelActionTestSummaryIdentifiableObject, decode_context
        )

        assert [result.outcome for result in results] == [
            EnumDecodeOutcome.DECODED,
            EnumDecodeOutcome.SKIPPED_UNRESOLVED,
            EnumDecodeOutcome.DECODED,
            EnumDecodeOutcome.SKIPPED_MISMATCHED,
            EnumDecodeOutcome.DECODED,
        ]
        assert results[1].type_name == "FutureDiagnostic"
        assert results[1].value is None
        assert results[3].resolved_name == "IssueSummary"

    def test_unknown_subtype_decodes_as_registered_ancestor(
        self, decode_context: ModelDecodeContext
    ) -> None:
        raw = obj(
            "ActionTestSummaryParameterized",
            "ActionTestSummaryIdentifiableObject",
            "ActionAbstractTestSummary",
            name=string("testMatrix"),
            identifier=string("Suite/testMatrix"),
        )

        decoded = decode_list([raw], ModelActionTestSummaryIdentifiableObject, decode_context)

        assert type(decoded[0]) is ModelActionTestSummaryIdentifiableObject
        assert decoded[0].type_name == "ActionTestSummaryParameterized"

    def test_base_node_keeps_everything(
        self, mixed_tests: list[object], decode_context: ModelDecodeContext
    ) -> None:
        decoded = decode_list(mixed_tests, ModelResultNode, decode_context)

        assert len(decoded) == 5
        assert type(decoded[1]) is ModelOpaqueObject

    def test_empty_list(self, decode_context: ModelDecodeContext) -> None:
        assert decode_list([], ModelIssueSummary, decode_context) == []

    def test_non_list_is_malformed(self, decode_context: ModelDecodeContext) -> None:
        with pytest.raises(MalformedDocumentError, match="Expected an array"):
            decode_list({"not": "a list"}, ModelIssueSummary, decode_context)

    def test_element_without_discriminator_is_malformed(
        self, decode_context: ModelDecodeContext
    ) -> None:
        with pytest.raises(MalformedDocumentError, match="_type") as exc_info:
            decode_list([issue("ok"), {"message": "no type"}], ModelIssueSummary, decode_context)

        assert exc_info.value.path == "[1]"

    def test_decoding_is_repeatable(
        self, mixed_tests: list[object], decode_context: ModelDecodeContext
    ) -> None:
        first = decode_list(mixed_tests, ModelResultNode, decode_context)
        second = decode_list(mixed_tests, ModelResultNode, decode_context)

        assert first == second


# =============================================================================
# Optional objects
# =============================================================================


class TestDecodeObjectOptional:
    """Tests for decode_object_optional()."""

    def test_absent_is_none(self, decode_context: ModelDecodeContext) -> None:
        assert decode_object_optional(None, ModelIssueSummary, decode_context) is None

    def test_mismatched_is_none(self, decode_context: ModelDecodeContext) -> None:
        result = decode_object_optional(
            summary_node("testLogin"), ModelIssueSummary, decode_context
        )

        assert result is None

    def test_matching_subtype_is_decoded(self, decode_context: ModelDecodeContext) -> None:
        raw = obj(
            "TestFailureIssueSummary",
            "IssueSummary",
            issueType=string("Uncategorized"),
            message=string("failed"),
            testCaseName=string("testLogin()"),
        )

        result = decode_object_optional(raw, ModelIssueSummary, decode_context)

        assert isinstance(result, ModelTestFailureIssueSummary)
        assert result.test_case_name == "testLogin()"


# =============================================================================
# Single objects
# =============================================================================


class TestDecodeObject:
    """Tests for decode_object() resolution, fallback and strict mode."""

    def test_resolved_subclass(self, decode_context: ModelDecodeContext) -> None:
        decoded = decode_object(
            group_node("Suite", summary_node("testA"), metadata_node("testB")),
            ModelActionTestSummaryIdentifiableObject,
            decode_context,
        )

        assert isinstance(decoded, ModelActionTestSummaryGroup)
        assert [type(test) for test in decoded.subtests] == [
            ModelActionTestSummary,
            ModelActionTestMetadata,
        ]

    def test_mismatch_falls_back_to_expected(
        self,
        decode_context: ModelDecodeContext,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        raw = obj(
            "IssueSummary",
            issueType=string("Uncategorized"),
            message=string("failed"),
            testCaseName=string("testLogin()"),
        )

        with caplog.at_level(logging.WARNING):
            decoded = decode_object(raw, ModelTestFailureIssueSummary, decode_context)

        assert isinstance(decoded, ModelTestFailureIssueSummary)
        assert decoded.type_name == "IssueSummary"
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "IssueSummary" in warnings[0].getMessage()

    def test_incompatible_fallback_is_malformed(
        self, decode_context: ModelDecodeContext
    ) -> None:
        with pytest.raises(MalformedDocumentError, match="ModelActionRecord"):
            decode_object(issue("not an action"), ModelActionRecord, decode_context)

    def test_strict_mode_raises_shape_mismatch(
        self, strict_context: ModelDecodeContext
    ) -> None:
        with pytest.raises(ShapeMismatchError) as exc_info:
            decode_object(issue("x"), ModelTestFailureIssueSummary, strict_context)

        assert exc_info.value.context["expected_type"] == "ModelTestFailureIssueSummary"
        assert exc_info.value.context["resolved_type"] == "ModelIssueSummary"

    def test_unknown_chain_is_opaque(self, decode_context: ModelDecodeContext) -> None:
        decoded = decode_object(
            obj("FutureThing", payload=string("kept out")),
            ModelResultNode,
            decode_context,
        )

        assert type(decoded) is ModelOpaqueObject
        assert decoded.type_name == "FutureThing"

    def test_non_object_is_malformed(self, decode_context: ModelDecodeContext) -> None:
        with pytest.raises(MalformedDocumentError, match="got array"):
            decode_object([1, 2], ModelIssueSummary, decode_context)


# =============================================================================
# Depth bound
# =============================================================================


class TestTypeChainDepth:
    """A supertype chain longer than max_type_depth is a hard failure."""

    def test_default_bound(self, decode_context: ModelDecodeContext) -> None:
        names = [f"Level{i}" for i in range(80)]
        raw = {"_type": descriptor(*names)}

        with pytest.raises(TypeChainDepthError) as exc_info:
            decode_list([raw], ModelResultNode, decode_context)

        assert exc_info.value.path == "[0]"
        assert exc_info.value.context["max_depth"] == 64

    def test_configured_bound(self, default_family: RegistryTypeFamily) -> None:
        context = ModelDecodeContext(
            family=default_family,
            config=ModelDecoderConfig(max_type_depth=2),
        )

        with pytest.raises(TypeChainDepthError):
            decode_object(
                {"_type": descriptor("A", "B", "IssueSummary")},
                ModelIssueSummary,
                context,
            )

    def test_chain_at_largest_configurable_bound(
        self, default_family: RegistryTypeFamily
    ) -> None:
        context = ModelDecodeContext(
            family=default_family,
            config=ModelDecoderConfig(max_type_depth=4096),
        )
        names = [f"Level{i}" for i in range(4095)]
        raw = obj(
            *names,
            "IssueSummary",
            issueType=string("Error"),
            message=string("deep"),
        )

        decoded = decode_object(raw, ModelIssueSummary, context)

        assert type(decoded) is ModelIssueSummary
        assert decoded.result_type.name == "Level0"
        assert decoded.message == "deep"

        raw["_type"] = descriptor("Extra", *names, "IssueSummary")
        with pytest.raises(TypeChainDepthError):
            decode_object(raw, ModelIssueSummary, context)

    def test_depth_error_is_malformed_input(self, decode_context: ModelDecodeContext) -> None:
        raw = {"_type": descriptor(*[f"Level{i}" for i in range(65)])}

        with pytest.raises(MalformedDocumentError):
            decode_object(raw, ModelResultNode, decode_context)


# =============================================================================
# Error paths
# =============================================================================


class TestErrorPaths:
    """Decode failures point at the offending value."""

    def test_missing_required_field(self, decode_context: ModelDecodeContext) -> None:
        record = action_record()
        del record["actionResult"]["status"]  # type: ignore[attr-defined]

        with pytest.raises(MalformedDocumentError) as exc_info:
            decode_list([record], ModelActionRecord, decode_context.child("actions"))

        assert exc_info.value.path == "actions[0].actionResult.status"

    def test_required_scalar_that_fails_coercion(
        self, decode_context: ModelDecodeContext
    ) -> None:
        raw = summary_node("testLogin", duration="fast")

        with pytest.raises(MalformedDocumentError) as exc_info:
            decode_object(raw, ModelActionTestSummary, decode_context)

        assert exc_info.value.path == "duration"

    def test_optional_scalar_that_fails_coercion_is_absent(
        self, decode_context: ModelDecodeContext
    ) -> None:
        raw = obj(
            "ActionTestActivitySummary",
            title=string("Start Test"),
            activityType=string("com.apple.dt.xctest.activity-type.internal"),
            uuid=string("A1"),
            start=date("yesterday"),
        )

        decoded = decode_object(raw, ModelResultNode, decode_context)

        assert decoded.start is None  # type: ignore[attr-defined]

    def test_defaulted_scalar_that_fails_coercion_uses_default(
        self, decode_context: ModelDecodeContext
    ) -> None:
        raw = obj(
            "ResultMetrics",
            testsCount=integer("abc"),
            errorCount=integer(2),
        )

        decoded = decode_object(raw, ModelResultMetrics, decode_context)

        assert decoded.tests_count == 0
        assert decoded.error_count == 2

    def test_correlation_id_is_attached(self, default_family: RegistryTypeFamily) -> None:
        correlation_id = uuid4()
        context = ModelDecodeContext(
            family=default_family,
            correlation_id=correlation_id,
        )

        with pytest.raises(MalformedDocumentError) as exc_info:
            decode_object("text", ModelIssueSummary, context)

        assert exc_info.value.correlation_id == correlation_id


# =============================================================================
# Scalars and arrays
# =============================================================================


class TestScalarsAndArrays:
    """Tests for decode_scalar() and unwrap_array()."""

    def test_decode_scalar(self, decode_context: ModelDecodeContext) -> None:
        assert decode_scalar(integer(42), decode_context) == 42
        assert decode_scalar(double("0.5"), decode_context) == 0.5
        assert isinstance(
            decode_scalar(date("2024-03-01T10:15:30.123Z"), decode_context), datetime
        )

    def test_decode_scalar_failure_is_absent(self, decode_context: ModelDecodeContext) -> None:
        assert decode_scalar(integer("4x"), decode_context) is None

    def test_decode_scalar_optional(self, decode_context: ModelDecodeContext) -> None:
        assert decode_scalar_optional(None, decode_context) is None
        assert decode_scalar_optional(string("s"), decode_context) == "s"

    def test_decode_scalar_requires_value(self, decode_context: ModelDecodeContext) -> None:
        with pytest.raises(MalformedDocumentError):
            decode_scalar({"_type": {"_name": "Int"}}, decode_context)

    def test_unwrap_array_object_and_bare_list(
        self, decode_context: ModelDecodeContext
    ) -> None:
        values = [string("a")]
        wrapped = {"_type": {"_name": "Array"}, "_values": values}

        assert unwrap_array(wrapped, decode_context) == values
        assert unwrap_array(values, decode_context) == values

    def test_unwrap_array_without_values_is_malformed(
        self, decode_context: ModelDecodeContext
    ) -> None:
        with pytest.raises(MalformedDocumentError) as exc_info:
            unwrap_array({"_type": {"_name": "Array"}}, decode_context.child("subtests"))

        assert exc_info.value.path == "subtests._values"
