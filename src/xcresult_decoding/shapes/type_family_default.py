# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default xcresult type family.

Maps every EnumResultTypeName member to its shape. The mapping is checked
against the enum when the family is built, so a name without a shape (or a
shape keyed by a name outside the enum) fails immediately.

Special entries:
    - Bool, Date, Double, Int, String: ModelResultValue (coerced by name)
    - Array: ModelResultArray (elements resolved through this same family)
    - SortedKeyValueArray, SortedKeyValueArrayPair: opaque pass-through
"""

from __future__ import annotations

import functools
from typing import Final

from xcresult_decoding.enums import EnumResultTypeName
from xcresult_decoding.errors import TypeFamilyRegistryError
from xcresult_decoding.models.model_result_node import ModelResultNode
from xcresult_decoding.models.model_result_value import ModelResultValue
from xcresult_decoding.runtime.registry_type_family import RegistryTypeFamily
from xcresult_decoding.shapes.model_actions import (
    ModelActionDeviceRecord,
    ModelActionPlatformRecord,
    ModelActionRecord,
    ModelActionResult,
    ModelActionRunDestinationRecord,
    ModelActionSDKRecord,
    ModelActionsInvocationMetadata,
    ModelActionsInvocationRecord,
)
from xcresult_decoding.shapes.model_activity_log import (
    ModelActivityLogCommandInvocationSection,
    ModelActivityLogMajorSection,
    ModelActivityLogMessage,
    ModelActivityLogMessageAnnotation,
    ModelActivityLogSection,
    ModelActivityLogTargetBuildSection,
    ModelActivityLogUnitTestSection,
)
from xcresult_decoding.shapes.model_issues import (
    ModelCodeCoverageInfo,
    ModelIssueSummary,
    ModelResultIssueSummaries,
    ModelResultMetrics,
    ModelTestFailureIssueSummary,
)
from xcresult_decoding.shapes.model_references import (
    ModelArchiveInfo,
    ModelDocumentLocation,
    ModelEntityIdentifier,
    ModelObjectID,
    ModelReference,
    ModelTypeDefinition,
)
from xcresult_decoding.shapes.model_result_array import ModelResultArray
from xcresult_decoding.shapes.model_sorted_key_value_array import (
    ModelSortedKeyValueArray,
    ModelSortedKeyValueArrayPair,
)
from xcresult_decoding.shapes.model_test_summaries import (
    ModelActionAbstractTestSummary,
    ModelActionTestActivitySummary,
    ModelActionTestAttachment,
    ModelActionTestFailureSummary,
    ModelActionTestMetadata,
    ModelActionTestPerformanceMetricSummary,
    ModelActionTestPlanRunSummaries,
    ModelActionTestPlanRunSummary,
    ModelActionTestSummary,
    ModelActionTestSummaryGroup,
    ModelActionTestSummaryIdentifiableObject,
    ModelActionTestableSummary,
)

DEFAULT_FAMILY_NAME: Final[str] = "xcresult"

_N = EnumResultTypeName

DEFAULT_SHAPES: Final[dict[EnumResultTypeName, type[ModelResultNode]]] = {
    _N.ACTION_ABSTRACT_TEST_SUMMARY: ModelActionAbstractTestSummary,
    _N.ACTION_DEVICE_RECORD: ModelActionDeviceRecord,
    _N.ACTION_PLATFORM_RECORD: ModelActionPlatformRecord,
    _N.ACTION_RECORD: ModelActionRecord,
    _N.ACTION_RESULT: ModelActionResult,
    _N.ACTION_RUN_DESTINATION_RECORD: ModelActionRunDestinationRecord,
    _N.ACTION_SDK_RECORD: ModelActionSDKRecord,
    _N.ACTION_TEST_ACTIVITY_SUMMARY: ModelActionTestActivitySummary,
    _N.ACTION_TEST_ATTACHMENT: ModelActionTestAttachment,
    _N.ACTION_TEST_FAILURE_SUMMARY: ModelActionTestFailureSummary,
    _N.ACTION_TEST_METADATA: ModelActionTestMetadata,
    _N.ACTION_TEST_PERFORMANCE_METRIC_SUMMARY: ModelActionTestPerformanceMetricSummary,
    _N.ACTION_TEST_PLAN_RUN_SUMMARIES: ModelActionTestPlanRunSummaries,
    _N.ACTION_TEST_PLAN_RUN_SUMMARY: ModelActionTestPlanRunSummary,
    _N.ACTION_TEST_SUMMARY: ModelActionTestSummary,
    _N.ACTION_TEST_SUMMARY_GROUP: ModelActionTestSummaryGroup,
    _N.ACTION_TEST_SUMMARY_IDENTIFIABLE_OBJECT: ModelActionTestSummaryIdentifiableObject,
    _N.ACTION_TESTABLE_SUMMARY: ModelActionTestableSummary,
    _N.ACTIONS_INVOCATION_METADATA: ModelActionsInvocationMetadata,
    _N.ACTIONS_INVOCATION_RECORD: ModelActionsInvocationRecord,
    _N.ACTIVITY_LOG_COMMAND_INVOCATION_SECTION: ModelActivityLogCommandInvocationSection,
    _N.ACTIVITY_LOG_MAJOR_SECTION: ModelActivityLogMajorSection,
    _N.ACTIVITY_LOG_MESSAGE: ModelActivityLogMessage,
    _N.ACTIVITY_LOG_MESSAGE_ANNOTATION: ModelActivityLogMessageAnnotation,
    _N.ACTIVITY_LOG_SECTION: ModelActivityLogSection,
    _N.ACTIVITY_LOG_TARGET_BUILD_SECTION: ModelActivityLogTargetBuildSection,
    _N.ACTIVITY_LOG_UNIT_TEST_SECTION: ModelActivityLogUnitTestSection,
    _N.ARCHIVE_INFO: ModelArchiveInfo,
    _N.ARRAY: ModelResultArray,
    _N.BOOL: ModelResultValue,
    _N.CODE_COVERAGE_INFO: ModelCodeCoverageInfo,
    _N.DATE: ModelResultValue,
    _N.DOCUMENT_LOCATION: ModelDocumentLocation,
    _N.DOUBLE: ModelResultValue,
    _N.ENTITY_IDENTIFIER: ModelEntityIdentifier,
    _N.INT: ModelResultValue,
    _N.ISSUE_SUMMARY: ModelIssueSummary,
    _N.OBJECT_ID: ModelObjectID,
    _N.REFERENCE: ModelReference,
    _N.RESULT_ISSUE_SUMMARIES: ModelResultIssueSummaries,
    _N.RESULT_METRICS: ModelResultMetrics,
    _N.SORTED_KEY_VALUE_ARRAY: ModelSortedKeyValueArray,
    _N.SORTED_KEY_VALUE_ARRAY_PAIR: ModelSortedKeyValueArrayPair,
    _N.STRING: ModelResultValue,
    _N.TEST_FAILURE_ISSUE_SUMMARY: ModelTestFailureIssueSummary,
    _N.TYPE_DEFINITION: ModelTypeDefinition,
}


def build_default_type_family(
    shapes: dict[EnumResultTypeName, type[ModelResultNode]] | None = None,
) -> RegistryTypeFamily:
    """Build and freeze a type family covering every EnumResultTypeName.

    Args:
        shapes: Mapping to register instead of DEFAULT_SHAPES.

    Raises:
        TypeFamilyRegistryError: If the mapping misses an enum member or
            contains a key that is not one.
    """
    shapes = DEFAULT_SHAPES if shapes is None else shapes

    unknown = sorted(str(name) for name in shapes if not isinstance(name, EnumResultTypeName))
    missing = sorted(member.value for member in EnumResultTypeName if member not in shapes)
    if unknown or missing:
        raise TypeFamilyRegistryError(
            f"Default type family does not match EnumResultTypeName "
            f"(missing={missing}, unknown={unknown})",
            missing=missing,
            unknown=unknown,
        )

    family = RegistryTypeFamily(DEFAULT_FAMILY_NAME)
    family.register_many({name.value: shape for name, shape in shapes.items()})
    family.freeze()
    return family


@functools.lru_cache(maxsize=1)
def get_default_type_family() -> RegistryTypeFamily:
    """Return the process-wide default family, built on first use."""
    return build_default_type_family()


__all__ = [
    "DEFAULT_FAMILY_NAME",
    "DEFAULT_SHAPES",
    "build_default_type_family",
    "get_default_type_family",
]
