# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Concrete shapes of the xcresult document model and the default family."""

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
from xcresult_decoding.shapes.model_result_object import ModelResultObject
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
from xcresult_decoding.shapes.type_family_default import (
    DEFAULT_SHAPES,
    build_default_type_family,
    get_default_type_family,
)

__all__: list[str] = [
    "DEFAULT_SHAPES",
    "ModelActionAbstractTestSummary",
    "ModelActionDeviceRecord",
    "ModelActionPlatformRecord",
    "ModelActionRecord",
    "ModelActionResult",
    "ModelActionRunDestinationRecord",
    "ModelActionSDKRecord",
    "ModelActionTestActivitySummary",
    "ModelActionTestAttachment",
    "ModelActionTestFailureSummary",
    "ModelActionTestMetadata",
    "ModelActionTestPerformanceMetricSummary",
    "ModelActionTestPlanRunSummaries",
    "ModelActionTestPlanRunSummary",
    "ModelActionTestSummary",
    "ModelActionTestSummaryGroup",
    "ModelActionTestSummaryIdentifiableObject",
    "ModelActionTestableSummary",
    "ModelActionsInvocationMetadata",
    "ModelActionsInvocationRecord",
    "ModelActivityLogCommandInvocationSection",
    "ModelActivityLogMajorSection",
    "ModelActivityLogMessage",
    "ModelActivityLogMessageAnnotation",
    "ModelActivityLogSection",
    "ModelActivityLogTargetBuildSection",
    "ModelActivityLogUnitTestSection",
    "ModelArchiveInfo",
    "ModelCodeCoverageInfo",
    "ModelDocumentLocation",
    "ModelEntityIdentifier",
    "ModelIssueSummary",
    "ModelObjectID",
    "ModelReference",
    "ModelResultArray",
    "ModelResultIssueSummaries",
    "ModelResultMetrics",
    "ModelResultObject",
    "ModelSortedKeyValueArray",
    "ModelSortedKeyValueArrayPair",
    "ModelTestFailureIssueSummary",
    "ModelTypeDefinition",
    "build_default_type_family",
    "get_default_type_family",
]
