# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Closed set of type names understood by the default type family.

Every member must be registered by ``build_default_type_family()``; the
builder refuses to freeze a family that misses one, so adding a member here
without a shape fails at startup rather than at decode time.
"""

from __future__ import annotations

from enum import Enum


class EnumResultTypeName(str, Enum):
    """Discriminator values of the xcresult document model."""

    ACTION_ABSTRACT_TEST_SUMMARY = "ActionAbstractTestSummary"
    ACTION_DEVICE_RECORD = "ActionDeviceRecord"
    ACTION_PLATFORM_RECORD = "ActionPlatformRecord"
    ACTION_RECORD = "ActionRecord"
    ACTION_RESULT = "ActionResult"
    ACTION_RUN_DESTINATION_RECORD = "ActionRunDestinationRecord"
    ACTION_SDK_RECORD = "ActionSDKRecord"
    ACTION_TEST_ACTIVITY_SUMMARY = "ActionTestActivitySummary"
    ACTION_TEST_ATTACHMENT = "ActionTestAttachment"
    ACTION_TEST_FAILURE_SUMMARY = "ActionTestFailureSummary"
    ACTION_TEST_METADATA = "ActionTestMetadata"
    ACTION_TEST_PERFORMANCE_METRIC_SUMMARY = "ActionTestPerformanceMetricSummary"
    ACTION_TEST_PLAN_RUN_SUMMARIES = "ActionTestPlanRunSummaries"
    ACTION_TEST_PLAN_RUN_SUMMARY = "ActionTestPlanRunSummary"
    ACTION_TEST_SUMMARY = "ActionTestSummary"
    ACTION_TEST_SUMMARY_GROUP = "ActionTestSummaryGroup"
    ACTION_TEST_SUMMARY_IDENTIFIABLE_OBJECT = "ActionTestSummaryIdentifiableObject"
    ACTION_TESTABLE_SUMMARY = "ActionTestableSummary"
    ACTIONS_INVOCATION_METADATA = "ActionsInvocationMetadata"
    ACTIONS_INVOCATION_RECORD = "ActionsInvocationRecord"
    ACTIVITY_LOG_COMMAND_INVOCATION_SECTION = "ActivityLogCommandInvocationSection"
    ACTIVITY_LOG_MAJOR_SECTION = "ActivityLogMajorSection"
    ACTIVITY_LOG_MESSAGE = "ActivityLogMessage"
    ACTIVITY_LOG_MESSAGE_ANNOTATION = "ActivityLogMessageAnnotation"
    ACTIVITY_LOG_SECTION = "ActivityLogSection"
    ACTIVITY_LOG_TARGET_BUILD_SECTION = "ActivityLogTargetBuildSection"
    ACTIVITY_LOG_UNIT_TEST_SECTION = "ActivityLogUnitTestSection"
    ARCHIVE_INFO = "ArchiveInfo"
    ARRAY = "Array"
    BOOL = "Bool"
    CODE_COVERAGE_INFO = "CodeCoverageInfo"
    DATE = "Date"
    DOCUMENT_LOCATION = "DocumentLocation"
    DOUBLE = "Double"
    ENTITY_IDENTIFIER = "EntityIdentifier"
    INT = "Int"
    ISSUE_SUMMARY = "IssueSummary"
    OBJECT_ID = "ObjectID"
    REFERENCE = "Reference"
    RESULT_ISSUE_SUMMARIES = "ResultIssueSummaries"
    RESULT_METRICS = "ResultMetrics"
    SORTED_KEY_VALUE_ARRAY = "SortedKeyValueArray"
    SORTED_KEY_VALUE_ARRAY_PAIR = "SortedKeyValueArrayPair"
    STRING = "String"
    TEST_FAILURE_ISSUE_SUMMARY = "TestFailureIssueSummary"
    TYPE_DEFINITION = "TypeDefinition"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumResultTypeName"]
