# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test plan, test summary and activity shapes.

The summary hierarchy in documents:

    ActionAbstractTestSummary
    ├── ActionTestPlanRunSummary
    ├── ActionTestableSummary
    └── ActionTestSummaryIdentifiableObject
        ├── ActionTestSummaryGroup
        ├── ActionTestSummary
        └── ActionTestMetadata

``ActionTestableSummary.tests`` and ``ActionTestSummaryGroup.subtests`` are
heterogeneous: groups, metadata and full summaries appear side by side and
each element decodes to its own shape.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from xcresult_decoding.shapes.model_references import ModelReference
from xcresult_decoding.shapes.model_result_object import ModelResultObject
from xcresult_decoding.shapes.model_sorted_key_value_array import (
    ModelSortedKeyValueArray,
)


class ModelActionTestAttachment(ModelResultObject):
    """Attachment recorded by a test activity. The payload lives behind payloadRef."""

    uniform_type_identifier: str
    name: str | None = None
    uuid: str | None = None
    timestamp: datetime | None = None
    user_info: ModelSortedKeyValueArray | None = None
    lifetime: str
    in_activity_identifier: int = 0
    filename: str | None = None
    payload_ref: ModelReference | None = None
    payload_size: int = 0


class ModelActionTestActivitySummary(ModelResultObject):
    title: str
    activity_type: str
    uuid: str
    start: datetime | None = None
    finish: datetime | None = None
    attachments: list[ModelActionTestAttachment] = Field(default_factory=list)
    subactivities: list[ModelActionTestActivitySummary] = Field(default_factory=list)
    failure_summary_ids: list[str] = Field(
        default_factory=list, alias="failureSummaryIDs"
    )


class ModelActionTestFailureSummary(ModelResultObject):
    message: str | None = None
    file_name: str | None = None
    line_number: int = 0
    is_performance_failure: bool = False
    uuid: str | None = None
    issue_type: str | None = None
    detailed_description: str | None = None
    attachments: list[ModelActionTestAttachment] = Field(default_factory=list)
    timestamp: datetime | None = None
    is_top_level_failure: bool = False


class ModelActionTestPerformanceMetricSummary(ModelResultObject):
    display_name: str
    unit_of_measurement: str
    measurements: list[float] = Field(default_factory=list)
    identifier: str | None = None
    baseline_name: str | None = None
    baseline_average: float | None = None
    max_percent_regression: float | None = None
    max_percent_relative_standard_deviation: float | None = None
    max_regression: float | None = None
    max_standard_deviation: float | None = None
    polarity: str | None = None


class ModelActionAbstractTestSummary(ModelResultObject):
    name: str | None = None


class ModelActionTestSummaryIdentifiableObject(ModelActionAbstractTestSummary):
    identifier: str | None = None


class ModelActionTestSummaryGroup(ModelActionTestSummaryIdentifiableObject):
    duration: float
    subtests: list[ModelActionTestSummaryIdentifiableObject] = Field(
        default_factory=list
    )


class ModelActionTestMetadata(ModelActionTestSummaryIdentifiableObject):
    """Lightweight test entry; the full ActionTestSummary is behind summaryRef."""

    test_status: str
    duration: float | None = None
    summary_ref: ModelReference | None = None
    performance_metrics_count: int | None = None
    failure_summaries_count: int | None = None
    activity_summaries_count: int | None = None


class ModelActionTestSummary(ModelActionTestSummaryIdentifiableObject):
    test_status: str
    duration: float
    performance_metrics: list[ModelActionTestPerformanceMetricSummary] = Field(
        default_factory=list
    )
    failure_summaries: list[ModelActionTestFailureSummary] = Field(default_factory=list)
    activity_summaries: list[ModelActionTestActivitySummary] = Field(
        default_factory=list
    )


class ModelActionTestableSummary(ModelActionAbstractTestSummary):
    project_relative_path: str | None = None
    target_name: str | None = None
    test_kind: str | None = None
    tests: list[ModelActionTestSummaryIdentifiableObject] = Field(default_factory=list)
    diagnostics_directory_name: str | None = None
    failure_summaries: list[ModelActionTestFailureSummary] = Field(default_factory=list)
    test_language: str | None = None
    test_region: str | None = None


class ModelActionTestPlanRunSummary(ModelActionAbstractTestSummary):
    testable_summaries: list[ModelActionTestableSummary] = Field(default_factory=list)


class ModelActionTestPlanRunSummaries(ModelResultObject):
    """Object behind ``ActionResult.testsRef``."""

    summaries: list[ModelActionTestPlanRunSummary] = Field(default_factory=list)


__all__ = [
    "ModelActionAbstractTestSummary",
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
]
