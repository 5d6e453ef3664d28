# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Issue, metric and coverage shapes."""

from __future__ import annotations

from pydantic import Field

from xcresult_decoding.shapes.model_references import (
    ModelDocumentLocation,
    ModelReference,
)
from xcresult_decoding.shapes.model_result_object import ModelResultObject


class ModelIssueSummary(ModelResultObject):
    """A build or test issue (error, warning, analyzer warning)."""

    issue_type: str
    message: str
    producing_target: str | None = None
    document_location_in_creating_workspace: ModelDocumentLocation | None = None


class ModelTestFailureIssueSummary(ModelIssueSummary):
    test_case_name: str


class ModelResultIssueSummaries(ModelResultObject):
    """Issues grouped by severity.

    ``testFailureSummaries`` arrays may mix plain IssueSummary objects in;
    only TestFailureIssueSummary elements are kept there.
    """

    analyzer_warning_summaries: list[ModelIssueSummary] = Field(default_factory=list)
    error_summaries: list[ModelIssueSummary] = Field(default_factory=list)
    test_failure_summaries: list[ModelTestFailureIssueSummary] = Field(default_factory=list)
    warning_summaries: list[ModelIssueSummary] = Field(default_factory=list)


class ModelResultMetrics(ModelResultObject):
    """Issue and test counters. Documents omit counters that are zero."""

    analyzer_warning_count: int = 0
    error_count: int = 0
    tests_count: int = 0
    tests_failed_count: int = 0
    tests_skipped_count: int = 0
    warning_count: int = 0


class ModelCodeCoverageInfo(ModelResultObject):
    has_coverage_data: bool = False
    report_ref: ModelReference | None = None
    archive_ref: ModelReference | None = None


__all__ = [
    "ModelCodeCoverageInfo",
    "ModelIssueSummary",
    "ModelResultIssueSummaries",
    "ModelResultMetrics",
    "ModelTestFailureIssueSummary",
]
