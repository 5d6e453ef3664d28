# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build and test log shapes (the object behind ``ActionResult.logRef``)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from xcresult_decoding.shapes.model_references import ModelDocumentLocation
from xcresult_decoding.shapes.model_result_object import ModelResultObject


class ModelActivityLogMessageAnnotation(ModelResultObject):
    title: str
    location: ModelDocumentLocation | None = None


class ModelActivityLogMessage(ModelResultObject):
    message_type: str = Field(alias="type")
    title: str
    short_title: str | None = None
    category: str | None = None
    location: ModelDocumentLocation | None = None
    annotations: list[ModelActivityLogMessageAnnotation] = Field(default_factory=list)


class ModelActivityLogSection(ModelResultObject):
    """A log section; subsections may be any of the section subtypes."""

    domain_type: str
    title: str
    start_time: datetime | None = None
    duration: float = 0.0
    result: str | None = None
    location: ModelDocumentLocation | None = None
    subsections: list[ModelActivityLogSection] = Field(default_factory=list)
    messages: list[ModelActivityLogMessage] = Field(default_factory=list)


class ModelActivityLogMajorSection(ModelActivityLogSection):
    subtitle: str


class ModelActivityLogTargetBuildSection(ModelActivityLogMajorSection):
    product_type: str | None = None


class ModelActivityLogCommandInvocationSection(ModelActivityLogSection):
    command_details: str
    emitted_output: str
    exit_code: int | None = None


class ModelActivityLogUnitTestSection(ModelActivityLogSection):
    test_name: str | None = None
    suite_name: str | None = None
    summary: str | None = None
    emitted_output: str | None = None
    performance_test_output: str | None = None
    tests_passed_string: str | None = None
    was_skipped: bool = False
    runnable_path: str | None = None
    runnable_uti: str | None = Field(default=None, alias="runnableUTI")


__all__ = [
    "ModelActivityLogCommandInvocationSection",
    "ModelActivityLogMajorSection",
    "ModelActivityLogMessage",
    "ModelActivityLogMessageAnnotation",
    "ModelActivityLogSection",
    "ModelActivityLogTargetBuildSection",
    "ModelActivityLogUnitTestSection",
]
