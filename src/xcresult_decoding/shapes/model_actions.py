# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Invocation, action and run destination shapes.

The root object of a result bundle is an ActionsInvocationRecord: one
ActionRecord per scheme action, each carrying a build result and an action
result with metrics, issues and references to test and log objects.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from xcresult_decoding.shapes.model_issues import (
    ModelCodeCoverageInfo,
    ModelResultIssueSummaries,
    ModelResultMetrics,
)
from xcresult_decoding.shapes.model_references import (
    ModelArchiveInfo,
    ModelEntityIdentifier,
    ModelReference,
)
from xcresult_decoding.shapes.model_result_object import ModelResultObject


class ModelActionPlatformRecord(ModelResultObject):
    identifier: str
    user_description: str


class ModelActionSDKRecord(ModelResultObject):
    name: str
    identifier: str
    operating_system_version: str
    is_internal: bool = False


class ModelActionDeviceRecord(ModelResultObject):
    """A device the action ran on or was built for."""

    model_config = ConfigDict(protected_namespaces=())

    name: str
    is_concrete_device: bool
    operating_system_version: str
    operating_system_version_with_build_number: str
    native_architecture: str
    model_name: str
    model_code: str
    model_uti: str = Field(alias="modelUTI")
    identifier: str
    is_wireless: bool = False
    cpu_kind: str | None = None
    cpu_count: int | None = None
    cpu_speed_in_mhz: int | None = Field(default=None, alias="cpuSpeedInMHz")
    bus_speed_in_mhz: int | None = Field(default=None, alias="busSpeedInMHz")
    ram_size_in_megabytes: int | None = None
    physical_cpu_cores_per_package: int | None = Field(
        default=None, alias="physicalCPUCoresPerPackage"
    )
    logical_cpu_cores_per_package: int | None = Field(
        default=None, alias="logicalCPUCoresPerPackage"
    )
    platform_record: ModelActionPlatformRecord


class ModelActionRunDestinationRecord(ModelResultObject):
    display_name: str
    target_architecture: str
    target_device_record: ModelActionDeviceRecord
    local_computer_record: ModelActionDeviceRecord
    target_sdk_record: ModelActionSDKRecord = Field(alias="targetSDKRecord")


class ModelActionResult(ModelResultObject):
    """Outcome of a build or of a test/run action."""

    result_name: str
    status: str
    metrics: ModelResultMetrics
    issues: ModelResultIssueSummaries
    coverage: ModelCodeCoverageInfo
    timeline_ref: ModelReference | None = None
    log_ref: ModelReference | None = None
    tests_ref: ModelReference | None = None
    diagnostics_ref: ModelReference | None = None


class ModelActionRecord(ModelResultObject):
    scheme_command_name: str
    scheme_task_name: str
    title: str | None = None
    started_time: datetime
    ended_time: datetime
    run_destination: ModelActionRunDestinationRecord
    build_result: ModelActionResult
    action_result: ModelActionResult


class ModelActionsInvocationMetadata(ModelResultObject):
    creating_workspace_file_path: str
    unique_identifier: str
    scheme_identifier: ModelEntityIdentifier | None = None


class ModelActionsInvocationRecord(ModelResultObject):
    """Root object of a result bundle."""

    metadata_ref: ModelReference | None = None
    metrics: ModelResultMetrics
    issues: ModelResultIssueSummaries
    actions: list[ModelActionRecord] = Field(default_factory=list)
    archive: ModelArchiveInfo | None = None


__all__ = [
    "ModelActionDeviceRecord",
    "ModelActionPlatformRecord",
    "ModelActionRecord",
    "ModelActionResult",
    "ModelActionRunDestinationRecord",
    "ModelActionSDKRecord",
    "ModelActionsInvocationMetadata",
    "ModelActionsInvocationRecord",
]
