# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for xcresult_decoding unit tests.

Available Utilities:
    Document Builders:
        - descriptor: Build a ``_type`` descriptor with a supertype chain
        - obj: Build a typed object from camelCase field values
        - string/integer/double/boolean/date: Build scalar value envelopes
        - array: Build an ``Array`` object
        - document: Serialize top-level elements to a UTF-8 buffer
        - invocation_record/action_record/action_result: Realistic records
        - summary_node/group_node/metadata_node: Test summary tree nodes
"""

from tests.helpers.xcresult_builders import (
    action_record,
    action_result,
    array,
    boolean,
    date,
    descriptor,
    device_record,
    document,
    double,
    group_node,
    integer,
    invocation_record,
    issue,
    metadata_node,
    obj,
    string,
    summary_node,
)

__all__ = [
    "action_record",
    "action_result",
    "array",
    "boolean",
    "date",
    "descriptor",
    "device_record",
    "document",
    "double",
    "group_node",
    "integer",
    "invocation_record",
    "issue",
    "metadata_node",
    "obj",
    "string",
    "summary_node",
]
