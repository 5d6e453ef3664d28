# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Helpers for rendering document paths in error messages."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

PathSegment: TypeAlias = str | int


def format_decode_path(segments: Iterable[PathSegment]) -> str:
    """Render path segments as a dotted path with list indexes.

    Example:
        >>> format_decode_path(("actions", 0, "actionResult", "status"))
        'actions[0].actionResult.status'
        >>> format_decode_path(())
        '$'
    """
    rendered = ""
    for segment in segments:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered or "$"


__all__ = ["PathSegment", "format_decode_path"]
