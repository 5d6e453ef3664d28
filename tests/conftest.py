# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for xcresult_decoding tests."""

from __future__ import annotations

import pytest

from xcresult_decoding.models import ModelDecodeContext, ModelDecoderConfig
from xcresult_decoding.runtime import RegistryTypeFamily
from xcresult_decoding.shapes import get_default_type_family

# =============================================================================
# Type Family Fixtures
# =============================================================================


@pytest.fixture
def default_family() -> RegistryTypeFamily:
    """The process-wide default type family (frozen, shared)."""
    return get_default_type_family()


@pytest.fixture
def open_family() -> RegistryTypeFamily:
    """A fresh, empty, unfrozen type family."""
    return RegistryTypeFamily("test")


# =============================================================================
# Decode Context Fixtures
# =============================================================================


@pytest.fixture
def decode_context(default_family: RegistryTypeFamily) -> ModelDecodeContext:
    """Decode context with the default family and default configuration."""
    return ModelDecodeContext(family=default_family)


@pytest.fixture
def strict_context(default_family: RegistryTypeFamily) -> ModelDecodeContext:
    """Decode context that raises on shape mismatches instead of falling back."""
    return ModelDecodeContext(
        family=default_family,
        config=ModelDecoderConfig(strict_shape_match=True),
    )
