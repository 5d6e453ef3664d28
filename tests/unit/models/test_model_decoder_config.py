# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelDecoderConfig.

Tests cover:
- Defaults and immutability
- Field validation
- from_env() parsing of XCRESULT_DECODER_* variables
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from xcresult_decoding.errors import DecoderConfigurationError
from xcresult_decoding.models import ModelDecoderConfig
from xcresult_decoding.models.model_decoder_config import DEFAULT_MAX_TYPE_DEPTH

pytestmark = pytest.mark.unit


class TestDefaults:
    """Default configuration values."""

    def test_defaults(self) -> None:
        config = ModelDecoderConfig()

        assert config.max_type_depth == DEFAULT_MAX_TYPE_DEPTH == 64
        assert config.strict_shape_match is False
        assert config.audit_registry_drift is False

    def test_frozen(self) -> None:
        config = ModelDecoderConfig()

        with pytest.raises(ValidationError):
            config.max_type_depth = 3  # type: ignore[misc]

    @pytest.mark.parametrize("depth", [0, 4097])
    def test_depth_range(self, depth: int) -> None:
        with pytest.raises(ValidationError):
            ModelDecoderConfig(max_type_depth=depth)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelDecoderConfig(max_depth=3)  # type: ignore[call-arg]


class TestFromEnv:
    """Tests for ModelDecoderConfig.from_env()."""

    def test_empty_environment_gives_defaults(self) -> None:
        assert ModelDecoderConfig.from_env({}) == ModelDecoderConfig()

    def test_reads_prefixed_variables(self) -> None:
        config = ModelDecoderConfig.from_env(
            {
                "XCRESULT_DECODER_MAX_TYPE_DEPTH": "16",
                "XCRESULT_DECODER_STRICT_SHAPE_MATCH": "yes",
                "XCRESULT_DECODER_AUDIT_REGISTRY_DRIFT": "On",
                "UNRELATED": "ignored",
            }
        )

        assert config.max_type_depth == 16
        assert config.strict_shape_match is True
        assert config.audit_registry_drift is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "off", ""])
    def test_false_spellings(self, raw: str) -> None:
        config = ModelDecoderConfig.from_env({"XCRESULT_DECODER_STRICT_SHAPE_MATCH": raw})

        assert config.strict_shape_match is False

    def test_invalid_boolean(self) -> None:
        with pytest.raises(DecoderConfigurationError, match="must be a boolean") as exc_info:
            ModelDecoderConfig.from_env({"XCRESULT_DECODER_STRICT_SHAPE_MATCH": "maybe"})

        assert exc_info.value.context["variable"] == "XCRESULT_DECODER_STRICT_SHAPE_MATCH"

    def test_invalid_depth(self) -> None:
        with pytest.raises(DecoderConfigurationError, match="environment"):
            ModelDecoderConfig.from_env({"XCRESULT_DECODER_MAX_TYPE_DEPTH": "deep"})

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XCRESULT_DECODER_MAX_TYPE_DEPTH", "8")

        assert ModelDecoderConfig.from_env().max_type_depth == 8
