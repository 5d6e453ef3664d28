# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for load_decoder_config()."""

from __future__ import annotations

from pathlib import Path

import pytest

from xcresult_decoding.enums import EnumDecodeErrorCode
from xcresult_decoding.errors import DecoderConfigurationError
from xcresult_decoding.models import ModelDecoderConfig
from xcresult_decoding.runtime import decoder_config_loader, load_decoder_config

pytestmark = pytest.mark.unit


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "decoder.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadDecoderConfig:
    """Tests for YAML configuration loading."""

    def test_loads_all_fields(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "max_type_depth: 128\nstrict_shape_match: true\naudit_registry_drift: yes\n",
        )

        config = load_decoder_config(path)

        assert config == ModelDecoderConfig(
            max_type_depth=128,
            strict_shape_match=True,
            audit_registry_drift=True,
        )

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "strict_shape_match: false\n")

        assert load_decoder_config(str(path)).strict_shape_match is False

    def test_empty_file_is_default(self, tmp_path: Path) -> None:
        assert load_decoder_config(_write(tmp_path, "")) == ModelDecoderConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DecoderConfigurationError, match="not found") as exc_info:
            load_decoder_config(tmp_path / "absent.yaml")

        assert exc_info.value.error_code is EnumDecodeErrorCode.INVALID_CONFIGURATION

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(DecoderConfigurationError, match="Invalid YAML"):
            load_decoder_config(_write(tmp_path, "max_type_depth: [unclosed\n"))

    def test_non_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(DecoderConfigurationError, match="must be a mapping"):
            load_decoder_config(_write(tmp_path, "- max_type_depth\n"))

    def test_unknown_key(self, tmp_path: Path) -> None:
        with pytest.raises(DecoderConfigurationError, match="Invalid decoder configuration"):
            load_decoder_config(_write(tmp_path, "max_depth: 3\n"))

    def test_out_of_range_value(self, tmp_path: Path) -> None:
        with pytest.raises(DecoderConfigurationError):
            load_decoder_config(_write(tmp_path, "max_type_depth: 0\n"))

    def test_file_too_large(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(decoder_config_loader, "MAX_CONFIG_SIZE_BYTES", 8)

        with pytest.raises(DecoderConfigurationError, match="too large"):
            load_decoder_config(_write(tmp_path, "max_type_depth: 128\n"))
