# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decoder configuration loader.

Loads ModelDecoderConfig from a YAML file. Keys match the config fields:

    ```yaml
    max_type_depth: 128
    strict_shape_match: true
    audit_registry_drift: false
    ```

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - File size is checked before reading
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from xcresult_decoding.errors import DecoderConfigurationError, ModelDecodeErrorContext
from xcresult_decoding.models.model_decoder_config import ModelDecoderConfig

logger = logging.getLogger(__name__)

# Maximum config file size (1 MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def load_decoder_config(config_path: str | Path) -> ModelDecoderConfig:
    """Load decoder configuration from a YAML file.

    An empty file yields the default configuration.

    Raises:
        DecoderConfigurationError: If the file is missing, too large, not
            valid YAML, not a mapping, or fails validation.
    """
    path = Path(config_path)
    error_context = ModelDecodeErrorContext(operation="load_decoder_config")

    if not path.is_file():
        raise DecoderConfigurationError(
            f"Decoder config file not found: {path}",
            context=error_context,
            config_path=str(path),
        )

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise DecoderConfigurationError(
            f"Decoder config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=error_context,
            config_path=str(path),
        )

    try:
        with path.open(encoding="utf-8") as f:
            values = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DecoderConfigurationError(
            f"Invalid YAML in decoder config: {e}",
            context=error_context,
            config_path=str(path),
        ) from e

    if values is None:
        values = {}
    if not isinstance(values, dict):
        raise DecoderConfigurationError(
            f"Decoder config must be a mapping, got {type(values).__name__}",
            context=error_context,
            config_path=str(path),
        )

    config = ModelDecoderConfig.from_mapping(values, source=str(path))
    logger.debug(
        "Loaded decoder config",
        extra={"config_path": str(path), **config.model_dump()},
    )
    return config


__all__ = ["MAX_CONFIG_SIZE_BYTES", "load_decoder_config"]
