# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the decoding core.

Environment Variables:
    XCRESULT_DECODER_MAX_TYPE_DEPTH: Maximum supertype chain length (default 64)
    XCRESULT_DECODER_STRICT_SHAPE_MATCH: Raise instead of falling back when a
        single object resolves to an incompatible shape (default false)
    XCRESULT_DECODER_AUDIT_REGISTRY_DRIFT: Log type names a document uses
        that the type family does not register (default false)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xcresult_decoding.errors import DecoderConfigurationError, ModelDecodeErrorContext

ENV_PREFIX: Final[str] = "XCRESULT_DECODER_"

DEFAULT_MAX_TYPE_DEPTH: Final[int] = 64

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


class ModelDecoderConfig(BaseModel):
    """Decoder behavior switches.

    Attributes:
        max_type_depth: Maximum number of descriptors in a supertype chain.
            Longer chains raise TypeChainDepthError.
        strict_shape_match: When True, a single-object decode whose resolved
            shape is not a subclass of the expected type raises
            ShapeMismatchError instead of retrying as the expected type.
        audit_registry_drift: When True, document decodes log the type names
            the family does not register.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    max_type_depth: int = Field(
        default=DEFAULT_MAX_TYPE_DEPTH,
        ge=1,
        le=4096,
        description="Maximum supertype chain length",
    )
    strict_shape_match: bool = Field(
        default=False,
        description="Raise ShapeMismatchError instead of the fallback decode",
    )
    audit_registry_drift: bool = Field(
        default=False,
        description="Log unregistered type names seen in documents",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ModelDecoderConfig:
        """Create config from ``XCRESULT_DECODER_*`` environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            DecoderConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        depth = env.get(f"{ENV_PREFIX}MAX_TYPE_DEPTH")
        if depth is not None:
            values["max_type_depth"] = depth
        for field_name in ("strict_shape_match", "audit_registry_drift"):
            raw = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None:
                values[field_name] = _parse_env_bool(f"{ENV_PREFIX}{field_name.upper()}", raw)

        return cls.from_mapping(values, source="environment")

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, object],
        *,
        source: str = "mapping",
    ) -> ModelDecoderConfig:
        """Validate a plain mapping into a config.

        Raises:
            DecoderConfigurationError: If validation fails.
        """
        try:
            return cls.model_validate(dict(values))
        except ValidationError as e:
            raise DecoderConfigurationError(
                f"Invalid decoder configuration from {source}: {e.error_count()} error(s)",
                context=ModelDecodeErrorContext(operation="load_decoder_config"),
                source=source,
                errors=[error["msg"] for error in e.errors()],
            ) from e


def _parse_env_bool(name: str, raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise DecoderConfigurationError(
        f"Environment variable {name} must be a boolean, got {raw!r}",
        context=ModelDecodeErrorContext(operation="load_decoder_config"),
        variable=name,
    )


__all__ = ["DEFAULT_MAX_TYPE_DEPTH", "ENV_PREFIX", "ModelDecoderConfig"]
