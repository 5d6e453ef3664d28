# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-call decode context threaded through nested decodes.

The context travels inside pydantic's validation context so that shape
validators can reach the type family and configuration without global state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final
from uuid import UUID

from xcresult_decoding.errors import ModelDecodeErrorContext
from xcresult_decoding.models.model_decoder_config import ModelDecoderConfig
from xcresult_decoding.utils.util_decode_path import PathSegment, format_decode_path

if TYPE_CHECKING:
    from xcresult_decoding.protocols import ProtocolTypeFamily

DECODE_CONTEXT_KEY: Final[str] = "xcresult_decode_context"


@dataclass(frozen=True)
class ModelDecodeContext:
    """Immutable decode state for one position in a document.

    Attributes:
        family: Frozen type family used for every resolution.
        config: Decoder configuration.
        path: Segments from the document root to the current value.
        correlation_id: Optional ID attached to errors raised under this context.
    """

    family: ProtocolTypeFamily
    config: ModelDecoderConfig = field(default_factory=ModelDecoderConfig)
    path: tuple[PathSegment, ...] = ()
    correlation_id: UUID | None = None

    def child(self, segment: PathSegment) -> ModelDecodeContext:
        """Return a context one segment deeper."""
        return replace(self, path=(*self.path, segment))

    @property
    def path_text(self) -> str:
        return format_decode_path(self.path)

    def error_context(
        self,
        operation: str,
        type_name: str | None = None,
    ) -> ModelDecodeErrorContext:
        return ModelDecodeErrorContext(
            operation=operation,
            path=self.path_text,
            type_name=type_name,
            correlation_id=self.correlation_id,
        )

    def as_validation_context(self) -> dict[str, object]:
        """Wrap this context for ``BaseModel.model_validate(context=...)``."""
        return {DECODE_CONTEXT_KEY: self}

    @classmethod
    def from_validation_context(cls, context: object) -> ModelDecodeContext | None:
        """Extract a decode context from a pydantic validation context."""
        if isinstance(context, Mapping):
            candidate = context.get(DECODE_CONTEXT_KEY)
            if isinstance(candidate, ModelDecodeContext):
                return candidate
        return None


__all__ = ["DECODE_CONTEXT_KEY", "ModelDecodeContext"]
