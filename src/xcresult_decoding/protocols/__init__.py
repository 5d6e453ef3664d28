# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for pluggable decoding components."""

from xcresult_decoding.protocols.protocol_type_family import ProtocolTypeFamily

__all__: list[str] = ["ProtocolTypeFamily"]
