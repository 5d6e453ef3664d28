# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scalar value coercion for xcresult value envelopes.

Every leaf value in an xcresult document is an envelope of the form::

    {"_type": {"_name": "Int"}, "_value": "42"}

The type name selects how the raw string is coerced. Coercion never raises:
a malformed literal degrades to ``None`` so that a single bad leaf cannot
abort decoding of an otherwise valid document. Callers that require a value
decide whether absence is fatal.

Coercion Rules:
    - Bool: exactly "true" or "false"
    - Int: optional sign and decimal digits, within signed 64-bit range
    - Double: decimal literal with optional exponent, or inf/infinity/nan
    - Date: internet date-time with fractional seconds and a UTC offset
    - String (and any unknown type name): the raw string unchanged

Example:
    >>> coerce_scalar("Int", "42")
    42
    >>> coerce_scalar("Bool", "yes") is None
    True
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from typing import Final, TypeAlias

from xcresult_decoding.enums import EnumScalarTypeName

logger = logging.getLogger(__name__)

ScalarValue: TypeAlias = bool | int | float | datetime | str

_INT64_MIN: Final[int] = -(2**63)
_INT64_MAX: Final[int] = 2**63 - 1

_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

_DOUBLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

_DOUBLE_SPECIALS: Final[frozenset[str]] = frozenset({"inf", "infinity", "nan"})

_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})"
    r"T(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"\.(?P<fraction>[0-9]+)"
    r"(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<off_hour>[0-9]{2}):?(?P<off_minute>[0-5][0-9]))"
)


def coerce_bool(raw_value: str) -> bool | None:
    """Coerce a boolean literal; only lowercase "true"/"false" are accepted."""
    if raw_value == "true":
        return True
    if raw_value == "false":
        return False
    return None


def coerce_int(raw_value: str) -> int | None:
    """Coerce a decimal integer literal within signed 64-bit range."""
    if _INT_PATTERN.fullmatch(raw_value) is None:
        return None
    value = int(raw_value)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def coerce_double(raw_value: str) -> float | None:
    """Coerce a decimal floating point literal.

    Finite literals that overflow to infinity are rejected; explicit
    ``inf``/``nan`` spellings are accepted.
    """
    unsigned = raw_value.lstrip("+-")
    if unsigned.lower() in _DOUBLE_SPECIALS and len(raw_value) - len(unsigned) <= 1:
        return float(raw_value)
    if _DOUBLE_PATTERN.fullmatch(raw_value) is None:
        return None
    value = float(raw_value)
    if math.isinf(value):
        return None
    return value


def coerce_date(raw_value: str) -> datetime | None:
    """Coerce an internet date-time with fractional seconds and an offset.

    Accepts ``Z``, ``+HH:MM`` and ``+HHMM`` offsets. Fractional seconds beyond
    microsecond precision are truncated.

    Example:
        >>> coerce_date("2024-01-02T03:04:05.678Z")
        datetime.datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=datetime.timezone.utc)
    """
    match = _DATE_PATTERN.fullmatch(raw_value)
    if match is None:
        return None

    if match.group("utc"):
        offset = "+00:00"
    else:
        sign, hours, minutes = match.group("sign", "off_hour", "off_minute")
        offset = f"{sign}{hours}:{minutes}"
    fraction = match.group("fraction")[:6].ljust(6, "0")
    try:
        return datetime.fromisoformat(
            f"{match.group('date')}T{match.group('time')}.{fraction}{offset}"
        )
    except ValueError:
        return None


def coerce_scalar(type_name: str, raw_value: str) -> ScalarValue | None:
    """Coerce a raw envelope value according to its type name.

    Args:
        type_name: The ``_name`` of the envelope's ``_type``.
        raw_value: The envelope's ``_value`` string.

    Returns:
        The coerced primitive, or None when the literal is malformed for
        the selected rule. Unknown type names return the raw string.
    """
    match type_name:
        case EnumScalarTypeName.BOOL.value:
            value: ScalarValue | None = coerce_bool(raw_value)
        case EnumScalarTypeName.INT.value:
            value = coerce_int(raw_value)
        case EnumScalarTypeName.DOUBLE.value:
            value = coerce_double(raw_value)
        case EnumScalarTypeName.DATE.value:
            value = coerce_date(raw_value)
        case _:
            return raw_value

    if value is None:
        logger.debug(
            "Scalar coercion failed for type %s",
            type_name,
            extra={"type_name": type_name, "raw_value": raw_value},
        )
    return value


__all__ = [
    "ScalarValue",
    "coerce_bool",
    "coerce_date",
    "coerce_double",
    "coerce_int",
    "coerce_scalar",
]
