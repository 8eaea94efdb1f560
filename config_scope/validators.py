# SPDX-License-Identifier: MIT
# Copyright (c) 2025 config-scope contributors

"""Validation helpers for configuration values.

These functions back the typed getters of ``ConfigScope`` and can also be
used directly for ad-hoc validation of values that do not come from a named
parameter.
"""

import math
import re
import sys
from typing import Any, Callable, Optional, Sequence, TypeVar

from .exceptions import ConfigurationError

T = TypeVar("T")
InputT = TypeVar("InputT")

EnvValueValidator = Callable[[InputT], bool]

# Optional leading whitespace (BOM included) and sign, then base-10 digits; the rest is ignored
_INTEGER_PREFIX = re.compile(r"[\s\ufeff]*([+-]?)([0-9]+)")

# Longest digit run (after leading zeros) that can still fit in a double
_MAX_FINITE_DIGITS = len(str(int(sys.float_info.max)))


def _format_values(values: Sequence[Any]) -> str:
    return ",".join(str(value) for value in values)


def _same_value(left: Any, right: Any) -> bool:
    """Equality that keeps booleans apart from numbers and matches NaN to NaN."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, float) and isinstance(right, float) and math.isnan(left) and math.isnan(right):
        return True
    return left == right


def validate_one_of(
    validated_entity: Any,
    expected_one_of_entities: Sequence[T],
    error_text: Optional[str] = None,
) -> T:
    """Ensure a value is one of an allowed set.

    Args:
        validated_entity: Value to check
        expected_one_of_entities: Allowed values
        error_text: Message to raise with instead of the generated one

    Returns:
        The allowed element equal to ``validated_entity``

    Raises:
        ConfigurationError: If the value is not among the allowed values
    """
    for candidate in expected_one_of_entities:
        if _same_value(candidate, validated_entity):
            return candidate

    raise ConfigurationError(
        error_text
        or f"Validated entity {validated_entity} is not one of: "
        f"{_format_values(expected_one_of_entities)}"
    )


def validate_number(validated_object: Any, error_text: str) -> int | float:
    """Ensure a value is a finite number.

    Booleans and ``None`` are not numbers.

    Raises:
        ConfigurationError: With ``error_text`` if the value is not finite
    """
    if isinstance(validated_object, bool):
        raise ConfigurationError(error_text)
    if isinstance(validated_object, int) and abs(validated_object) <= sys.float_info.max:
        return validated_object
    if isinstance(validated_object, float) and math.isfinite(validated_object):
        return validated_object
    raise ConfigurationError(error_text)


def parse_integer(raw_value: str) -> Optional[int]:
    """Parse the leading base-10 integer of a string.

    Trailing characters after the digits are ignored, so ``"123abc"`` parses
    to 123. Returns None when the string has no integer prefix or when the
    integer is too large to be represented as a finite double.
    """
    match = _INTEGER_PREFIX.match(raw_value)
    if match is None:
        return None

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_FINITE_DIGITS:
        return None

    value = int(sign + digits)
    if abs(value) > sys.float_info.max:
        return None
    return value


def create_range_validator(
    greater_or_equal_than: int | float,
    less_or_equal_than: int | float,
) -> EnvValueValidator[int]:
    """Build a validator accepting values within an inclusive range."""

    def validator(value: int) -> bool:
        return greater_or_equal_than <= value <= less_or_equal_than

    return validator
