"""Shared parsing helpers for config and CLI value normalization."""

from __future__ import annotations

import math


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_optional_float(value: object) -> float | None:
    """Parse a finite float from numbers or numeric text, `None` when not numeric."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            return None
        try:
            parsed = float(normalized)
        except ValueError:
            return None
    if not math.isfinite(parsed):
        return None
    return parsed


def coerce_number(value: object, default: float = 1.0) -> float:
    """Return `value` as a float, falling back to `default` for missing or junk input.

    Host controls hand over raw slider/select values; anything that does not
    parse as a finite number is replaced before it reaches the scoring core.
    """

    parsed = parse_optional_float(value)
    if parsed is None:
        return default
    return parsed


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards positive infinity."""

    return int(math.floor(value + 0.5))
