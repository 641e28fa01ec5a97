"""Shared parsing helpers for option values read from YAML, env, and CLI."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return a stripped non-empty string, or `None` for missing/blank values."""

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_boolean_token(value: object, field_name: str) -> bool:
    """Parse a boolean option from a native bool or an accepted text token.

    Args:
        value: Native boolean or text such as `yes`, `off`, `1`.
        field_name: Option name used in the validation error.

    Raises:
        ValueError: If the value is not a recognized boolean token.
    """

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is not None:
        token = normalized.lower()
        if token in _TRUE_BOOLEAN_TOKENS:
            return True
        if token in _FALSE_BOOLEAN_TOKENS:
            return False

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer option (booleans are rejected)."""

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive integer.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(f"`{field_name}` must be a positive integer.")
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a positive integer.") from exc
    if parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive integer.")
    return parsed
