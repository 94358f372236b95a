"""Shared parsing helpers for configuration and site profile payloads."""

from __future__ import annotations

from typing import Any, Mapping


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


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer from an int or numeric string.

    Raises:
        ValueError: If the value is a boolean, non-numeric or not positive.
    """

    message = f"`{field_name}` must be a positive integer."
    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(message)
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(message) from exc
    if parsed <= 0:
        raise ValueError(message)
    return parsed


def parse_string_list(value: object, field_name: str) -> tuple[str, ...]:
    """Parse a list of non-blank strings from a sequence or comma-separated text."""

    if isinstance(value, str):
        items: list[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise ValueError(f"`{field_name}` must be a list of strings.")

    parsed: list[str] = []
    for item in items:
        normalized = normalize_optional_string(item)
        if normalized is not None:
            parsed.append(normalized)
    return tuple(parsed)


def require_mapping(payload: Mapping[str, Any], key: str, source_label: str) -> Mapping[str, Any]:
    """Return a required mapping-valued field of a payload."""

    if key not in payload:
        raise ValueError(f"{source_label} is missing required key `{key}`.")
    value = payload[key]
    if not isinstance(value, Mapping):
        raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")
    return value
