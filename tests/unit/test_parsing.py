"""Unit tests for shared configuration and payload parsing helpers."""

import pytest

from wikititle.parsing import (
    normalize_optional_string,
    parse_positive_int,
    parse_string_list,
    require_mapping,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(("value", "expected"), [(1, 1), (" 255 ", 255), ("512", 512)])
def test_parse_positive_int_accepts_ints_and_numeric_strings(value: object, expected: int) -> None:
    assert parse_positive_int(value, "limit") == expected


@pytest.mark.parametrize("value", [0, -5, "0", "x", "", None, False, 1.5])
def test_parse_positive_int_rejects_invalid_values(value: object) -> None:
    """Non-positive, non-numeric and boolean values should raise with the field name."""

    with pytest.raises(ValueError, match="`limit` must be a positive integer"):
        parse_positive_int(value, "limit")


def test_parse_string_list_accepts_sequences_and_comma_text() -> None:
    """Lists, tuples and comma-separated strings should drop blank items."""

    assert parse_string_list(["a", " b ", ""], "items") == ("a", "b")
    assert parse_string_list(("x",), "items") == ("x",)
    assert parse_string_list("tr, az,, ", "items") == ("tr", "az")


def test_parse_string_list_rejects_other_types() -> None:
    with pytest.raises(ValueError, match="`items` must be a list of strings"):
        parse_string_list({"a": 1}, "items")


def test_require_mapping_reports_missing_and_mistyped_keys() -> None:
    """Missing keys and non-mapping values should name the source and key."""

    payload = {"general": {"lang": "en"}, "namespaces": []}

    assert require_mapping(payload, "general", "Payload") == {"lang": "en"}
    with pytest.raises(ValueError, match="Payload is missing required key `query`"):
        require_mapping(payload, "query", "Payload")
    with pytest.raises(ValueError, match="Payload field `namespaces` must be a mapping"):
        require_mapping(payload, "namespaces", "Payload")
