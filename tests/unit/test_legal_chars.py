"""Unit tests for legal title character class compilation and caching."""

from __future__ import annotations

import pytest

from wikititle.text.legal_chars import (
    UNICODE_CATCH_ALL,
    CompiledTitleCharacters,
    LegalCharacterClassCompiler,
    convert_byte_class_to_unicode_class,
)

ENWIKI_LEGAL_CHARS = r""" %!"$&'()*,\-.\/0-9:;=?@A-Z\\^_`a-z~\x80-\xFF+"""


@pytest.mark.parametrize(
    ("byte_class", "expected"),
    [
        (ENWIKI_LEGAL_CHARS, r""" %!"$&'()*,\-./0-9:;=?@A-Z\\\^_`a-z~+""" + UNICODE_CATCH_ALL),
        (r"QWERTYf-\xFF+", r"QWERTYf-\x7F+" + UNICODE_CATCH_ALL),
        (r"QWERTY\x66-\xFD+", r"QWERTYf-\x7F+" + UNICODE_CATCH_ALL),
        (r"QWERTYf-y+", r"QWERTYf-y+"),
        (r"QWERTYf-\x80+", r"QWERTYf-\x7F+" + UNICODE_CATCH_ALL),
        (r"QWERTY\x66-\x80+\x23", r"QWERTYf-\x7F+#" + UNICODE_CATCH_ALL),
        (r"QWERTY\x66-\x80+\xD3", r"QWERTYf-\x7F+" + UNICODE_CATCH_ALL),
        (r"\\\x99", r"\\" + UNICODE_CATCH_ALL),
        (r"-\x99", r"\-" + UNICODE_CATCH_ALL),
        (r"QWERTY\-\x99", r"QWERTY\-" + UNICODE_CATCH_ALL),
        (r"\\x99", r"\\x99"),
        (r"A-\x9F", r"A-\x7F" + UNICODE_CATCH_ALL),
        (r"\x66-\x77QWERTY\x88-\x91FXZ", r"f-wQWERTYFXZ" + UNICODE_CATCH_ALL),
        (r"\x66-\x99QWERTY\xAA-\xEEFXZ", r"f-\x7FQWERTYFXZ" + UNICODE_CATCH_ALL),
    ],
)
def test_convert_byte_class_matches_reference_table(byte_class: str, expected: str) -> None:
    """Byte classes should convert to the expected code point classes."""

    assert convert_byte_class_to_unicode_class(byte_class) == expected


def test_convert_byte_class_decodes_octal_and_reencodes_controls() -> None:
    """Octal escapes decode to characters; control bytes re-encode as hex escapes."""

    assert convert_byte_class_to_unicode_class(r"\101\x01\x7f") == r"A\x01\x7f"


def test_convert_byte_class_drops_empty_ranges() -> None:
    """Ranges whose upper bound does not exceed the lower bound emit nothing."""

    assert convert_byte_class_to_unicode_class("z-aQ") == "Q"
    assert convert_byte_class_to_unicode_class("a-aQ") == "Q"


def test_convert_byte_class_keeps_trailing_lone_backslash() -> None:
    """A lone backslash at the end is kept as an escaped literal backslash."""

    assert convert_byte_class_to_unicode_class("ab\\") == r"ab\\"


def test_invalid_title_pattern_reports_offending_substrings() -> None:
    """The rejection test should flag characters, percent-encoding and references."""

    pattern = LegalCharacterClassCompiler().invalid_title_pattern(ENWIKI_LEGAL_CHARS)

    assert pattern.search("Sandbox") is None
    assert pattern.search("Foé_\U0001F340") is None
    assert pattern.search("A_[_B").group(0) == "["
    assert pattern.search("A_|_B").group(0) == "|"
    assert pattern.search("A%20B").group(0) == "%20"
    assert pattern.search("A_&eacute;_B").group(0) == "&eacute;"
    assert pattern.search("A_&#233;_B").group(0) == "&#233;"
    assert pattern.search("A_&#x00E9;_B").group(0) == "&#x00E9;"
    assert pattern.search("Fish_&_Chips") is None


def test_invalid_title_pattern_without_legal_characters_rejects_everything() -> None:
    """An empty legal class should reject any character."""

    pattern = LegalCharacterClassCompiler().invalid_title_pattern("")

    assert pattern.search("a").group(0) == "a"


def test_compiler_memoizes_by_spec_string_in_injected_cache() -> None:
    """Compiled results should be stored in and served from the injected cache."""

    cache: dict[str, CompiledTitleCharacters] = {}
    compiler = LegalCharacterClassCompiler(cache=cache)

    first = compiler.compile(ENWIKI_LEGAL_CHARS)
    second = compiler.compile(ENWIKI_LEGAL_CHARS)

    assert first is second
    assert compiler.cache is cache
    assert list(cache) == [ENWIKI_LEGAL_CHARS]
    assert compiler.to_unicode_class("a-z") == "a-z"
    assert set(cache) == {ENWIKI_LEGAL_CHARS, "a-z"}


def test_compiler_serves_prepopulated_cache_entries() -> None:
    """Entries already present in the cache should be returned without recompiling."""

    sentinel = CompiledTitleCharacters(
        unicode_class="x",
        invalid_title_re=LegalCharacterClassCompiler().invalid_title_pattern("x"),
    )
    compiler = LegalCharacterClassCompiler(cache={"a-z": sentinel})

    assert compiler.compile("a-z") is sentinel
    assert compiler.to_unicode_class("a-z") == "x"
