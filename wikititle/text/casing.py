"""First-letter capitalization for titles.

Responsibilities:
- Uppercase the first character of a title with a locale-neutral,
  per-code-point mapping that matches the wiki's historic behavior.
- Apply the dotted capital I rule for Turkic content languages.

`str.upper` applies full case mappings (`ß` becomes `SS`) and newer Unicode
versions than the ones title keys were created with. The override table pins
the characters where the two disagree.
"""

from __future__ import annotations

from typing import Iterable

DOTTED_I_LANGUAGES = frozenset({"az", "kaa", "kk", "tr"})

_DOTTED_CAPITAL_I = "İ"


def _identity(characters: Iterable[str]) -> dict[str, str]:
    return {character: character for character in characters}


def _shifted(start: int, end: int, offset: int) -> dict[str, str]:
    return {chr(code): chr(code + offset) for code in range(start, end + 1)}


_UPPERCASE_OVERRIDES: dict[str, str] = {
    # Characters without a single-code-point uppercase form stay unchanged.
    **_identity("ßŉǰΐΰևẖẗẘẙẚὐὒὔὖ"),
    **_identity("ﬀﬁﬂﬃﬄﬅﬆﬓﬔﬕﬖﬗ"),
    # Greek letters with iota subscript map to their title-case forms.
    **_shifted(0x1F80, 0x1F87, 0x08),
    **_shifted(0x1F90, 0x1F97, 0x08),
    **_shifted(0x1FA0, 0x1FA7, 0x08),
    "ᾳ": "ᾼ",
    "ῃ": "ῌ",
    "ῳ": "ῼ",
    # Georgian Mkhedruli has no uppercase on the wiki.
    **_identity(chr(code) for code in range(0x10D0, 0x10FB)),
    **_identity(chr(code) for code in range(0x10FD, 0x1100)),
    # Circled Latin small letters.
    **_identity(chr(code) for code in range(0x24D0, 0x24EA)),
}


def uppercase_character(character: str) -> str:
    """Return the wiki uppercase form of a single character."""

    override = _UPPERCASE_OVERRIDES.get(character)
    if override is not None:
        return override
    upper = character.upper()
    if len(upper) != 1:
        return character
    return upper


def uppercase_first(
    text: str,
    language: str,
    dotted_i_languages: Iterable[str] = DOTTED_I_LANGUAGES,
) -> str:
    """Uppercase the first character of `text` for a site content language."""

    if not text:
        return text
    first = text[0]
    if first == "i" and language in dotted_i_languages:
        return _DOTTED_CAPITAL_I + text[1:]
    if "A" <= first <= "Z":
        return text
    return uppercase_character(first) + text[1:]
