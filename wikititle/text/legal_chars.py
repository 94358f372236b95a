"""Legal title character class compilation.

Responsibilities:
- Translate a site's byte-oriented legal-title-characters class into a
  code-point-aware regular expression character class.
- Build the illegal-title test (disallowed characters, percent-encoding and
  character references) from that class.
- Memoize compiled results per class string in an injectable cache.

Key types:
- `LegalCharacterClassCompiler`: memoizing compiler.
- `CompiledTitleCharacters`: compiled class and rejection pattern for one site.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import MutableMapping, NamedTuple

from loguru import logger

UNICODE_CATCH_ALL = "\\u0080-\\U0010FFFF"

_HEX_ESCAPE_RE = re.compile(r"x([0-9a-fA-F]{2})")
_OCTAL_ESCAPE_RE = re.compile(r"[0-7]{3}")
_CLASS_SPECIAL_CHARACTERS = frozenset("-\\[]^")


class _Token(NamedTuple):
    raw: str
    ordinal: int
    encoded: str


_EMPTY_TOKEN = _Token("", 0, "")


@dataclass(frozen=True, slots=True)
class CompiledTitleCharacters:
    """Compiled legal-character data for one legal-title-characters spec.

    Attributes:
        unicode_class: Character class body usable inside `[...]`.
        invalid_title_re: Pattern whose first match is the offending substring of a title.
    """

    unicode_class: str
    invalid_title_re: re.Pattern[str]


def _read_token(byte_class: str, pos: int) -> tuple[str, str, int]:
    """Read one token at `pos` and return `(raw, decoded, next_pos)`."""

    character = byte_class[pos]
    if character != "\\":
        return character, character, pos + 1

    escape_start = pos + 1
    hex_match = _HEX_ESCAPE_RE.match(byte_class, escape_start)
    if hex_match is not None:
        return "\\" + hex_match.group(0), chr(int(hex_match.group(1), 16)), hex_match.end()
    octal_match = _OCTAL_ESCAPE_RE.match(byte_class, escape_start)
    if octal_match is not None:
        return "\\" + octal_match.group(0), chr(int(octal_match.group(0), 8)), octal_match.end()
    if escape_start >= len(byte_class):
        return "\\", "\\", escape_start
    escaped = byte_class[escape_start]
    return "\\" + escaped, escaped, escape_start + 1


def _reencode(decoded: str) -> tuple[str, bool]:
    """Return the output-class spelling of a decoded character and whether it is high."""

    ordinal = ord(decoded)
    if ordinal < 0x20 or ordinal == 0x7F:
        return f"\\x{ordinal:02x}", False
    if ordinal >= 0x80:
        return f"\\x{ordinal:02x}", True
    if decoded in _CLASS_SPECIAL_CHARACTERS:
        return "\\" + decoded, False
    return decoded, False


def convert_byte_class_to_unicode_class(byte_class: str) -> str:
    """Convert a byte character class into an equivalent code point class.

    Any single byte >= 0x80 may be part of a multi-byte UTF-8 sequence, so all
    high bytes collapse into one catch-all range of non-ASCII code points that
    is appended at the end. Ranges reaching into the high half keep only their
    ASCII portion; ranges entirely above 0x7F are dropped.
    """

    out: list[str] = []
    allow_unicode = False
    # Sliding window: t0 is the current token, t1 and t2 the two before it.
    t0 = t1 = t2 = _EMPTY_TOKEN
    pos = 0
    while pos < len(byte_class):
        t2, t1 = t1, t0
        raw, decoded, pos = _read_token(byte_class, pos)
        encoded, high = _reencode(decoded)
        allow_unicode = allow_unicode or high
        t0 = _Token(raw, ord(decoded), encoded)

        if t0.raw and t1.raw == "-" and t2.raw:
            if t2.ordinal < t0.ordinal:
                if t0.ordinal >= 0x80:
                    allow_unicode = True
                    if t2.ordinal < 0x80:
                        out.append(f"{t2.encoded}-\\x7F")
                else:
                    out.append(f"{t2.encoded}-{t0.encoded}")
            t0 = t1 = _EMPTY_TOKEN
        elif t2.ordinal < 0x80:
            out.append(t2.encoded)

    for token in (t1, t0):
        if token.ordinal < 0x80:
            out.append(token.encoded)
    if allow_unicode:
        out.append(UNICODE_CATCH_ALL)
    return "".join(out)


def build_invalid_title_re(unicode_class: str) -> re.Pattern[str]:
    """Build the rejection pattern for titles given a legal code point class."""

    disallowed = f"[^{unicode_class}]" if unicode_class else "(?s:.)"
    return re.compile(
        disallowed
        # Percent-encoded sequences cannot be linked to consistently.
        + r"|%[0-9A-Fa-f]{2}"
        # Neither can XML/HTML character references.
        + r"|&[A-Za-z0-9\u0080-\U0010FFFF]+;"
        + r"|&#[0-9]+;"
        + r"|&#x[0-9A-Fa-f]+;"
    )


class LegalCharacterClassCompiler:
    """Compile and memoize legal-title-character specs.

    The cache maps the exact spec string to its compiled result. Compilation is
    deterministic, so concurrent callers racing on one key store equal values.
    """

    def __init__(
        self, cache: MutableMapping[str, CompiledTitleCharacters] | None = None
    ) -> None:
        """Initialize with an injected cache or a private dictionary."""

        self._cache: MutableMapping[str, CompiledTitleCharacters] = (
            cache if cache is not None else {}
        )

    @property
    def cache(self) -> MutableMapping[str, CompiledTitleCharacters]:
        """Return the backing cache for inspection."""

        return self._cache

    def compile(self, legal_title_chars: str) -> CompiledTitleCharacters:
        """Return the compiled form of a legal-title-characters spec."""

        cached = self._cache.get(legal_title_chars)
        if cached is not None:
            return cached

        unicode_class = convert_byte_class_to_unicode_class(legal_title_chars)
        compiled = CompiledTitleCharacters(
            unicode_class=unicode_class,
            invalid_title_re=build_invalid_title_re(unicode_class),
        )
        logger.debug("Compiled legal title characters class={}", unicode_class)
        return self._cache.setdefault(legal_title_chars, compiled)

    def to_unicode_class(self, legal_title_chars: str) -> str:
        """Return the code point class body for a byte class spec."""

        return self.compile(legal_title_chars).unicode_class

    def invalid_title_pattern(self, legal_title_chars: str) -> re.Pattern[str]:
        """Return the illegal-title pattern for a byte class spec."""

        return self.compile(legal_title_chars).invalid_title_re
