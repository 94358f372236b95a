"""Text-level building blocks of title normalization.

This package provides input cleanup, legal character class compilation,
IP literal canonicalization and first-letter casing. The pipeline that
combines them lives in `wikititle.text.normalizer`.
"""

from .casing import uppercase_first
from .cleaners import (
    CollapseTitleWhitespace,
    StripFormattingControls,
    TitleTextCleaner,
    TrimUnderscores,
)
from .ip import is_ip_literal, sanitize_ip
from .legal_chars import (
    CompiledTitleCharacters,
    LegalCharacterClassCompiler,
    convert_byte_class_to_unicode_class,
)

__all__ = [
    "CollapseTitleWhitespace",
    "CompiledTitleCharacters",
    "LegalCharacterClassCompiler",
    "StripFormattingControls",
    "TitleTextCleaner",
    "TrimUnderscores",
    "convert_byte_class_to_unicode_class",
    "is_ip_literal",
    "sanitize_ip",
    "uppercase_first",
]
