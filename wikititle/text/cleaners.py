"""Deterministic title text cleaning rules.

Responsibilities:
- Provide composable cleanup rules for raw, user-supplied title text.
- Keep cleanup predictable so textual variants of one title converge.
"""

from __future__ import annotations

import re
from typing import Protocol


class CleanerRule(Protocol):
    """Protocol for title cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class StripFormattingControls:
    """Remove soft hyphens and bidirectional formatting characters."""

    _CONTROLS_RE = re.compile(r"[\u00AD\u200E\u200F\u202A-\u202E]")

    def apply(self, text: str) -> str:
        """Drop invisible formatting characters anywhere in the text."""

        return self._CONTROLS_RE.sub("", text)


class CollapseTitleWhitespace:
    """Turn runs of space-equivalent characters into a single underscore."""

    _WHITESPACE_RE = re.compile(
        r"[ _\u00A0\u1680\u180E\u2000-\u200A\u2028\u2029\u202F\u205F\u3000]+"
    )

    def apply(self, text: str) -> str:
        """Collapse spaces, underscores and Unicode space separators."""

        return self._WHITESPACE_RE.sub("_", text)


class TrimUnderscores:
    """Strip leading and trailing underscore runs."""

    def apply(self, text: str) -> str:
        return text.strip("_")


class TitleTextCleaner:
    """Apply a sequence of deterministic cleaner rules."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or default rule sequence."""

        self.rules = rules or [
            StripFormattingControls(),
            CollapseTitleWhitespace(),
            TrimUnderscores(),
        ]

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
