"""Domain exceptions for title validation diagnostics."""

from __future__ import annotations

from enum import Enum


class TitleErrorKind(str, Enum):
    """Validation failure categories reported by the normalization pipeline."""

    INVALID_UTF8 = "title-invalid-utf8"
    INVALID_EMPTY = "title-invalid-empty"
    INVALID_CHARACTERS = "title-invalid-characters"
    INVALID_TALK_NAMESPACE = "title-invalid-talk-namespace"
    INVALID_RELATIVE = "title-invalid-relative"
    INVALID_MAGIC_TILDE = "title-invalid-magic-tilde"
    INVALID_TOO_LONG = "title-invalid-too-long"


class InvalidTitleError(ValueError):
    """Raised when a title text violates one of the site's title rules."""

    def __init__(
        self,
        *,
        kind: TitleErrorKind,
        title: str,
        offending: str | None = None,
        max_length: int | None = None,
    ) -> None:
        """Initialize a kind-scoped title error with caller-facing context."""

        super().__init__(kind.value)
        self.kind = kind
        self.title = title
        self.offending = offending
        self.max_length = max_length
