"""Structured normalization logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level logs for title normalization.
- Route package log records through `loguru`, which the package keeps
  disabled until a caller opts in by creating a `NormalizationLogger`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "wikititle"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class NormalizationLogger:
    """Emit deterministic stage logs for title normalization activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Enable package records and attach a plain-message sink."""

        self._sink = sink or sys.stderr
        logger.enable(_PACKAGE_NAME)
        self._handler_id = logger.add(
            self._sink,
            format="{message}",
            level=level,
            colorize=False,
            filter=_PACKAGE_NAME,
        )

    def close(self) -> None:
        """Detach the sink installed by this logger and silence package records again."""

        logger.remove(self._handler_id)
        logger.disable(_PACKAGE_NAME)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured log line."""

        line = f"[title] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_normalized(self, prefixed_key: str, namespace_id: int) -> None:
        """Emit a normalization-complete event."""

        self._emit("DEBUG", "complete", "assemble", key=prefixed_key, namespace=namespace_id)

    def log_stage_failure(self, stage: str, error_kind: str) -> None:
        """Emit a stage-failure event without the offending title payload."""

        self._emit("INFO", "failure", stage, error_kind=error_kind)
