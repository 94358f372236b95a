"""Configuration model and loaders for title normalization.

Responsibilities:
- Define normalization limits and locale rules as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `NormalizerConfig`: validated normalization settings.
- `ConfigLoader`: static construction helpers for `NormalizerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_positive_int, parse_string_list
from .text.casing import DOTTED_I_LANGUAGES

_DEFAULT_MAX_TITLE_BYTES = 255
_DEFAULT_MAX_SPECIAL_TITLE_BYTES = 512


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Settings applied by `TitleNormalizer`.

    Attributes:
        max_title_bytes: UTF-8 byte limit of a title key outside the Special namespace.
        max_special_title_bytes: UTF-8 byte limit of a Special namespace title key.
        dotted_i_languages: Content languages where a leading `i` capitalizes to `İ`.
    """

    max_title_bytes: int = _DEFAULT_MAX_TITLE_BYTES
    max_special_title_bytes: int = _DEFAULT_MAX_SPECIAL_TITLE_BYTES
    dotted_i_languages: tuple[str, ...] = tuple(sorted(DOTTED_I_LANGUAGES))

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.max_title_bytes <= 0:
            raise ValueError("`max_title_bytes` must be a positive integer.")
        if self.max_special_title_bytes <= 0:
            raise ValueError("`max_special_title_bytes` must be a positive integer.")

    def max_bytes_for(self, is_special: bool) -> int:
        """Return the byte limit for a title in or outside the Special namespace."""

        return self.max_special_title_bytes if is_special else self.max_title_bytes


class ConfigLoader:
    """Factory methods for constructing `NormalizerConfig` objects."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"max_title_bytes", "max_special_title_bytes", "dotted_i_languages"}
    )
    _ENV_KEYS = {
        "max_title_bytes": "WIKITITLE_MAX_TITLE_BYTES",
        "max_special_title_bytes": "WIKITITLE_MAX_SPECIAL_TITLE_BYTES",
        "dotted_i_languages": "WIKITITLE_DOTTED_I_LANGUAGES",
    }

    @staticmethod
    def from_yaml(path: Path) -> NormalizerConfig:
        """Load configuration from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML config `{path}`")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "Config") -> NormalizerConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = NormalizerConfig()
        config = NormalizerConfig(
            max_title_bytes=ConfigLoader._optional_positive_int(
                payload, "max_title_bytes", defaults.max_title_bytes
            ),
            max_special_title_bytes=ConfigLoader._optional_positive_int(
                payload, "max_special_title_bytes", defaults.max_special_title_bytes
            ),
            dotted_i_languages=ConfigLoader._optional_string_list(
                payload, "dotted_i_languages", defaults.dotted_i_languages
            ),
        )
        config.validate()
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NormalizerConfig:
        """Load configuration from environment variables, defaults for unset keys."""

        env_map = env if env is not None else os.environ
        payload: dict[str, Any] = {}
        for key, env_key in ConfigLoader._ENV_KEYS.items():
            value = normalize_optional_string(env_map.get(env_key))
            if value is not None:
                payload[key] = value
        return ConfigLoader.from_mapping(payload, source_label="Environment")

    @staticmethod
    def _optional_positive_int(payload: Mapping[str, Any], key: str, default: int) -> int:
        """Read an optional positive integer field."""

        if key not in payload or normalize_optional_string(payload[key]) is None:
            return default
        return parse_positive_int(payload[key], key)

    @staticmethod
    def _optional_string_list(
        payload: Mapping[str, Any], key: str, default: tuple[str, ...]
    ) -> tuple[str, ...]:
        """Read an optional list of strings field."""

        if key not in payload or payload[key] is None:
            return default
        return tuple(item.lower() for item in parse_string_list(payload[key], key))
