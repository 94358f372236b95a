"""Site profile construction from MediaWiki siteinfo payloads.

Responsibilities:
- Convert an `action=query&meta=siteinfo` response into a `SiteProfile`.
- Accept both API `formatversion=1` and `formatversion=2` shapes.
- Read stored siteinfo payloads from JSON or YAML files.

Fetching the payload over the network is the caller's job; this module only
interprets data that is already at hand.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from loguru import logger
import yaml

from .models.datatypes import (
    NamespaceAlias,
    NamespaceInfo,
    SiteProfile,
    SpecialPageAlias,
)
from .parsing import require_mapping


def _localized_name(entry: Mapping[str, Any]) -> str:
    """Return the localized name of a namespace or alias entry in either format."""

    for key in ("name", "alias", "*"):
        value = entry.get(key)
        if isinstance(value, str):
            return value
    return ""


def _subpages_flag(entry: Mapping[str, Any]) -> bool:
    """Return the subpages flag; format 1 marks it by key presence, format 2 by boolean."""

    if "subpages" not in entry:
        return False
    value = entry["subpages"]
    if isinstance(value, bool):
        return value
    return True


class SiteProfileLoader:
    """Factory methods for constructing `SiteProfile` objects."""

    @staticmethod
    def from_siteinfo(
        payload: Mapping[str, Any],
        source_label: str = "Siteinfo payload",
    ) -> SiteProfile:
        """Build a site profile from a siteinfo response or its `query` object."""

        if not isinstance(payload, Mapping):
            raise ValueError(f"{source_label} must be a mapping/object.")
        query = payload.get("query", payload)
        if not isinstance(query, Mapping):
            raise ValueError(f"{source_label} field `query` must be a mapping/object.")

        general = require_mapping(query, "general", source_label)
        language = SiteProfileLoader._required_string(general, "lang", source_label)
        legal_title_chars = SiteProfileLoader._required_string(
            general, "legaltitlechars", source_label
        )
        namespaces = SiteProfileLoader._namespaces(
            require_mapping(query, "namespaces", source_label), source_label
        )
        namespace_aliases = SiteProfileLoader._namespace_aliases(
            query.get("namespacealiases"), source_label
        )
        special_page_aliases = SiteProfileLoader._special_page_aliases(
            query.get("specialpagealiases"), source_label
        )

        profile = SiteProfile(
            language=language,
            legal_title_chars=legal_title_chars,
            namespaces=namespaces,
            namespace_aliases=namespace_aliases,
            special_page_aliases=special_page_aliases,
        )
        logger.debug(
            "Loaded site profile source={} language={} namespaces={} aliases={}",
            source_label,
            language,
            len(namespaces),
            len(namespace_aliases),
        )
        return profile

    @staticmethod
    def from_json(path: Path) -> SiteProfile:
        """Load a stored siteinfo payload from a JSON file."""

        payload = json.loads(path.read_text(encoding="utf-8"))
        return SiteProfileLoader.from_siteinfo(payload, source_label=f"Siteinfo file `{path}`")

    @staticmethod
    def from_yaml(path: Path) -> SiteProfile:
        """Load a stored siteinfo payload from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not isinstance(payload, Mapping):
            raise ValueError(f"Siteinfo file `{path}` must contain a top-level mapping/object.")
        return SiteProfileLoader.from_siteinfo(payload, source_label=f"Siteinfo file `{path}`")

    @staticmethod
    def _required_string(payload: Mapping[str, Any], key: str, source_label: str) -> str:
        """Read a required string field, allowing empty strings."""

        value = payload.get(key)
        if not isinstance(value, str):
            raise ValueError(f"{source_label} requires string field `{key}`.")
        return value

    @staticmethod
    def _namespaces(
        raw: Mapping[str, Any], source_label: str
    ) -> dict[int, NamespaceInfo]:
        """Parse the namespace table keyed by stringified id."""

        namespaces: dict[int, NamespaceInfo] = {}
        for raw_id, entry in raw.items():
            if not isinstance(entry, Mapping):
                raise ValueError(f"{source_label} namespace `{raw_id}` must be a mapping/object.")
            try:
                namespace_id = int(entry.get("id", raw_id))
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"{source_label} namespace `{raw_id}` has a non-integer id."
                ) from exc
            canonical = entry.get("canonical")
            namespaces[namespace_id] = NamespaceInfo(
                id=namespace_id,
                canonical=canonical if isinstance(canonical, str) else None,
                name=_localized_name(entry),
                case=str(entry.get("case", "")),
                subpages=_subpages_flag(entry),
            )
        return namespaces

    @staticmethod
    def _namespace_aliases(raw: object, source_label: str) -> tuple[NamespaceAlias, ...]:
        """Parse namespace alias records."""

        if raw is None:
            raise ValueError(f"{source_label} is missing required key `namespacealiases`.")
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `namespacealiases` must be a list.")

        aliases: list[NamespaceAlias] = []
        for entry in raw:
            if not isinstance(entry, Mapping) or "id" not in entry:
                raise ValueError(f"{source_label} has a malformed namespace alias: {entry!r}.")
            aliases.append(NamespaceAlias(alias=_localized_name(entry), namespace_id=int(entry["id"])))
        return tuple(aliases)

    @staticmethod
    def _special_page_aliases(raw: object, source_label: str) -> tuple[SpecialPageAlias, ...]:
        """Parse optional special page alias records, skipping entries without aliases."""

        if raw is None:
            return ()
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `specialpagealiases` must be a list.")

        aliases: list[SpecialPageAlias] = []
        for entry in raw:
            if not isinstance(entry, Mapping):
                raise ValueError(f"{source_label} has a malformed special page alias: {entry!r}.")
            spellings = tuple(str(alias) for alias in entry.get("aliases") or ())
            if not spellings:
                continue
            aliases.append(SpecialPageAlias(name=str(entry.get("realname", "")), aliases=spellings))
        return tuple(aliases)
