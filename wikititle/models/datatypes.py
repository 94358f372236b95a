"""Site profile datatypes consumed by the normalization pipeline.

Responsibilities:
- Represent the read-only per-site metadata a title is normalized against.
- Keep namespace, alias and special-page tables immutable for concurrent use.

Key types:
- `NamespaceInfo`, `NamespaceAlias`, `SpecialPageAlias` and `SiteProfile`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

FIRST_LETTER_CASE = "first-letter"


@dataclass(frozen=True, slots=True)
class NamespaceInfo:
    """Display names and rules for one namespace id on a site.

    Attributes:
        id: Numeric namespace id.
        canonical: Site-independent English name, empty for the main namespace.
        name: Localized display name used when printing prefixed titles.
        case: Capitalization mode, `first-letter` forces an uppercase first character.
        subpages: Whether `/`-separated subpages are enabled in this namespace.
    """

    id: int
    canonical: str | None
    name: str
    case: str = FIRST_LETTER_CASE
    subpages: bool = False


@dataclass(frozen=True, slots=True)
class NamespaceAlias:
    """Alternative spelling that resolves to a namespace id."""

    alias: str
    namespace_id: int


@dataclass(frozen=True, slots=True)
class SpecialPageAlias:
    """Accepted spellings of one special page, primary spelling first.

    Attributes:
        name: Internal special page name (e.g. `Lonelypages`).
        aliases: Ordered alias spellings; `aliases[0]` is the primary one.
    """

    name: str
    aliases: tuple[str, ...]

    @property
    def primary(self) -> str:
        """Return the spelling a matched alias is rewritten to."""

        return self.aliases[0]


@dataclass(frozen=True, slots=True)
class SiteProfile:
    """Read-only title configuration of one wiki site.

    Attributes:
        language: Content language code of the site (e.g. `en`, `tr`).
        legal_title_chars: Byte-oriented character class of allowed title characters.
        namespaces: Namespace table keyed by id, in site table order.
        namespace_aliases: Alternative namespace spellings.
        special_page_aliases: Special page alias table; empty when the site supplies none.
    """

    language: str
    legal_title_chars: str
    namespaces: Mapping[int, NamespaceInfo]
    namespace_aliases: tuple[NamespaceAlias, ...] = field(default_factory=tuple)
    special_page_aliases: tuple[SpecialPageAlias, ...] = field(default_factory=tuple)

    def namespace_info(self, namespace_id: int) -> NamespaceInfo | None:
        """Return the table entry for a namespace id, or `None` when the site lacks it."""

        return self.namespaces.get(namespace_id)

    def case_mode(self, namespace_id: int) -> str | None:
        """Return the capitalization mode configured for a namespace id."""

        info = self.namespace_info(namespace_id)
        if info is None:
            return None
        return info.case
