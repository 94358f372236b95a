"""Namespace identifiers, values and name resolution.

Responsibilities:
- Define the fixed, site-independent namespace id space.
- Wrap namespace ids with the site profile that names them.
- Resolve namespace names and aliases typed by users to namespace ids.

Key types:
- `NamespaceId`: canonical integer ids shared by every site.
- `Namespace`: immutable id + site profile value compared by id.
- `NamespaceResolver`: name/alias lookup against a site profile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .models.datatypes import SiteProfile


class NamespaceId(IntEnum):
    """Canonical namespace ids, identical on every site."""

    MEDIA = -2
    SPECIAL = -1
    MAIN = 0
    TALK = 1
    USER = 2
    USER_TALK = 3
    PROJECT = 4
    PROJECT_TALK = 5
    FILE = 6
    IMAGE = 6
    FILE_TALK = 7
    IMAGE_TALK = 7
    MEDIAWIKI = 8
    MEDIAWIKI_TALK = 9
    TEMPLATE = 10
    TEMPLATE_TALK = 11
    HELP = 12
    HELP_TALK = 13
    CATEGORY = 14
    CATEGORY_TALK = 15


def _canonical_name(name: str) -> str:
    """Fold a namespace name for case- and separator-insensitive comparison."""

    return name.upper().replace("_", " ")


@dataclass(frozen=True, slots=True)
class Namespace:
    """A namespace id bound to the site profile that supplies its names.

    Equality and hashing only consider `id`, so namespaces built from different
    profile objects compare equal when they denote the same partition.
    """

    id: int
    profile: SiteProfile = field(compare=False, repr=False)

    @classmethod
    def main(cls, profile: SiteProfile) -> Namespace:
        """Return the main namespace of a site."""

        return cls(int(NamespaceId.MAIN), profile)

    @property
    def canonical_text(self) -> str:
        """Return the site-independent name in key form (underscores)."""

        info = self.profile.namespace_info(self.id)
        if info is None or not info.canonical:
            return ""
        return info.canonical.replace(" ", "_")

    @property
    def normalized_text(self) -> str:
        """Return the localized name in key form (underscores)."""

        info = self.profile.namespace_info(self.id)
        if info is None:
            return ""
        return info.name.replace(" ", "_")

    @property
    def subpages_enabled(self) -> bool:
        info = self.profile.namespace_info(self.id)
        return bool(info is not None and info.subpages)

    def is_media(self) -> bool:
        return self.id == NamespaceId.MEDIA

    def is_special(self) -> bool:
        return self.id == NamespaceId.SPECIAL

    def is_main(self) -> bool:
        return self.id == NamespaceId.MAIN

    def is_talk(self) -> bool:
        return self.id == NamespaceId.TALK

    def is_user(self) -> bool:
        return self.id == NamespaceId.USER

    def is_user_talk(self) -> bool:
        return self.id == NamespaceId.USER_TALK

    def is_project(self) -> bool:
        return self.id == NamespaceId.PROJECT

    def is_project_talk(self) -> bool:
        return self.id == NamespaceId.PROJECT_TALK

    def is_file(self) -> bool:
        return self.id == NamespaceId.FILE

    def is_image(self) -> bool:
        return self.is_file()

    def is_file_talk(self) -> bool:
        return self.id == NamespaceId.FILE_TALK

    def is_image_talk(self) -> bool:
        return self.is_file_talk()

    def is_mediawiki(self) -> bool:
        return self.id == NamespaceId.MEDIAWIKI

    def is_mediawiki_talk(self) -> bool:
        return self.id == NamespaceId.MEDIAWIKI_TALK

    def is_template(self) -> bool:
        return self.id == NamespaceId.TEMPLATE

    def is_template_talk(self) -> bool:
        return self.id == NamespaceId.TEMPLATE_TALK

    def is_help(self) -> bool:
        return self.id == NamespaceId.HELP

    def is_help_talk(self) -> bool:
        return self.id == NamespaceId.HELP_TALK

    def is_category(self) -> bool:
        return self.id == NamespaceId.CATEGORY

    def is_category_talk(self) -> bool:
        return self.id == NamespaceId.CATEGORY_TALK

    def is_a_talk_namespace(self) -> bool:
        """Return whether this is any talk namespace (odd, non-negative id)."""

        return self.id >= 0 and self.id % 2 == 1

    def talk(self) -> Namespace | None:
        """Return the talk namespace paired with this one, `None` for virtual namespaces."""

        if self.id < 0:
            return None
        return Namespace(self.id | 1, self.profile)

    def subject(self) -> Namespace | None:
        """Return the subject namespace paired with this one, `None` for virtual namespaces."""

        if self.id < 0:
            return None
        return Namespace(self.id & ~1, self.profile)


class NamespaceResolver:
    """Resolve user-typed namespace names against a site profile."""

    def resolve(self, name_text: str, profile: SiteProfile) -> Namespace | None:
        """Return the namespace named by `name_text`, or `None` when nothing matches.

        Each namespace table entry is checked by canonical then localized name;
        the alias table is consulted only when no table entry matches.
        """

        name = _canonical_name(name_text)
        for namespace_id, info in profile.namespaces.items():
            if info.canonical and _canonical_name(info.canonical) == name:
                return Namespace(namespace_id, profile)
            if info.name and _canonical_name(info.name) == name:
                return Namespace(namespace_id, profile)
        for alias in profile.namespace_aliases:
            if _canonical_name(alias.alias) == name:
                return Namespace(alias.namespace_id, profile)
        return None

    def longest_name_length(self, profile: SiteProfile) -> int:
        """Return the folded length of the longest name or alias `resolve` can match."""

        names = [
            name
            for info in profile.namespaces.values()
            for name in (info.canonical, info.name)
            if name
        ]
        names.extend(alias.alias for alias in profile.namespace_aliases)
        return max((len(_canonical_name(name)) for name in names), default=0)
