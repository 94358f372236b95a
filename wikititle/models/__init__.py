"""Site profile data model exports."""

from .datatypes import (
    FIRST_LETTER_CASE,
    NamespaceAlias,
    NamespaceInfo,
    SiteProfile,
    SpecialPageAlias,
)

__all__ = [
    "FIRST_LETTER_CASE",
    "NamespaceAlias",
    "NamespaceInfo",
    "SiteProfile",
    "SpecialPageAlias",
]
