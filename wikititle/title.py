"""Canonical title value type.

Responsibilities:
- Hold the output of the normalization pipeline as an immutable record.
- Render prefixed keys and human-readable text for a title.
"""

from __future__ import annotations

from dataclasses import dataclass

from .namespace import Namespace


@dataclass(frozen=True, slots=True, eq=False)
class Title:
    """A normalized page title.

    Attributes:
        key: Canonical key without namespace prefix or fragment, underscore-separated.
        namespace: Namespace the title belongs to.
        fragment: Section fragment without its leading `#`, or `None`.
    """

    key: str
    namespace: Namespace
    fragment: str | None = None

    def __post_init__(self) -> None:
        """Reject keys that are not in canonical underscore form."""

        if " " in self.key:
            raise ValueError(f"Title key `{self.key}` must use underscores, not spaces.")
        if not self.key and not self.namespace.is_main():
            raise ValueError("Title key may only be empty in the main namespace.")

    @classmethod
    def from_key(
        cls,
        key: str,
        namespace: Namespace,
        fragment: str | None = None,
    ) -> Title:
        """Rebuild a title from an already-canonical key (e.g. a cache entry)."""

        return cls(key=key, namespace=namespace, fragment=fragment or None)

    @property
    def text(self) -> str:
        """Return the key with underscores rendered as spaces."""

        return self.key.replace("_", " ")

    @property
    def prefixed_key(self) -> str:
        """Return `Namespace:Key`, or just the key in the main namespace."""

        if self.namespace.is_main():
            return self.key
        return f"{self.namespace.normalized_text}:{self.key}"

    @property
    def prefixed_text(self) -> str:
        """Return the prefixed key with underscores rendered as spaces."""

        return self.prefixed_key.replace("_", " ")

    def equals(self, other: object) -> bool:
        """Return whether `other` names the same page (fragment is ignored)."""

        if not isinstance(other, Title):
            return False
        return self.key == other.key and self.namespace.id == other.namespace.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Title):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.key, self.namespace.id))

    def __str__(self) -> str:
        return self.prefixed_key
