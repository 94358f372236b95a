"""Unit tests for the canonical title value type."""

from __future__ import annotations

from dataclasses import replace

import pytest

from wikititle.models.datatypes import SiteProfile
from wikititle.namespace import Namespace, NamespaceId
from wikititle.title import Title


def test_title_renders_prefixed_key_and_text(enwiki: SiteProfile) -> None:
    """Prefixed forms should use the localized namespace name."""

    title = Title.from_key("Sandbox/Notes_2", Namespace(NamespaceId.PROJECT_TALK, enwiki))

    assert title.key == "Sandbox/Notes_2"
    assert title.text == "Sandbox/Notes 2"
    assert title.prefixed_key == "Wikipedia_talk:Sandbox/Notes_2"
    assert title.prefixed_text == "Wikipedia talk:Sandbox/Notes 2"
    assert str(title) == "Wikipedia_talk:Sandbox/Notes_2"
    assert title.fragment is None


def test_title_in_main_namespace_has_no_prefix(enwiki: SiteProfile) -> None:
    title = Title.from_key("X-Men_(film_series)", Namespace.main(enwiki), fragment="Cast")

    assert title.prefixed_key == "X-Men_(film_series)"
    assert title.prefixed_text == "X-Men (film series)"
    assert title.fragment == "Cast"


def test_title_from_key_turns_empty_fragment_into_none(enwiki: SiteProfile) -> None:
    assert Title.from_key("Foo", Namespace.main(enwiki), fragment="").fragment is None


def test_title_allows_empty_key_only_in_main_namespace(enwiki: SiteProfile) -> None:
    """A bare-fragment title lives in main; other namespaces need a key."""

    assert Title("", Namespace.main(enwiki), fragment="Top").prefixed_key == ""
    with pytest.raises(ValueError, match="only be empty in the main namespace"):
        Title("", Namespace(NamespaceId.USER, enwiki))


def test_title_rejects_keys_with_spaces(enwiki: SiteProfile) -> None:
    with pytest.raises(ValueError, match="must use underscores"):
        Title("Foo bar", Namespace.main(enwiki))


def test_title_equality_ignores_fragment_and_profile(enwiki: SiteProfile) -> None:
    """Equality compares key and namespace id only."""

    other_profile = replace(enwiki, language="de")
    title = Title("Foo", Namespace(NamespaceId.USER, enwiki), fragment="a")
    same_page = Title("Foo", Namespace(NamespaceId.USER, other_profile), fragment="b")

    assert title == same_page
    assert title.equals(same_page)
    assert hash(title) == hash(same_page)
    assert len({title, same_page}) == 1
    assert title != Title("Foo", Namespace(NamespaceId.USER_TALK, enwiki))
    assert title != Title("Bar", Namespace(NamespaceId.USER, enwiki))
    assert not title.equals("User:Foo")
    assert title != "User:Foo"
