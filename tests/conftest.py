"""Shared pytest fixtures for the full wikititle test suite."""

from __future__ import annotations

from dataclasses import replace

import pytest

from tests.fixture_paths import siteinfo_fixture_path
from wikititle import SiteProfile, SiteProfileLoader, TitleNormalizer


@pytest.fixture(scope="session")
def enwiki() -> SiteProfile:
    """Provide the English Wikipedia profile (API format version 2)."""

    return SiteProfileLoader.from_json(siteinfo_fixture_path("enwiki_siteinfo.json"))


@pytest.fixture(scope="session")
def enwiktionary() -> SiteProfile:
    """Provide the English Wiktionary profile (API format version 1, case-sensitive main)."""

    return SiteProfileLoader.from_json(siteinfo_fixture_path("enwiktionary_siteinfo.json"))


@pytest.fixture(scope="session")
def eswiki() -> SiteProfile:
    """Provide the Spanish Wikipedia profile with localized special page aliases."""

    return SiteProfileLoader.from_json(siteinfo_fixture_path("eswiki_siteinfo.json"))


@pytest.fixture(scope="session")
def trwiki() -> SiteProfile:
    """Provide the Turkish Wikipedia profile loaded from YAML."""

    return SiteProfileLoader.from_yaml(siteinfo_fixture_path("trwiki_siteinfo.yml"))


@pytest.fixture(scope="session")
def profiles(
    enwiki: SiteProfile,
    enwiktionary: SiteProfile,
    eswiki: SiteProfile,
    trwiki: SiteProfile,
) -> dict[str, SiteProfile]:
    """Provide profiles keyed by domain, with language variants of enwiki."""

    return {
        "en.wikipedia.org": enwiki,
        "en.wiktionary.org": enwiktionary,
        "es.wikipedia.org": eswiki,
        "tr.wikipedia.org": trwiki,
        "az.wikipedia.org": replace(enwiki, language="az"),
        "kk.wikipedia.org": replace(enwiki, language="kk"),
        "kaa.wikipedia.org": replace(enwiki, language="kaa"),
        "ka.wikipedia.org": replace(enwiki, language="ka"),
    }


@pytest.fixture
def normalizer() -> TitleNormalizer:
    """Provide a normalizer with a fresh compiler cache."""

    return TitleNormalizer()
