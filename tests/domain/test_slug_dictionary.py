from __future__ import annotations

import pytest

from domain.errors import RoutingConfigurationError
from domain.locales import LOCALES
from domain.slug_dictionary import (
    ROUTE_SEGMENTS,
    SLUG_DICTIONARY,
    Section,
    SlugDictionary,
    section_spelling,
)


def test_every_spelling_resolves_to_the_same_mapping() -> None:
    for canonical, spellings in ROUTE_SEGMENTS.items():
        for locale in LOCALES:
            mapping = SLUG_DICTIONARY.lookup(spellings[locale])
            assert mapping is not None
            assert mapping.canonical == canonical
            assert dict(mapping.spellings) == dict(spellings)


def test_lookup_unknown_segment_returns_none() -> None:
    assert SLUG_DICTIONARY.lookup("riga-loft") is None
    assert SLUG_DICTIONARY.canonical("riga-loft") is None
    assert "riga-loft" not in SLUG_DICTIONARY


def test_lookup_is_case_sensitive() -> None:
    assert SLUG_DICTIONARY.lookup("Mebeles") is None
    assert SLUG_DICTIONARY.lookup("mebeles") is not None


def test_canonical_key_is_the_english_spelling() -> None:
    for mapping in SLUG_DICTIONARY:
        assert mapping.canonical == mapping.spelling("en")


def test_section_spellings() -> None:
    assert section_spelling(Section.FURNITURE, "lv") == "mebeles"
    assert section_spelling(Section.STONE_SURFACES, "ru") == "kamennye-poverhnosti"
    assert section_spelling(Section.ABOUT, "en") == "about-us"
    assert SLUG_DICTIONARY.canonical("o-nas") == Section.ABOUT.value


def test_identical_spellings_share_one_mapping() -> None:
    mapping = SLUG_DICTIONARY.lookup("silestone")
    assert mapping is not None
    assert set(mapping.spellings.values()) == {"silestone"}


def test_dictionary_rejects_spelling_shared_between_segments() -> None:
    table = {
        "kitchens": {"lv": "virtuves", "en": "kitchens", "ru": "kuhni"},
        "cuisine": {"lv": "virtuves", "en": "cuisine", "ru": "kuhnya"},
    }
    with pytest.raises(RoutingConfigurationError, match="virtuves"):
        SlugDictionary(table)


def test_dictionary_rejects_missing_locale() -> None:
    with pytest.raises(RoutingConfigurationError, match="ru"):
        SlugDictionary({"kitchens": {"lv": "virtuves", "en": "kitchens"}})


def test_dictionary_rejects_canonical_outside_spellings() -> None:
    with pytest.raises(RoutingConfigurationError, match="kitchen"):
        SlugDictionary({"kitchen": {"lv": "virtuves", "en": "kitchens", "ru": "kuhni"}})


def test_dictionary_is_read_only() -> None:
    with pytest.raises(TypeError):
        ROUTE_SEGMENTS["new"] = {"lv": "x", "en": "new", "ru": "y"}  # type: ignore[index]
    mapping = SLUG_DICTIONARY.lookup("furniture")
    assert mapping is not None
    with pytest.raises(TypeError):
        mapping.spellings["lv"] = "other"  # type: ignore[index]
    assert len(SLUG_DICTIONARY) == len(ROUTE_SEGMENTS)
