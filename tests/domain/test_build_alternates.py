from __future__ import annotations

import pytest

from domain.locales import LOCALES
from domain.services.build_alternates import (
    X_DEFAULT,
    absolute_url,
    alternate_urls,
    build_hreflang_links,
    build_language_options,
    build_seo_alternates,
)


def test_alternate_urls_cover_every_locale() -> None:
    assert alternate_urls("/lv/mebeles/virtuves", "lv") == {
        "lv": "/lv/mebeles/virtuves",
        "en": "/en/furniture/kitchens",
        "ru": "/ru/mebel/kuhni",
    }


def test_alternates_for_about_page() -> None:
    assert alternate_urls("/en/about-us", "en") == {
        "lv": "/lv/par-mums",
        "en": "/en/about-us",
        "ru": "/ru/o-nas",
    }


@pytest.mark.parametrize(
    "path",
    ["", "/lv", "/en/projects/riga-loft", "/ru/mebel/kuhni/extra", "/de/furniture", "plain"],
)
def test_alternates_cover_every_locale_for_any_path(path: str) -> None:
    for current in LOCALES:
        alternates = alternate_urls(path, current)
        assert tuple(alternates) == LOCALES
        links = build_hreflang_links(alternates, current)
        assert [link.hreflang for link in links] == [*LOCALES, X_DEFAULT]


def test_hreflang_links_include_x_default_for_current_locale() -> None:
    alternates = alternate_urls("/en/projects", "en")
    links = build_hreflang_links(alternates, "ru", "https://lago.lv/")
    assert [link.hreflang for link in links] == ["lv", "en", "ru", X_DEFAULT]
    assert links[0].href == "https://lago.lv/lv/projekti"
    assert links[-1].href == "https://lago.lv/ru/proekty"
    assert links[1].to_dict() == {
        "rel": "alternate",
        "hreflang": "en",
        "href": "https://lago.lv/en/projects",
    }


def test_hreflang_links_stay_relative_without_base_url() -> None:
    links = build_hreflang_links(alternate_urls("/lv", "lv"), "lv")
    assert [link.href for link in links] == ["/lv", "/en", "/ru", "/lv"]


def test_language_options_mark_current_locale() -> None:
    options = build_language_options(alternate_urls("/ru/o-nas", "ru"), "ru")
    assert [(option.locale, option.url, option.is_current) for option in options] == [
        ("lv", "/lv/par-mums", False),
        ("en", "/en/about-us", False),
        ("ru", "/ru/o-nas", True),
    ]
    assert options[1].label == "English"


def test_absolute_url() -> None:
    assert absolute_url("https://lago.lv/", "/en") == "https://lago.lv/en"
    assert absolute_url("", "/en") == "/en"


def test_seo_alternates() -> None:
    alternates = alternate_urls("/lv/akmens-virsmas/granits", "lv")
    seo = build_seo_alternates("https://lago.lv", alternates, "lv")
    assert seo.canonical == "https://lago.lv/lv/akmens-virsmas/granits"
    assert seo.languages == {
        "lv": "https://lago.lv/lv/akmens-virsmas/granits",
        "en": "https://lago.lv/en/stone-surfaces/granite",
        "ru": "https://lago.lv/ru/kamennye-poverhnosti/granit",
        X_DEFAULT: "https://lago.lv/lv/akmens-virsmas/granits",
    }


def test_seo_alternates_accept_content_aware_alternates() -> None:
    alternates = {
        "lv": "/lv/projekti/jurmalas-maja",
        "en": "/en/projects/jurmala-house",
        "ru": "/ru/proekty/dom-v-yurmale",
    }
    seo = build_seo_alternates("https://lago.lv", alternates, "en")
    assert seo.canonical == "https://lago.lv/en/projects/jurmala-house"
    assert seo.to_dict()["languages"][X_DEFAULT] == "https://lago.lv/en/projects/jurmala-house"
    assert [link.hreflang for link in seo.links] == ["lv", "en", "ru", X_DEFAULT]
