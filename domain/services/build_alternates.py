from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from domain.locales import LOCALE_NAMES, LOCALES, Locale
from domain.services.translate_path import translate_path
from domain.slug_dictionary import SLUG_DICTIONARY, SlugDictionary

X_DEFAULT = "x-default"


@dataclass(frozen=True)
class HreflangLink:
    hreflang: str
    href: str

    def to_dict(self) -> dict[str, str]:
        return {"rel": "alternate", "hreflang": self.hreflang, "href": self.href}


@dataclass(frozen=True)
class LanguageOption:
    locale: Locale
    label: str
    url: str
    is_current: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "label": self.label,
            "url": self.url,
            "is_current": self.is_current,
        }


@dataclass(frozen=True)
class SeoAlternates:
    canonical: str
    links: tuple[HreflangLink, ...]

    @property
    def languages(self) -> dict[str, str]:
        return {link.hreflang: link.href for link in self.links}

    def to_dict(self) -> dict[str, Any]:
        return {"canonical": self.canonical, "languages": self.languages}


def alternate_urls(
    path: str,
    current_locale: Locale,
    locales: Iterable[Locale] = LOCALES,
    dictionary: SlugDictionary = SLUG_DICTIONARY,
) -> dict[Locale, str]:
    return {
        locale: translate_path(path, current_locale, locale, dictionary) for locale in locales
    }


def absolute_url(base_url: str, path: str) -> str:
    base = str(base_url or "").rstrip("/")
    if not base:
        return path
    return f"{base}{path}"


def build_hreflang_links(
    alternates: Mapping[Locale, str],
    current_locale: Locale,
    base_url: str = "",
) -> list[HreflangLink]:
    links = [
        HreflangLink(hreflang=locale, href=absolute_url(base_url, url))
        for locale, url in alternates.items()
    ]
    links.append(
        HreflangLink(hreflang=X_DEFAULT, href=absolute_url(base_url, alternates[current_locale]))
    )
    return links


def build_language_options(
    alternates: Mapping[Locale, str],
    current_locale: Locale,
) -> list[LanguageOption]:
    return [
        LanguageOption(
            locale=locale,
            label=LOCALE_NAMES[locale],
            url=url,
            is_current=locale == current_locale,
        )
        for locale, url in alternates.items()
    ]


def build_seo_alternates(
    base_url: str,
    alternates: Mapping[Locale, str],
    current_locale: Locale,
) -> SeoAlternates:
    """Canonical URL and hreflang links (every locale plus x-default) for one page."""
    return SeoAlternates(
        canonical=absolute_url(base_url, alternates[current_locale]),
        links=tuple(build_hreflang_links(alternates, current_locale, base_url)),
    )
