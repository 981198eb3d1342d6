# ruff: noqa: RUF001

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from domain.locales import Locale
from domain.slug_dictionary import Section, section_spelling

_LATVIAN_TRANSLATIONS: Final[dict[str, str]] = {
    "Home": "Sākums",
    "Stone Surfaces": "Akmens virsmas",
    "Furniture": "Mēbeles",
    "Projects": "Projekti",
    "About Us": "Par mums",
    "Language": "Valoda",
    "Switch to {language}": "Pārslēgt uz {language}",
    "Page not found": "Lapa nav atrasta",
    "The page you are looking for does not exist.": "Meklētā lapa neeksistē.",
    "Back to home": "Atpakaļ uz sākumu",
    "Materials": "Materiāli",
}

_RUSSIAN_TRANSLATIONS: Final[dict[str, str]] = {
    "Home": "Главная",
    "Stone Surfaces": "Каменные поверхности",
    "Furniture": "Мебель",
    "Projects": "Проекты",
    "About Us": "О нас",
    "Language": "Язык",
    "Switch to {language}": "Переключить на {language}",
    "Page not found": "Страница не найдена",
    "The page you are looking for does not exist.": "Запрашиваемая страница не существует.",
    "Back to home": "Вернуться на главную",
    "Materials": "Материалы",
}

_TRANSLATIONS: Final[dict[Locale, dict[str, str]]] = {
    "lv": _LATVIAN_TRANSLATIONS,
    "ru": _RUSSIAN_TRANSLATIONS,
}

_SECTION_LABELS: Final[dict[Section, str]] = {
    Section.STONE_SURFACES: "Stone Surfaces",
    Section.FURNITURE: "Furniture",
    Section.PROJECTS: "Projects",
    Section.ABOUT: "About Us",
}


@dataclass(frozen=True)
class NavLink:
    label: str
    url: str


@dataclass(frozen=True)
class UILocalizer:
    language: Locale
    overrides: Mapping[str, str] = field(default_factory=dict)

    def t(self, key: str, **kwargs: object) -> str:
        template = self.overrides.get(key) or translate_ui_text(key, self.language)
        if not kwargs:
            return template
        values = {name: str(value) for name, value in kwargs.items()}
        try:
            return template.format(**values)
        except KeyError:
            return template

    def section_label(self, section: Section) -> str:
        return self.t(_SECTION_LABELS[section])


def translate_ui_text(key: str, language: Locale) -> str:
    table = _TRANSLATIONS.get(language)
    if table is None:
        return key
    return table.get(key, key)


def build_localizer(
    language: Locale,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> UILocalizer:
    locale_overrides = dict((overrides or {}).get(language, {}))
    return UILocalizer(language=language, overrides=locale_overrides)


def build_nav_links(localizer: UILocalizer) -> list[NavLink]:
    locale = localizer.language
    links = [NavLink(label=localizer.t("Home"), url=f"/{locale}")]
    links.append(NavLink(label=localizer.t("Materials"), url=f"/{locale}#materials"))
    for section in (Section.FURNITURE, Section.PROJECTS, Section.ABOUT):
        links.append(
            NavLink(
                label=localizer.section_label(section),
                url=f"/{locale}/{section_spelling(section, locale)}",
            )
        )
    return links
