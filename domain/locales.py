# ruff: noqa: RUF001

from __future__ import annotations

from typing import Final, Literal, TypeGuard

Locale = Literal["lv", "en", "ru"]

LOCALES: Final[tuple[Locale, ...]] = ("lv", "en", "ru")
DEFAULT_LOCALE: Final[Locale] = "lv"

LOCALE_NAMES: Final[dict[Locale, str]] = {
    "lv": "Latviešu",
    "en": "English",
    "ru": "Русский",
}


def is_valid_locale(value: object) -> TypeGuard[Locale]:
    return isinstance(value, str) and value in LOCALES


def split_path(path: str) -> list[str]:
    return [segment for segment in str(path or "").split("/") if segment]
