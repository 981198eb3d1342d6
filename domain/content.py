from __future__ import annotations

from typing import Final, Literal, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.locales import LOCALES, Locale

Collection = Literal["materials", "furniture", "projects"]
COLLECTIONS: Final[tuple[Collection, ...]] = ("materials", "furniture", "projects")


class LocalizedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    lv: str
    en: str
    ru: str

    def get(self, locale: Locale) -> str:
        return cast(str, getattr(self, locale))

    def as_dict(self) -> dict[Locale, str]:
        return {locale: self.get(locale) for locale in LOCALES}


class LocalizedSlug(LocalizedText):
    lv: str = Field(..., min_length=1)
    en: str = Field(..., min_length=1)
    ru: str = Field(..., min_length=1)

    @field_validator("lv", "en", "ru", mode="before")
    @classmethod
    def strip_slashes(cls, value: object) -> str:
        return str(value or "").strip().strip("/")


class ContentEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    slug: LocalizedSlug
    title: LocalizedText | None = None
    description: LocalizedText | None = None


class ContentSnapshot(BaseModel):
    """Immutable view of the content collections the router matches against."""

    model_config = ConfigDict(frozen=True)

    materials: tuple[ContentEntry, ...] = ()
    furniture: tuple[ContentEntry, ...] = ()
    projects: tuple[ContentEntry, ...] = ()

    def entries(self, collection: Collection) -> tuple[ContentEntry, ...]:
        return cast(tuple[ContentEntry, ...], getattr(self, collection))
