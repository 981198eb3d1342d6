from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from domain.errors import RoutingConfigurationError
from domain.locales import LOCALES, Locale


class Section(StrEnum):
    STONE_SURFACES = "stone-surfaces"
    FURNITURE = "furniture"
    PROJECTS = "projects"
    ABOUT = "about-us"


# Canonical key -> spelling per locale. Every spelling is indexed, so a
# logical segment is declared once.
ROUTE_SEGMENTS: Final[Mapping[str, Mapping[Locale, str]]] = MappingProxyType(
    {
        # sections
        Section.STONE_SURFACES.value: {
            "lv": "akmens-virsmas",
            "en": "stone-surfaces",
            "ru": "kamennye-poverhnosti",
        },
        Section.FURNITURE.value: {"lv": "mebeles", "en": "furniture", "ru": "mebel"},
        Section.PROJECTS.value: {"lv": "projekti", "en": "projects", "ru": "proekty"},
        Section.ABOUT.value: {"lv": "par-mums", "en": "about-us", "ru": "o-nas"},
        # materials
        "silestone": {"lv": "silestone", "en": "silestone", "ru": "silestone"},
        "dekton": {"lv": "dekton", "en": "dekton", "ru": "dekton"},
        "granite": {"lv": "granits", "en": "granite", "ru": "granit"},
        "marble": {"lv": "marmors", "en": "marble", "ru": "mramor"},
        # furniture categories
        "kitchens": {"lv": "virtuves", "en": "kitchens", "ru": "kuhni"},
        "built-in": {"lv": "iebuvetajas", "en": "built-in", "ru": "vstroennaya"},
        "interior-projects": {
            "lv": "interjera-projekti",
            "en": "interior-projects",
            "ru": "interiernye-proekty",
        },
    }
)


@dataclass(frozen=True, eq=False)
class RouteSegmentMapping:
    canonical: str
    spellings: Mapping[Locale, str]

    def spelling(self, locale: Locale) -> str:
        return self.spellings[locale]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteSegmentMapping):
            return NotImplemented
        return self.canonical == other.canonical and dict(self.spellings) == dict(
            other.spellings
        )

    def __hash__(self) -> int:
        return hash(self.canonical)


class SlugDictionary:
    """Read-only index from any localized spelling to its route segment mapping.

    The table is validated once on construction: each entry must spell every
    locale, include its canonical key among its spellings, and no spelling may
    belong to two logical segments. Lookups never raise.
    """

    def __init__(
        self,
        table: Mapping[str, Mapping[Locale, str]],
        locales: Iterable[Locale] = LOCALES,
    ) -> None:
        self._locales: tuple[Locale, ...] = tuple(locales)
        by_canonical: dict[str, RouteSegmentMapping] = {}
        by_spelling: dict[str, RouteSegmentMapping] = {}
        for canonical, raw_spellings in table.items():
            mapping = self._build_mapping(str(canonical), raw_spellings)
            by_canonical[mapping.canonical] = mapping
            for spelling in set(mapping.spellings.values()):
                existing = by_spelling.get(spelling)
                if existing is not None and existing.canonical != mapping.canonical:
                    msg = (
                        f"Spelling {spelling!r} is shared by route segments "
                        f"{existing.canonical!r} and {mapping.canonical!r}"
                    )
                    raise RoutingConfigurationError(msg)
                by_spelling[spelling] = mapping
        self._by_canonical = MappingProxyType(by_canonical)
        self._by_spelling = MappingProxyType(by_spelling)

    @property
    def locales(self) -> tuple[Locale, ...]:
        return self._locales

    def lookup(self, segment: str) -> RouteSegmentMapping | None:
        return self._by_spelling.get(segment)

    def canonical(self, segment: str) -> str | None:
        mapping = self._by_spelling.get(segment)
        return mapping.canonical if mapping is not None else None

    def spelling(self, canonical: str, locale: Locale) -> str:
        return self._by_canonical[canonical].spelling(locale)

    def __iter__(self) -> Iterator[RouteSegmentMapping]:
        return iter(self._by_canonical.values())

    def __len__(self) -> int:
        return len(self._by_canonical)

    def __contains__(self, segment: object) -> bool:
        return isinstance(segment, str) and segment in self._by_spelling

    def _build_mapping(
        self, canonical: str, raw_spellings: Mapping[Locale, str]
    ) -> RouteSegmentMapping:
        missing = [locale for locale in self._locales if not raw_spellings.get(locale)]
        if missing:
            msg = f"Route segment {canonical!r} has no spelling for: {', '.join(missing)}"
            raise RoutingConfigurationError(msg)
        spellings = {locale: str(raw_spellings[locale]) for locale in self._locales}
        if canonical not in spellings.values():
            msg = f"Canonical key {canonical!r} is not one of its own spellings"
            raise RoutingConfigurationError(msg)
        return RouteSegmentMapping(canonical=canonical, spellings=MappingProxyType(spellings))


SLUG_DICTIONARY: Final[SlugDictionary] = SlugDictionary(ROUTE_SEGMENTS)


def section_spelling(section: Section, locale: Locale) -> str:
    return SLUG_DICTIONARY.spelling(section.value, locale)
