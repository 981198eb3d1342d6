from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from domain.content import Collection, ContentEntry, ContentSnapshot
from domain.locales import LOCALES, Locale
from domain.routes import (
    AboutPage,
    FurnitureDetail,
    FurnitureList,
    MaterialDetail,
    ProjectDetail,
    ProjectList,
    ResolvedRoute,
)
from domain.slug_dictionary import Section, section_spelling

_SECTION_COLLECTIONS: tuple[tuple[Section, Collection | None, str, str | None], ...] = (
    (Section.STONE_SURFACES, "materials", MaterialDetail.kind, None),
    (Section.FURNITURE, "furniture", FurnitureDetail.kind, FurnitureList.kind),
    (Section.PROJECTS, "projects", ProjectDetail.kind, ProjectList.kind),
    (Section.ABOUT, None, "", AboutPage.kind),
)


@dataclass(frozen=True)
class RouteManifestEntry:
    locale: Locale
    path: str
    kind: str
    entry_id: str | None = None
    alternates: dict[Locale, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "path": self.path,
            "kind": self.kind,
            "entry_id": self.entry_id,
            "alternates": dict(self.alternates),
        }


def section_path(section: Section, locale: Locale, entry: ContentEntry | None = None) -> str:
    path = f"/{locale}/{section_spelling(section, locale)}"
    if entry is None:
        return path
    return f"{path}/{entry.slug.get(locale)}"


def section_alternates(
    section: Section,
    entry: ContentEntry | None = None,
    locales: Iterable[Locale] = LOCALES,
) -> dict[Locale, str]:
    return {locale: section_path(section, locale, entry) for locale in locales}


def route_alternates(route: ResolvedRoute) -> dict[Locale, str] | None:
    """Alternates built from the matched entry's own per-locale slugs."""
    if isinstance(route, MaterialDetail):
        return section_alternates(Section.STONE_SURFACES, route.entry)
    if isinstance(route, FurnitureDetail):
        return section_alternates(Section.FURNITURE, route.entry)
    if isinstance(route, ProjectDetail):
        return section_alternates(Section.PROJECTS, route.entry)
    if isinstance(route, FurnitureList):
        return section_alternates(Section.FURNITURE)
    if isinstance(route, ProjectList):
        return section_alternates(Section.PROJECTS)
    if isinstance(route, AboutPage):
        return section_alternates(Section.ABOUT)
    return None


def enumerate_routes(
    snapshot: ContentSnapshot,
    locales: Iterable[Locale] = LOCALES,
) -> list[RouteManifestEntry]:
    """List every page the catch-all route can render, grouped by locale.

    The stone surfaces index is not listed: it redirects to the home page.
    """
    locales = tuple(locales)
    routes: list[RouteManifestEntry] = []
    for locale in locales:
        for section, collection, detail_kind, list_kind in _SECTION_COLLECTIONS:
            if list_kind is not None:
                routes.append(
                    RouteManifestEntry(
                        locale=locale,
                        path=section_path(section, locale),
                        kind=list_kind,
                        alternates=section_alternates(section, locales=locales),
                    )
                )
            if collection is None:
                continue
            for entry in snapshot.entries(collection):
                routes.append(
                    RouteManifestEntry(
                        locale=locale,
                        path=section_path(section, locale, entry),
                        kind=detail_kind,
                        entry_id=entry.id,
                        alternates=section_alternates(section, entry, locales=locales),
                    )
                )
    return routes
