from __future__ import annotations

from collections.abc import Sequence

from domain.content import Collection, ContentEntry
from domain.locales import Locale, is_valid_locale, split_path
from domain.ports.content import ContentProvider
from domain.routes import (
    AboutPage,
    FurnitureDetail,
    FurnitureList,
    MaterialDetail,
    NotFound,
    ProjectDetail,
    ProjectList,
    Redirect,
    ResolvedRoute,
)
from domain.slug_dictionary import SLUG_DICTIONARY, Section, SlugDictionary

MATERIALS_ANCHOR = "materials"


class CatchAllResolver:
    """Resolve ``/{locale}/{section}[/{slug}]`` paths against content collections.

    The section segment is mapped back to its canonical key through the slug
    dictionary and only accepted in the request locale's own spelling. Detail
    slugs are matched exactly against ``entry.slug[locale]`` in collection
    order. Segments past the ones a section uses are ignored. Anything
    unmatched resolves to ``NotFound``.
    """

    def __init__(
        self,
        content: ContentProvider,
        dictionary: SlugDictionary = SLUG_DICTIONARY,
    ) -> None:
        self._content = content
        self._dictionary = dictionary

    def resolve_path(self, path: str) -> ResolvedRoute:
        segments = split_path(path)
        if not segments or not is_valid_locale(segments[0]):
            return NotFound(locale=None)
        return self.resolve(segments[0], segments[1:])

    def resolve(self, locale: Locale, segments: Sequence[str]) -> ResolvedRoute:
        section = self._match_section(locale, segments)
        if section is None:
            return NotFound(locale=locale)
        rest = list(segments[1:])

        if section is Section.STONE_SURFACES:
            if not rest:
                return Redirect(locale=locale, location=f"/{locale}#{MATERIALS_ANCHOR}")
            entry = self._match_entry("materials", locale, rest[0])
            return MaterialDetail(locale, entry) if entry else NotFound(locale)

        if section is Section.FURNITURE:
            if not rest:
                return FurnitureList(locale)
            entry = self._match_entry("furniture", locale, rest[0])
            return FurnitureDetail(locale, entry) if entry else NotFound(locale)

        if section is Section.PROJECTS:
            if not rest:
                return ProjectList(locale)
            entry = self._match_entry("projects", locale, rest[0])
            return ProjectDetail(locale, entry) if entry else NotFound(locale)

        return AboutPage(locale)

    def _match_section(self, locale: Locale, segments: Sequence[str]) -> Section | None:
        if not segments:
            return None
        segment = segments[0]
        mapping = self._dictionary.lookup(segment)
        if mapping is None or mapping.spelling(locale) != segment:
            return None
        try:
            return Section(mapping.canonical)
        except ValueError:
            return None

    def _match_entry(
        self, collection: Collection, locale: Locale, slug: str
    ) -> ContentEntry | None:
        for entry in self._content.entries(collection):
            if entry.slug.get(locale) == slug:
                return entry
        return None
