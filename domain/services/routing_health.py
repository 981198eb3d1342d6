from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Literal

from domain.content import COLLECTIONS, Collection, ContentEntry, ContentSnapshot
from domain.locales import Locale
from domain.slug_dictionary import SLUG_DICTIONARY, Section, SlugDictionary

ISSUE_DUPLICATE_SLUG = "duplicate_slug"
ISSUE_RESERVED_SECTION_SLUG = "reserved_section_slug"
ISSUE_DICTIONARY_CONFLICT = "dictionary_conflict"
ISSUE_UNTRANSLATABLE_SLUG = "untranslatable_slug"

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class RoutingIssue:
    code: str
    severity: Severity
    collection: Collection
    entry_id: str
    locale: Locale | None
    slug: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "severity": self.severity,
            "collection": self.collection,
            "entry_id": self.entry_id,
            "locale": self.locale,
            "slug": self.slug,
            "message": self.message,
        }


@dataclass(frozen=True)
class RoutingHealthReport:
    issues: tuple[RoutingIssue, ...] = field(default_factory=tuple)

    @property
    def errors(self) -> tuple[RoutingIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity == "error")

    @property
    def warnings(self) -> tuple[RoutingIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity == "warning")

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == "error" for issue in self.issues)

    def codes(self) -> set[str]:
        return {issue.code for issue in self.issues}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "issues": [issue.to_dict() for issue in self.issues],
        }


class BuildRoutingHealthReport:
    """Check live content slugs against each other and the slug dictionary.

    Errors mark slugs that cannot resolve or would translate to another page.
    Warnings mark slugs that differ per locale but are unknown to the
    dictionary, so the path translator keeps them unchanged.
    """

    def __init__(self, dictionary: SlugDictionary = SLUG_DICTIONARY) -> None:
        self._dictionary = dictionary
        self._section_spellings = {
            self._dictionary.spelling(section.value, locale)
            for section in Section
            for locale in self._dictionary.locales
        }

    def build(self, snapshot: ContentSnapshot) -> RoutingHealthReport:
        issues: list[RoutingIssue] = []
        for collection in COLLECTIONS:
            entries = snapshot.entries(collection)
            issues.extend(self._duplicate_issues(collection, entries))
            for entry in entries:
                issues.extend(self._entry_issues(collection, entry))
        return RoutingHealthReport(issues=tuple(issues))

    def _duplicate_issues(
        self, collection: Collection, entries: tuple[ContentEntry, ...]
    ) -> list[RoutingIssue]:
        issues: list[RoutingIssue] = []
        for locale in self._dictionary.locales:
            owners: dict[str, list[str]] = defaultdict(list)
            for entry in entries:
                owners[entry.slug.get(locale)].append(entry.id)
            for slug, entry_ids in owners.items():
                if len(entry_ids) < 2:
                    continue
                for entry_id in entry_ids[1:]:
                    issues.append(
                        RoutingIssue(
                            code=ISSUE_DUPLICATE_SLUG,
                            severity="error",
                            collection=collection,
                            entry_id=entry_id,
                            locale=locale,
                            slug=slug,
                            message=(
                                f"Slug {slug!r} ({locale}) is already used by {entry_ids[0]!r}; "
                                "only the first entry is reachable"
                            ),
                        )
                    )
        return issues

    def _entry_issues(self, collection: Collection, entry: ContentEntry) -> list[RoutingIssue]:
        issues: list[RoutingIssue] = []
        slugs = entry.slug.as_dict()
        for locale, slug in slugs.items():
            if slug in self._section_spellings:
                issues.append(
                    RoutingIssue(
                        code=ISSUE_RESERVED_SECTION_SLUG,
                        severity="error",
                        collection=collection,
                        entry_id=entry.id,
                        locale=locale,
                        slug=slug,
                        message=f"Slug {slug!r} ({locale}) is reserved for a site section",
                    )
                )
                continue
            mapping = self._dictionary.lookup(slug)
            if mapping is None:
                continue
            if dict(mapping.spellings) != slugs:
                issues.append(
                    RoutingIssue(
                        code=ISSUE_DICTIONARY_CONFLICT,
                        severity="error",
                        collection=collection,
                        entry_id=entry.id,
                        locale=locale,
                        slug=slug,
                        message=(
                            f"Slug {slug!r} ({locale}) translates as route segment "
                            f"{mapping.canonical!r} which disagrees with the entry slugs"
                        ),
                    )
                )

        distinct = set(slugs.values())
        if len(distinct) > 1 and not any(slug in self._dictionary for slug in distinct):
            issues.append(
                RoutingIssue(
                    code=ISSUE_UNTRANSLATABLE_SLUG,
                    severity="warning",
                    collection=collection,
                    entry_id=entry.id,
                    locale=None,
                    slug=entry.slug.en,
                    message=(
                        "Slugs differ per locale but are unknown to the slug dictionary; "
                        "language switch links keep the current locale's slug"
                    ),
                )
            )
        return issues
