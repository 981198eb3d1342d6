from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

from domain.content import ContentEntry
from domain.locales import Locale


@dataclass(frozen=True)
class MaterialDetail:
    locale: Locale
    entry: ContentEntry
    kind: ClassVar[str] = "material_detail"


@dataclass(frozen=True)
class FurnitureList:
    locale: Locale
    kind: ClassVar[str] = "furniture_list"


@dataclass(frozen=True)
class FurnitureDetail:
    locale: Locale
    entry: ContentEntry
    kind: ClassVar[str] = "furniture_detail"


@dataclass(frozen=True)
class ProjectList:
    locale: Locale
    kind: ClassVar[str] = "project_list"


@dataclass(frozen=True)
class ProjectDetail:
    locale: Locale
    entry: ContentEntry
    kind: ClassVar[str] = "project_detail"


@dataclass(frozen=True)
class AboutPage:
    locale: Locale
    kind: ClassVar[str] = "about"


@dataclass(frozen=True)
class Redirect:
    locale: Locale
    location: str
    kind: ClassVar[str] = "redirect"


@dataclass(frozen=True)
class NotFound:
    locale: Locale | None
    kind: ClassVar[str] = "not_found"


ResolvedRoute: TypeAlias = (
    MaterialDetail
    | FurnitureList
    | FurnitureDetail
    | ProjectList
    | ProjectDetail
    | AboutPage
    | Redirect
    | NotFound
)


def route_to_dict(route: ResolvedRoute) -> dict[str, Any]:
    payload: dict[str, Any] = {"kind": route.kind, "locale": route.locale}
    if isinstance(route, MaterialDetail | FurnitureDetail | ProjectDetail):
        payload["entry_id"] = route.entry.id
        payload["slug"] = route.entry.slug.as_dict()
    if isinstance(route, Redirect):
        payload["location"] = route.location
    return payload
