from __future__ import annotations

from domain.content import ContentSnapshot
from domain.routes import NotFound, Redirect
from domain.services.enumerate_routes import enumerate_routes, route_alternates, section_path
from domain.services.resolve_catch_all import CatchAllResolver
from domain.slug_dictionary import Section


def test_every_enumerated_route_resolves(snapshot: ContentSnapshot) -> None:
    resolver = CatchAllResolver(snapshot)
    routes = enumerate_routes(snapshot)
    assert routes
    for route in routes:
        resolved = resolver.resolve_path(route.path)
        assert not isinstance(resolved, NotFound | Redirect), route.path
        assert resolved.kind == route.kind
        assert resolved.locale == route.locale


def test_enumerated_routes_per_locale(snapshot: ContentSnapshot) -> None:
    routes = [route for route in enumerate_routes(snapshot) if route.locale == "en"]
    assert [route.path for route in routes] == [
        "/en/stone-surfaces/silestone",
        "/en/stone-surfaces/granite",
        "/en/furniture",
        "/en/furniture/kitchens",
        "/en/furniture/built-in",
        "/en/projects",
        "/en/projects/riga-loft",
        "/en/projects/jurmala-house",
        "/en/about-us",
    ]


def test_detail_alternates_use_entry_slugs(snapshot: ContentSnapshot) -> None:
    route = CatchAllResolver(snapshot).resolve_path("/lv/projekti/jurmalas-maja")
    assert route_alternates(route) == {
        "lv": "/lv/projekti/jurmalas-maja",
        "en": "/en/projects/jurmala-house",
        "ru": "/ru/proekty/dom-v-yurmale",
    }


def test_route_alternates_absent_for_redirect_and_not_found(snapshot: ContentSnapshot) -> None:
    resolver = CatchAllResolver(snapshot)
    assert route_alternates(resolver.resolve_path("/lv/akmens-virsmas")) is None
    assert route_alternates(resolver.resolve_path("/lv/nav")) is None


def test_section_path() -> None:
    assert section_path(Section.ABOUT, "lv") == "/lv/par-mums"
