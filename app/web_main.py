from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, ORJSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.config import AppSettings, load_settings
from app.content_wiring import build_content_source
from app.web_i18n import UILocalizer, build_localizer, build_nav_links
from domain.content import ContentSnapshot
from domain.errors import RoutingConfigurationError
from domain.locales import Locale, is_valid_locale
from domain.ports.content import ContentSnapshotSource
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
    route_to_dict,
)
from domain.services.build_alternates import (
    alternate_urls,
    build_language_options,
    build_seo_alternates,
)
from domain.services.enumerate_routes import enumerate_routes, route_alternates, section_path
from domain.services.resolve_catch_all import CatchAllResolver
from domain.services.routing_health import BuildRoutingHealthReport, RoutingHealthReport
from domain.slug_dictionary import Section

TEMPLATES_DIR = Path(__file__).parent / "web" / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
logger = logging.getLogger(__name__)


@dataclass
class SiteContext:
    settings: AppSettings
    content_source: ContentSnapshotSource
    health_builder: BuildRoutingHealthReport
    snapshot: ContentSnapshot
    health: RoutingHealthReport

    def resolver(self) -> CatchAllResolver:
        return CatchAllResolver(self.snapshot)


def create_app(settings: AppSettings) -> FastAPI:
    app = FastAPI(title=settings.site.title)

    content_source = build_content_source(settings)
    health_builder = BuildRoutingHealthReport()
    snapshot = load_snapshot(content_source)
    context = SiteContext(
        settings=settings,
        content_source=content_source,
        health_builder=health_builder,
        snapshot=snapshot,
        health=check_content(settings, health_builder, snapshot),
    )
    app.state.context = context

    def render_page(
        request: Request,
        template_name: str,
        locale: Locale,
        alternates: dict[Locale, str],
        template_context: dict[str, Any],
        status_code: int = 200,
    ) -> HTMLResponse:
        localizer = build_localizer(locale, settings.site.ui_text_overrides)
        seo = build_seo_alternates(settings.site.site_url, alternates, locale)
        context_data = dict(template_context)
        context_data.update(
            {
                "request": request,
                "lang": locale,
                "t": localizer.t,
                "site_title": settings.site.title,
                "nav_links": build_nav_links(localizer),
                "language_options": build_language_options(alternates, locale),
                "hreflang_links": seo.links,
                "canonical_url": seo.canonical,
            }
        )
        return templates.TemplateResponse(
            request, template_name, context_data, status_code=status_code
        )

    @app.get("/api/resolve")
    def api_resolve(
        path: str = Query(...),
        context: SiteContext = Depends(get_context),
    ) -> ORJSONResponse:
        route = context.resolver().resolve_path(path)
        return ORJSONResponse(route_to_dict(route))

    @app.get("/api/alternates")
    def api_alternates(
        path: str = Query(...),
        locale: str = Query(...),
        context: SiteContext = Depends(get_context),
    ) -> ORJSONResponse:
        if not is_valid_locale(locale):
            raise HTTPException(status_code=400, detail="Unsupported locale")
        alternates = alternate_urls(path, locale)
        seo = build_seo_alternates(context.settings.site.site_url, alternates, locale)
        return ORJSONResponse(
            {
                "locale": locale,
                "path": path,
                "alternates": alternates,
                "canonical": seo.canonical,
                "hreflang": [link.to_dict() for link in seo.links],
                "languages": [
                    option.to_dict() for option in build_language_options(alternates, locale)
                ],
            }
        )

    @app.get("/api/routes")
    def api_routes(context: SiteContext = Depends(get_context)) -> ORJSONResponse:
        routes = enumerate_routes(context.snapshot)
        return ORJSONResponse(
            {"route_count": len(routes), "routes": [route.to_dict() for route in routes]}
        )

    @app.get("/api/health/routing")
    def api_routing_health(context: SiteContext = Depends(get_context)) -> ORJSONResponse:
        return ORJSONResponse(context.health.to_dict())

    @app.post("/api/content/reload")
    def api_reload_content(
        x_reload_token: str | None = Header(default=None),
        context: SiteContext = Depends(get_context),
    ) -> ORJSONResponse:
        token = context.settings.site.reload_token
        if not token:
            raise HTTPException(status_code=403, detail="Reload disabled")
        if x_reload_token != token:
            raise HTTPException(status_code=403, detail="Invalid token")
        try:
            snapshot = context.content_source.load()
            health = check_content(context.settings, context.health_builder, snapshot)
        except FileNotFoundError as exc:
            logger.exception("Content reload failed: snapshot not found.")
            raise HTTPException(status_code=404, detail="Content snapshot not found") from exc
        except ValueError as exc:
            logger.exception("Content reload failed; keeping the previous snapshot.")
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        context.snapshot = snapshot
        context.health = health
        return ORJSONResponse(
            {
                "status": "ok",
                "materials": len(snapshot.materials),
                "furniture": len(snapshot.furniture),
                "projects": len(snapshot.projects),
                "health": health.to_dict(),
            }
        )

    @app.get("/")
    def root(context: SiteContext = Depends(get_context)) -> RedirectResponse:
        return RedirectResponse(
            url=f"/{context.settings.site.default_locale}", status_code=307
        )

    @app.get("/{locale}", response_class=HTMLResponse)
    def home(
        request: Request,
        locale: str,
        context: SiteContext = Depends(get_context),
    ) -> HTMLResponse:
        if not is_valid_locale(locale):
            raise HTTPException(status_code=404, detail="Page not found")
        localizer = build_localizer(locale, context.settings.site.ui_text_overrides)
        materials = [
            {
                "title": entry.title.get(locale) if entry.title is not None else entry.id,
                "url": section_path(Section.STONE_SURFACES, locale, entry),
            }
            for entry in context.snapshot.materials
        ]
        return render_page(
            request,
            "home.html",
            locale,
            alternate_urls(f"/{locale}", locale),
            {"page_title": localizer.t("Home"), "materials": materials},
        )

    @app.get("/{locale}/{slug:path}", response_class=HTMLResponse, response_model=None)
    def catch_all(
        request: Request,
        locale: str,
        slug: str,
        context: SiteContext = Depends(get_context),
    ) -> HTMLResponse | RedirectResponse:
        if not is_valid_locale(locale):
            raise HTTPException(status_code=404, detail="Page not found")
        if not slug.strip("/"):
            return RedirectResponse(url=f"/{locale}", status_code=307)
        path = f"/{locale}/{slug}"
        route = context.resolver().resolve_path(path)
        if isinstance(route, Redirect):
            return RedirectResponse(url=route.location, status_code=307)
        localizer = build_localizer(locale, context.settings.site.ui_text_overrides)
        if isinstance(route, NotFound):
            return render_page(
                request,
                "not_found.html",
                locale,
                alternate_urls(f"/{locale}", locale),
                {"page_title": localizer.t("Page not found")},
                status_code=404,
            )
        alternates = route_alternates(route) or alternate_urls(path, locale)
        return render_page(
            request,
            "page.html",
            locale,
            alternates,
            {
                "route": route_to_dict(route),
                "page_title": page_title(route, localizer),
                "description": page_description(route),
            },
        )

    return app


def get_context(request: Request) -> SiteContext:
    return cast(SiteContext, request.app.state.context)


def load_snapshot(source: ContentSnapshotSource) -> ContentSnapshot:
    try:
        return source.load()
    except FileNotFoundError:
        logger.warning("Content snapshot not found; serving without content entries.")
        return ContentSnapshot()


def check_content(
    settings: AppSettings,
    builder: BuildRoutingHealthReport,
    snapshot: ContentSnapshot,
) -> RoutingHealthReport:
    if not settings.site.validate_content_on_start:
        return RoutingHealthReport()
    report = builder.build(snapshot)
    for issue in report.issues:
        logger.warning(
            "Routing %s [%s] %s/%s: %s",
            issue.severity,
            issue.code,
            issue.collection,
            issue.entry_id,
            issue.message,
        )
    if report.has_errors and settings.site.fail_on_content_issues:
        msg = f"Content has {len(report.errors)} routing error(s)"
        raise RoutingConfigurationError(msg)
    return report


def page_title(route: ResolvedRoute, localizer: UILocalizer) -> str:
    locale = localizer.language
    if isinstance(route, MaterialDetail | FurnitureDetail | ProjectDetail):
        if route.entry.title is not None:
            return route.entry.title.get(locale)
        return route.entry.id
    if isinstance(route, FurnitureList):
        return localizer.section_label(Section.FURNITURE)
    if isinstance(route, ProjectList):
        return localizer.section_label(Section.PROJECTS)
    if isinstance(route, AboutPage):
        return localizer.section_label(Section.ABOUT)
    return ""


def page_description(route: ResolvedRoute) -> str:
    if isinstance(route, MaterialDetail | FurnitureDetail | ProjectDetail):
        description = route.entry.description
        if description is not None and route.locale is not None:
            return description.get(route.locale)
    return ""


app = create_app(load_settings())
