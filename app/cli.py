from __future__ import annotations

from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from adapters.filesystem.route_manifest_repository import FileSystemRouteManifestRepository
from app.config import load_settings
from app.content_wiring import build_content_source
from domain.locales import LOCALES, Locale, is_valid_locale
from domain.routes import route_to_dict
from domain.services.build_alternates import alternate_urls, build_hreflang_links
from domain.services.build_route_manifest import BuildRouteManifest
from domain.services.resolve_catch_all import CatchAllResolver
from domain.services.routing_health import BuildRoutingHealthReport
from domain.services.translate_path import translate_path

app = typer.Typer(no_args_is_help=True)
console = Console()

ConfigOption = typer.Option(None, "--config", help="Path to the site YAML config.")


def _require_locale(value: str, option: str) -> Locale:
    if not is_valid_locale(value):
        console.print(
            f"[red]Unsupported locale for {option}:[/] {value} "
            f"(expected one of {', '.join(LOCALES)})"
        )
        raise typer.Exit(code=2)
    return value


@app.command("translate")
def translate(
    path: str = typer.Argument(..., help="Localized path, e.g. /lv/mebeles/virtuves."),
    from_locale: str = typer.Option(..., "--from", help="Locale the path is written in."),
    to_locale: str = typer.Option(..., "--to", help="Locale to translate the path into."),
) -> None:
    source = _require_locale(from_locale, "--from")
    target = _require_locale(to_locale, "--to")
    console.print(translate_path(path, source, target))


@app.command("alternates")
def alternates(
    path: str = typer.Argument(..., help="Localized path of the current page."),
    locale: str = typer.Option(..., "--locale", help="Locale of the current page."),
    base_url: str = typer.Option("", "--base-url", help="Prefix for absolute hreflang URLs."),
) -> None:
    current = _require_locale(locale, "--locale")
    urls = alternate_urls(path, current)
    table = Table("hreflang", "href")
    for link in build_hreflang_links(urls, current, base_url):
        table.add_row(link.hreflang, link.href)
    console.print(table)


@app.command("resolve")
def resolve(
    path: str = typer.Argument(..., help="Request path, e.g. /en/projects/riga-loft."),
    config: Path | None = ConfigOption,
) -> None:
    settings = load_settings(config)
    snapshot = build_content_source(settings).load()
    route = CatchAllResolver(snapshot).resolve_path(path)
    payload = route_to_dict(route)
    console.print_json(data=payload)
    if payload["kind"] == "not_found":
        raise typer.Exit(code=1)


@app.command("validate")
def validate(config: Path | None = ConfigOption) -> None:
    settings = load_settings(config)
    snapshot = build_content_source(settings).load()
    report = BuildRoutingHealthReport().build(snapshot)
    if not report.issues:
        console.print("[green]Routing is consistent.[/]")
        return

    table = Table("severity", "code", "collection", "entry", "locale", "slug")
    for issue in report.issues:
        table.add_row(
            issue.severity,
            issue.code,
            issue.collection,
            issue.entry_id,
            issue.locale or "-",
            issue.slug,
        )
    console.print(table)
    if report.has_errors:
        console.print(f"[red]{len(report.errors)} routing error(s) found.[/]")
        raise typer.Exit(code=1)
    console.print(f"[yellow]{len(report.warnings)} routing warning(s) found.[/]")


@app.command("build-manifest")
def build_manifest(
    config: Path | None = ConfigOption,
    output: Path | None = typer.Option(None, "--output", help="Override the manifest path."),
) -> None:
    settings = load_settings(config)
    target = output or settings.site.manifest_path
    builder = BuildRouteManifest(build_content_source(settings), FileSystemRouteManifestRepository())
    payload = builder.build(target)
    console.print(f"[green]Wrote[/] {target} ({payload['route_count']} routes)")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
) -> None:
    uvicorn.run("app.web_main:app", host=host, port=port)


if __name__ == "__main__":
    app()
