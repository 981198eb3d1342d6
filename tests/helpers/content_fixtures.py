# ruff: noqa: RUF001

from __future__ import annotations

from pathlib import Path
from typing import Any

from adapters.filesystem.json_utils import write_json_atomic
from domain.content import ContentEntry, ContentSnapshot


def localized(lv: str, en: str | None = None, ru: str | None = None) -> dict[str, str]:
    return {"lv": lv, "en": en if en is not None else lv, "ru": ru if ru is not None else lv}


def entry_payload(
    entry_id: str,
    slug: dict[str, str],
    title: dict[str, str] | None = None,
    description: dict[str, str] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"id": entry_id, "slug": slug}
    if title is not None:
        payload["title"] = title
    if description is not None:
        payload["description"] = description
    return payload


def make_entry(entry_id: str, lv: str, en: str | None = None, ru: str | None = None) -> ContentEntry:
    return ContentEntry.model_validate(entry_payload(entry_id, localized(lv, en, ru)))


def sample_snapshot_payload() -> dict[str, Any]:
    return {
        "materials": [
            entry_payload(
                "silestone",
                localized("silestone"),
                title=localized("Silestone"),
            ),
            entry_payload(
                "granite",
                localized("granits", "granite", "granit"),
                title=localized("Granīts", "Granite", "Гранит"),
                description=localized(
                    "Dabīgā akmens virsmas.",
                    "Natural stone surfaces.",
                    "Поверхности из натурального камня.",
                ),
            ),
        ],
        "furniture": [
            entry_payload(
                "kitchens",
                localized("virtuves", "kitchens", "kuhni"),
                title=localized("Virtuves", "Kitchens", "Кухни"),
            ),
            entry_payload(
                "built-in",
                localized("iebuvetajas", "built-in", "vstroennaya"),
                title=localized("Iebūvētās mēbeles", "Built-in furniture", "Встроенная мебель"),
            ),
        ],
        "projects": [
            entry_payload(
                "riga-loft",
                localized("riga-loft"),
                title=localized("Rīgas lofts", "Riga loft", "Рижский лофт"),
            ),
            entry_payload(
                "jurmala-house",
                localized("jurmalas-maja", "jurmala-house", "dom-v-yurmale"),
                title=localized("Jūrmalas māja", "Jurmala house", "Дом в Юрмале"),
            ),
        ],
    }


def sample_snapshot() -> ContentSnapshot:
    return ContentSnapshot.model_validate(sample_snapshot_payload())


def write_snapshot(path: Path, snapshot: ContentSnapshot | dict[str, Any]) -> Path:
    payload = snapshot.model_dump() if isinstance(snapshot, ContentSnapshot) else snapshot
    write_json_atomic(path, payload)
    return path
