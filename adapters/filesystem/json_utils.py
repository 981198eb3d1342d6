from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import orjson


def parse_json_object(raw: bytes, source: str) -> dict[str, Any]:
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON in {source}"
        raise ValueError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Expected a JSON object in {source}"
        raise ValueError(msg)
    return data


def load_json(path: Path) -> dict[str, Any]:
    return parse_json_object(path.read_bytes(), str(path))


def dump_json_bytes(payload: Any) -> bytes:
    try:
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS)
    except TypeError:
        return json.dumps(payload, ensure_ascii=False, indent=2, default=str).encode("utf-8")


def write_json_atomic(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(f"{path.suffix}.tmp")
    tmp_path.write_bytes(dump_json_bytes(payload))
    tmp_path.replace(path)
