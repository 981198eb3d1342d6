from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from app.config import AppSettings
from app.web_main import create_app


@contextmanager
def build_site_client(
    app_settings_factory: Callable[..., AppSettings],
    **overrides: Any,
) -> Iterator[TestClient]:
    app = create_app(app_settings_factory(**overrides))
    with TestClient(app) as client:
        yield client
