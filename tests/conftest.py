from __future__ import annotations

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from app.config import AppSettings, S3Settings, SiteSettings
from domain.content import ContentSnapshot
from tests.helpers.content_fixtures import sample_snapshot, write_snapshot


def _clear_lago_env() -> None:
    for key in list(os.environ):
        if key.startswith("LAGO_"):
            os.environ.pop(key, None)


_clear_lago_env()


@pytest.fixture(autouse=True)
def clear_lago_env() -> Generator[None, None, None]:
    _clear_lago_env()
    yield
    _clear_lago_env()


@pytest.fixture
def snapshot() -> ContentSnapshot:
    return sample_snapshot()


@pytest.fixture
def s3_settings() -> S3Settings:
    return S3Settings(
        bucket="lago-content",
        key="content/snapshot.json",
        region="us-east-1",
        endpoint_url="http://stubbed-s3.local",
        access_key_id="test",
        secret_access_key="test",
        session_token=None,
        use_path_style=True,
    )


@pytest.fixture
def site_settings(tmp_path: Path, snapshot: ContentSnapshot, s3_settings: S3Settings) -> SiteSettings:
    content_path = tmp_path / "content" / "snapshot.json"
    write_snapshot(content_path, snapshot)
    return SiteSettings(
        title="LAGO Test",
        site_url="https://lago.test",
        content_source="filesystem",
        content_path=content_path,
        s3=s3_settings,
        manifest_path=tmp_path / "routes" / "manifest.json",
        validate_content_on_start=True,
        fail_on_content_issues=False,
        reload_token=None,
        ui_text_overrides={},
    )


@pytest.fixture
def site_settings_factory(site_settings: SiteSettings) -> Callable[..., SiteSettings]:
    def _factory(**overrides: object) -> SiteSettings:
        return site_settings.model_copy(update=overrides)

    return _factory


@pytest.fixture
def app_settings(site_settings: SiteSettings) -> AppSettings:
    return AppSettings(site=site_settings)


@pytest.fixture
def app_settings_factory(
    site_settings_factory: Callable[..., SiteSettings],
) -> Callable[..., AppSettings]:
    def _factory(**overrides: object) -> AppSettings:
        return AppSettings(site=site_settings_factory(**overrides))

    return _factory
