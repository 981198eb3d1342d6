from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Annotated, ClassVar, Literal

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from domain.locales import DEFAULT_LOCALE, Locale

DEFAULT_CONFIG_PATH = Path("config/site.yaml")

_HTTP_URL_ADAPTER = TypeAdapter(HttpUrl)


def _validate_site_url(value: str) -> str:
    normalized = str(value or "").strip()
    if not normalized:
        return ""
    _HTTP_URL_ADAPTER.validate_python(normalized)
    return normalized.rstrip("/")


SiteUrl = Annotated[str, AfterValidator(_validate_site_url)]


class S3Settings(BaseModel):
    bucket: str = ""
    key: str = "content/snapshot.json"
    region: str | None = None
    endpoint_url: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    session_token: str | None = None
    use_path_style: bool = False


class SiteSettings(BaseModel):
    title: str = "LAGO"
    site_url: SiteUrl = ""
    default_locale: Locale = DEFAULT_LOCALE
    content_source: Literal["filesystem", "s3"] = "filesystem"
    content_path: Path = Path("data/content/snapshot.json")
    s3: S3Settings = S3Settings()
    manifest_path: Path = Path("data/routes/manifest.json")
    validate_content_on_start: bool = True
    fail_on_content_issues: bool = False
    reload_token: str | None = None
    ui_text_overrides: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("content_source", mode="before")
    @classmethod
    def normalize_content_source(cls, value: object) -> str:
        return str(value).strip().lower() if value else "filesystem"

    @field_validator("ui_text_overrides", mode="before")
    @classmethod
    def normalize_ui_text_overrides(cls, value: object) -> dict[str, dict[str, str]]:
        if value is None or value == "":
            return {}
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as exc:
                msg = "site.ui_text_overrides must be a JSON object"
                raise ValueError(msg) from exc
        if not isinstance(value, dict):
            msg = "site.ui_text_overrides must be a JSON object"
            raise ValueError(msg)
        normalized: dict[str, dict[str, str]] = {}
        for locale, overrides in value.items():
            if not isinstance(overrides, dict):
                msg = f"site.ui_text_overrides.{locale} must be a JSON object"
                raise ValueError(msg)
            normalized[str(locale)] = {str(key): str(item) for key, item in overrides.items()}
        return normalized


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LAGO_", env_nested_delimiter="__")

    site: SiteSettings = SiteSettings()

    _yaml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv("LAGO_CONFIG_PATH")
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous
