from __future__ import annotations

from typing import Protocol

import boto3  # type: ignore[import-untyped]
from botocore.client import BaseClient  # type: ignore[import-untyped]
from botocore.config import Config  # type: ignore[import-untyped]


class S3ConnectionSettings(Protocol):
    region: str | None
    endpoint_url: str | None
    access_key_id: str | None
    secret_access_key: str | None
    session_token: str | None
    use_path_style: bool


def create_s3_client(settings: S3ConnectionSettings) -> BaseClient:
    config = Config(s3={"addressing_style": "path"}) if settings.use_path_style else None
    return boto3.client(
        "s3",
        region_name=settings.region,
        endpoint_url=settings.endpoint_url or None,
        aws_access_key_id=settings.access_key_id or None,
        aws_secret_access_key=settings.secret_access_key or None,
        aws_session_token=settings.session_token or None,
        config=config,
    )
