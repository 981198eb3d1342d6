from __future__ import annotations

from adapters.filesystem.content_source import FileSystemContentSource
from adapters.s3.content_source import S3ContentSource
from app.config import AppSettings
from domain.ports.content import ContentSnapshotSource


def build_content_source(settings: AppSettings) -> ContentSnapshotSource:
    if settings.site.content_source == "s3":
        s3 = settings.site.s3
        if not s3.bucket:
            msg = "site.s3.bucket is required when content_source is s3"
            raise ValueError(msg)
        if not s3.key:
            msg = "site.s3.key is required when content_source is s3"
            raise ValueError(msg)
        return S3ContentSource.from_settings(s3)
    return FileSystemContentSource(settings.site.content_path)
