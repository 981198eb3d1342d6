from __future__ import annotations

import logging
from typing import Any, cast

from botocore.client import BaseClient  # type: ignore[import-untyped]
from botocore.exceptions import ClientError  # type: ignore[import-untyped]
from botocore.response import StreamingBody  # type: ignore[import-untyped]
from domain.content import ContentSnapshot
from domain.ports.content import ContentSnapshotSource

from adapters.filesystem.json_utils import parse_json_object
from adapters.s3.s3_client import create_s3_client

logger = logging.getLogger(__name__)

_MISSING_KEY_CODES = {"NoSuchKey", "404", "NotFound"}


class S3ContentSource(ContentSnapshotSource):
    """Content snapshot published as a single JSON object in a bucket."""

    def __init__(self, client: BaseClient, bucket: str, key: str) -> None:
        self._client = client
        self._bucket = bucket
        self._key = key.lstrip("/")

    @classmethod
    def from_settings(cls, settings: Any) -> S3ContentSource:
        return cls(create_s3_client(settings), settings.bucket, settings.key)

    @property
    def location(self) -> str:
        return f"s3://{self._bucket}/{self._key}"

    def load(self) -> ContentSnapshot:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=self._key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in _MISSING_KEY_CODES:
                raise FileNotFoundError(self.location) from exc
            raise
        raw = self._read_body(response.get("Body"))
        snapshot = ContentSnapshot.model_validate(parse_json_object(raw, self.location))
        logger.info(
            "Loaded content snapshot from %s (%d materials, %d furniture, %d projects).",
            self.location,
            len(snapshot.materials),
            len(snapshot.furniture),
            len(snapshot.projects),
        )
        return snapshot

    def _read_body(self, body: Any) -> bytes:
        if isinstance(body, bytes | bytearray):
            return bytes(body)
        if isinstance(body, StreamingBody):
            return cast(bytes, body.read())
        if hasattr(body, "read"):
            return cast(bytes, body.read())
        return b""
