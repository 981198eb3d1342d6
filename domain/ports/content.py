from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from domain.content import Collection, ContentEntry, ContentSnapshot


class ContentProvider(Protocol):
    def entries(self, collection: Collection) -> Sequence[ContentEntry]: ...


class ContentSnapshotSource(Protocol):
    def load(self) -> ContentSnapshot: ...


class RouteManifestRepository(Protocol):
    def load(self, path: Path) -> dict[str, Any]: ...

    def save(self, payload: dict[str, Any], path: Path) -> None: ...
