from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from domain.content import ContentSnapshot
from domain.ports.content import ContentSnapshotSource, RouteManifestRepository
from domain.services.enumerate_routes import enumerate_routes


class BuildRouteManifest:
    def __init__(
        self,
        source: ContentSnapshotSource,
        manifest_repo: RouteManifestRepository,
    ) -> None:
        self._source = source
        self._manifest_repo = manifest_repo

    def build(self, manifest_path: Path, snapshot: ContentSnapshot | None = None) -> dict[str, Any]:
        snapshot = snapshot if snapshot is not None else self._source.load()
        routes = enumerate_routes(snapshot)
        payload = {
            "generated_at": datetime.now(tz=UTC).isoformat(),
            "route_count": len(routes),
            "routes": [route.to_dict() for route in routes],
        }
        self._manifest_repo.save(payload, manifest_path)
        return payload
