from __future__ import annotations

import logging
from pathlib import Path

from domain.content import ContentSnapshot
from domain.ports.content import ContentSnapshotSource

from adapters.filesystem.json_utils import load_json

logger = logging.getLogger(__name__)


class FileSystemContentSource(ContentSnapshotSource):
    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ContentSnapshot:
        payload = load_json(self._path)
        snapshot = ContentSnapshot.model_validate(payload)
        logger.info(
            "Loaded content snapshot from %s (%d materials, %d furniture, %d projects).",
            self._path,
            len(snapshot.materials),
            len(snapshot.furniture),
            len(snapshot.projects),
        )
        return snapshot
