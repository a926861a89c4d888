from __future__ import annotations

import json
import logging
from pathlib import Path

from app.domain.entities.apr_history import PoolSnapshot
from app.domain.exceptions import PoolSourceError
from app.infrastructure.mappers.pool_snapshot_mapper import map_payload_to_pool_snapshots


logger = logging.getLogger(__name__)


class JsonFilePoolSnapshotProvider:
    def __init__(self, path: str | Path):
        self._path = Path(path)

    def list_pools(self) -> list[PoolSnapshot]:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise PoolSourceError(f"Could not read pools file: {self._path}") from exc
        except ValueError as exc:
            raise PoolSourceError(f"Invalid JSON in pools file: {self._path}") from exc
        pools = map_payload_to_pool_snapshots(payload)
        logger.info("json_file_pool_provider: loaded pools=%s path=%s", len(pools), self._path)
        return pools
