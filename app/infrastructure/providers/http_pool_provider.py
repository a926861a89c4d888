from __future__ import annotations

from dataclasses import dataclass
import logging
import time

import httpx

from app.domain.entities.apr_history import PoolSnapshot
from app.domain.exceptions import PoolSourceError
from app.infrastructure.mappers.pool_snapshot_mapper import map_payload_to_pool_snapshots


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpPoolSnapshotProviderSettings:
    url: str
    timeout_seconds: float
    max_retries: int = 3


class HttpPoolSnapshotProvider:
    def __init__(self, settings: HttpPoolSnapshotProviderSettings):
        self._settings = settings

    def list_pools(self) -> list[PoolSnapshot]:
        if not self._settings.url:
            raise PoolSourceError("POOLS_URL is required for the http pool source.")
        payload = self._get_json()
        pools = map_payload_to_pool_snapshots(payload)
        logger.info("http_pool_provider: fetched pools=%s url=%s", len(pools), self._settings.url)
        return pools

    def _get_json(self):
        attempts = max(1, self._settings.max_retries)
        delay = 0.25
        last_exc: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                with httpx.Client(timeout=self._settings.timeout_seconds) as client:
                    response = client.get(self._settings.url)
                    response.raise_for_status()
                    return response.json()
            except (httpx.HTTPError, ValueError) as exc:
                last_exc = exc
                if attempt == attempts:
                    break
                logger.warning(
                    "http_pool_provider: retry attempt=%s/%s error=%s",
                    attempt,
                    attempts,
                    exc,
                )
                time.sleep(delay)
                delay *= 2

        raise PoolSourceError(f"Pool source request failed after retries: {last_exc}") from last_exc
