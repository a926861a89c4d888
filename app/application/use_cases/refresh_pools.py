from __future__ import annotations

import logging

from app.application.dto.simulated_pools import RefreshPoolsOutput
from app.application.ports.pool_snapshot_port import PoolSnapshotPort
from app.application.services.apr_manager import AprManager


logger = logging.getLogger(__name__)


class RefreshPoolsUseCase:
    def __init__(self, *, pool_snapshot_port: PoolSnapshotPort, manager: AprManager):
        self._pool_snapshot_port = pool_snapshot_port
        self._manager = manager

    def execute(self) -> RefreshPoolsOutput:
        pools = self._pool_snapshot_port.list_pools()
        reseeded = self._manager.sync(pools)
        if not reseeded:
            logger.info("refresh_pools: provider returned the tracked list, keeping series")
        return RefreshPoolsOutput(pools_count=len(pools))
