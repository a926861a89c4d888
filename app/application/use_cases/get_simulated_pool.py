from __future__ import annotations

from app.application.dto.simulated_pools import SimulatedPoolOutput
from app.application.services.apr_manager import AprManager
from app.application.use_cases.list_simulated_pools import to_simulated_pool_output
from app.domain.exceptions import PoolNotFoundError


class GetSimulatedPoolUseCase:
    def __init__(self, *, manager: AprManager):
        self._manager = manager

    def execute(self, *, pool_id: str) -> SimulatedPoolOutput:
        key = pool_id.strip()
        for item in self._manager.snapshot():
            if item.id == key:
                return to_simulated_pool_output(item)
        raise PoolNotFoundError("Pool not found.")
