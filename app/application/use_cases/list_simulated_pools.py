from __future__ import annotations

from app.application.dto.simulated_pools import HistoricalPointOutput, SimulatedPoolOutput
from app.application.services.apr_manager import AprManager
from app.domain.entities.apr_history import SimulatedPool


def to_simulated_pool_output(simulated: SimulatedPool) -> SimulatedPoolOutput:
    pool = simulated.pool
    return SimulatedPoolOutput(
        id=pool.id,
        name=pool.name,
        pair=pool.pair,
        tvl_usd=pool.tvl_usd,
        volume_24h_usd=pool.volume_24h_usd,
        fees_24h_usd=pool.fees_24h_usd,
        apr=simulated.apr,
        history=[HistoricalPointOutput(label=point.label, apr=point.apr) for point in simulated.history],
    )


class ListSimulatedPoolsUseCase:
    def __init__(self, *, manager: AprManager):
        self._manager = manager

    def execute(self) -> list[SimulatedPoolOutput]:
        return [to_simulated_pool_output(item) for item in self._manager.snapshot()]
