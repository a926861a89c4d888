from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolSnapshot:
    id: str
    tvl_usd: float
    volume_24h_usd: float
    fees_24h_usd: float
    baseline_apr: float
    name: str = ""
    pair: str = ""


@dataclass(frozen=True)
class Horizon:
    label: str
    damping: float
    slope_bias: float


@dataclass(frozen=True)
class HistoricalPoint:
    label: str
    apr: float


@dataclass(frozen=True)
class SimulatedPool:
    pool: PoolSnapshot
    apr: float
    history: tuple[HistoricalPoint, ...]

    @property
    def id(self) -> str:
        return self.pool.id
