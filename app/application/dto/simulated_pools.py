from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoricalPointOutput:
    label: str
    apr: float


@dataclass(frozen=True)
class SimulatedPoolOutput:
    id: str
    name: str
    pair: str
    tvl_usd: float
    volume_24h_usd: float
    fees_24h_usd: float
    apr: float
    history: list[HistoricalPointOutput]


@dataclass(frozen=True)
class RefreshPoolsOutput:
    pools_count: int
