from __future__ import annotations

from pydantic import BaseModel, Field


class HistoricalPointResponse(BaseModel):
    label: str = Field(..., description="Horizonte (1D, 1W, 1M, 3M, 1Y).")
    apr: float = Field(..., ge=0, description="APR simulado do horizonte, em pontos percentuais.")


class SimulatedPoolResponse(BaseModel):
    id: str
    name: str
    pair: str
    tvl_usd: float
    volume_24h_usd: float
    fees_24h_usd: float
    apr: float = Field(..., ge=0, description="APR atual exibido (horizonte mais curto).")
    history: list[HistoricalPointResponse]


class RefreshPoolsResponse(BaseModel):
    pools_count: int


class HealthResponse(BaseModel):
    status: str
    running: bool
