from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.auth import require_bearer_token
from app.api.deps import (
    get_list_simulated_pools_use_case,
    get_refresh_pools_use_case,
    get_simulated_pool_use_case,
)
from app.api.schemas.simulated_pools import (
    HistoricalPointResponse,
    RefreshPoolsResponse,
    SimulatedPoolResponse,
)
from app.application.dto.simulated_pools import SimulatedPoolOutput
from app.application.use_cases.get_simulated_pool import GetSimulatedPoolUseCase
from app.application.use_cases.list_simulated_pools import ListSimulatedPoolsUseCase
from app.application.use_cases.refresh_pools import RefreshPoolsUseCase
from app.domain.exceptions import PoolNotFoundError, PoolSourceError

router = APIRouter()


def _to_response(item: SimulatedPoolOutput) -> SimulatedPoolResponse:
    return SimulatedPoolResponse(
        id=item.id,
        name=item.name,
        pair=item.pair,
        tvl_usd=item.tvl_usd,
        volume_24h_usd=item.volume_24h_usd,
        fees_24h_usd=item.fees_24h_usd,
        apr=item.apr,
        history=[HistoricalPointResponse(label=point.label, apr=point.apr) for point in item.history],
    )


@router.get("/v1/pools", response_model=list[SimulatedPoolResponse])
def list_simulated_pools(
    use_case: ListSimulatedPoolsUseCase = Depends(get_list_simulated_pools_use_case),
):
    return [_to_response(item) for item in use_case.execute()]


@router.get("/v1/pools/{pool_id}", response_model=SimulatedPoolResponse)
def get_simulated_pool(
    pool_id: str,
    use_case: GetSimulatedPoolUseCase = Depends(get_simulated_pool_use_case),
):
    try:
        result = use_case.execute(pool_id=pool_id)
    except PoolNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(result)


@router.post("/v1/pools/refresh", response_model=RefreshPoolsResponse)
def refresh_pools(
    _token: str = Depends(require_bearer_token),
    use_case: RefreshPoolsUseCase = Depends(get_refresh_pools_use_case),
):
    try:
        result = use_case.execute()
    except PoolSourceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return RefreshPoolsResponse(pools_count=result.pools_count)
