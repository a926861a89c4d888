from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from app.application.ports.pool_snapshot_port import PoolSnapshotPort
from app.application.services.apr_manager import AprManager
from app.application.use_cases.get_simulated_pool import GetSimulatedPoolUseCase
from app.application.use_cases.list_simulated_pools import ListSimulatedPoolsUseCase
from app.application.use_cases.refresh_pools import RefreshPoolsUseCase
from app.infrastructure.providers.http_pool_provider import (
    HttpPoolSnapshotProvider,
    HttpPoolSnapshotProviderSettings,
)
from app.infrastructure.providers.json_file_pool_provider import JsonFilePoolSnapshotProvider
from app.infrastructure.providers.static_pool_provider import StaticPoolSnapshotProvider
from app.infrastructure.scheduling.threading_tick_scheduler import ThreadingTickScheduler
from app.shared.config import POOL_SOURCES, get_settings


@lru_cache(maxsize=1)
def get_pool_snapshot_port() -> PoolSnapshotPort:
    settings = get_settings()
    if settings.pool_source not in POOL_SOURCES:
        raise HTTPException(
            status_code=500,
            detail="POOL_SOURCE must be one of: static, file, http.",
        )
    if settings.pool_source == "file":
        if not settings.pools_file:
            raise HTTPException(status_code=500, detail="POOLS_FILE is required.")
        return JsonFilePoolSnapshotProvider(settings.pools_file)
    if settings.pool_source == "http":
        if not settings.pools_url:
            raise HTTPException(status_code=500, detail="POOLS_URL is required.")
        return HttpPoolSnapshotProvider(
            HttpPoolSnapshotProviderSettings(
                url=settings.pools_url,
                timeout_seconds=settings.pools_timeout_seconds,
                max_retries=settings.pools_max_retries,
            )
        )
    return StaticPoolSnapshotProvider()


@lru_cache(maxsize=1)
def get_apr_manager() -> AprManager:
    settings = get_settings()
    return AprManager(
        scheduler=ThreadingTickScheduler(),
        refresh_interval_ms=settings.apr_refresh_ms,
    )


def get_list_simulated_pools_use_case() -> ListSimulatedPoolsUseCase:
    return ListSimulatedPoolsUseCase(manager=get_apr_manager())


def get_simulated_pool_use_case() -> GetSimulatedPoolUseCase:
    return GetSimulatedPoolUseCase(manager=get_apr_manager())


def get_refresh_pools_use_case() -> RefreshPoolsUseCase:
    return RefreshPoolsUseCase(
        pool_snapshot_port=get_pool_snapshot_port(),
        manager=get_apr_manager(),
    )
