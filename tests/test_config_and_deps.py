from __future__ import annotations

import pytest
from fastapi import HTTPException

from app.api import deps
from app.infrastructure.providers.http_pool_provider import HttpPoolSnapshotProvider
from app.infrastructure.providers.json_file_pool_provider import JsonFilePoolSnapshotProvider
from app.infrastructure.providers.static_pool_provider import StaticPoolSnapshotProvider
from app.shared.config import get_settings


@pytest.fixture(autouse=True)
def _clear_cached_dependencies():
    deps.get_pool_snapshot_port.cache_clear()
    deps.get_apr_manager.cache_clear()
    yield
    deps.get_pool_snapshot_port.cache_clear()
    deps.get_apr_manager.cache_clear()


def test_settings_defaults(monkeypatch):
    for name in ("APR_REFRESH_MS", "POOL_SOURCE", "POOLS_FILE", "POOLS_URL", "LOG_LEVEL", "API_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.apr_refresh_ms == 15000
    assert settings.pool_source == "static"
    assert settings.log_level == "INFO"
    assert settings.api_token == ""


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APR_REFRESH_MS", "5000")
    monkeypatch.setenv("POOL_SOURCE", " HTTP ")
    monkeypatch.setenv("POOLS_URL", "https://pools.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.apr_refresh_ms == 5000
    assert settings.pool_source == "http"
    assert settings.pools_url == "https://pools.test"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({"POOL_SOURCE": "static"}, StaticPoolSnapshotProvider),
        ({"POOL_SOURCE": "file", "POOLS_FILE": "pools.json"}, JsonFilePoolSnapshotProvider),
        ({"POOL_SOURCE": "http", "POOLS_URL": "https://pools.test"}, HttpPoolSnapshotProvider),
    ],
)
def test_pool_snapshot_port_follows_pool_source(monkeypatch, env, expected):
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    assert isinstance(deps.get_pool_snapshot_port(), expected)


def test_pool_snapshot_port_rejects_unknown_source(monkeypatch):
    monkeypatch.setenv("POOL_SOURCE", "postgres")

    with pytest.raises(HTTPException) as exc_info:
        deps.get_pool_snapshot_port()

    assert exc_info.value.status_code == 500


def test_apr_manager_uses_configured_interval(monkeypatch):
    monkeypatch.setenv("APR_REFRESH_MS", "2500")

    manager = deps.get_apr_manager()

    assert manager.refresh_interval_ms == 2500
    assert manager is deps.get_apr_manager()
    assert not manager.is_running
