from __future__ import annotations

from app.domain.entities.apr_history import PoolSnapshot


DEMO_POOLS: tuple[PoolSnapshot, ...] = (
    PoolSnapshot(
        id="aegis-ausd",
        name="AEGIS-AUSD Pool",
        pair="AEGIS/AUSD",
        tvl_usd=5_000_000,
        volume_24h_usd=500_000,
        fees_24h_usd=1_500,
        baseline_apr=45.2,
    ),
    PoolSnapshot(
        id="aero-ausd",
        name="AERO-AUSD Pool",
        pair="AERO/AUSD",
        tvl_usd=4_000_000,
        volume_24h_usd=300_000,
        fees_24h_usd=600,
        baseline_apr=38.7,
    ),
    PoolSnapshot(
        id="abtc-ausd",
        name="ABTC-AUSD Pool",
        pair="ABTC/AUSD",
        tvl_usd=6_000_000,
        volume_24h_usd=800_000,
        fees_24h_usd=2_400,
        baseline_apr=52.2,
    ),
    PoolSnapshot(
        id="aegis-asol",
        name="AEGIS-ASOL Pool",
        pair="AEGIS/ASOL",
        tvl_usd=3_000_000,
        volume_24h_usd=200_000,
        fees_24h_usd=1_050,
        baseline_apr=42.4,
    ),
    PoolSnapshot(
        id="abtc-asol",
        name="ABTC-ASOL Pool",
        pair="ABTC/ASOL",
        tvl_usd=4_500_000,
        volume_24h_usd=400_000,
        fees_24h_usd=1_600,
        baseline_apr=48.2,
    ),
)


class StaticPoolSnapshotProvider:
    def __init__(self, pools: tuple[PoolSnapshot, ...] | list[PoolSnapshot] = DEMO_POOLS):
        # same list object on every call, so the manager keeps its series
        self._pools = list(pools)

    def list_pools(self) -> list[PoolSnapshot]:
        return self._pools
