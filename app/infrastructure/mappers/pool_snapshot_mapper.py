from __future__ import annotations

from collections.abc import Mapping
import math
from typing import Any

from app.domain.entities.apr_history import PoolSnapshot
from app.domain.exceptions import PoolSourceError


_FIELD_ALIASES = {
    "tvl_usd": ("tvl_usd", "tvlUsd"),
    "volume_24h_usd": ("volume_24h_usd", "volume24hUsd"),
    "fees_24h_usd": ("fees_24h_usd", "fees24hUsd"),
    "baseline_apr": ("baseline_apr", "baselineApr", "apr"),
}


def _first_present(row: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def _number(row: Mapping[str, Any], field: str) -> float:
    value = _first_present(row, _FIELD_ALIASES[field])
    if value is None:
        raise PoolSourceError(f"Pool payload is missing '{field}'.")
    if isinstance(value, bool):
        raise PoolSourceError(f"Pool field '{field}' must be numeric.")
    try:
        result = float(value)
    except (TypeError, ValueError) as exc:
        raise PoolSourceError(f"Pool field '{field}' must be numeric.") from exc
    if not math.isfinite(result):
        raise PoolSourceError(f"Pool field '{field}' must be finite.")
    return result


def map_payload_to_pool_snapshot(row: Mapping[str, Any]) -> PoolSnapshot:
    if not isinstance(row, Mapping):
        raise PoolSourceError("Pool payload must be an object.")
    pool_id = str(_first_present(row, ("id", "slug")) or "").strip()
    if not pool_id:
        raise PoolSourceError("Pool payload is missing 'id'.")
    return PoolSnapshot(
        id=pool_id,
        tvl_usd=_number(row, "tvl_usd"),
        volume_24h_usd=_number(row, "volume_24h_usd"),
        fees_24h_usd=_number(row, "fees_24h_usd"),
        baseline_apr=_number(row, "baseline_apr"),
        name=str(row.get("name") or ""),
        pair=str(row.get("pair") or ""),
    )


def map_payload_to_pool_snapshots(payload: Any) -> list[PoolSnapshot]:
    rows = payload.get("data") if isinstance(payload, Mapping) else payload
    if not isinstance(rows, list):
        raise PoolSourceError("Pool payload must be a list or an object with 'data'.")
    return [map_payload_to_pool_snapshot(row) for row in rows]
