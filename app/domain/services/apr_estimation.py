from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
import math

from app.domain.entities.apr_history import PoolSnapshot


DAYS_PER_YEAR = 365
BASELINE_WEIGHT = 0.65
FEE_APR_WEIGHT = 0.35
VOLUME_BOOST_AMPLITUDE = 0.08
# wide enough for any finite float quantized to cents
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def round2(value: float) -> float:
    # Half away from zero over the exact binary value, same as toFixed(2).
    if not math.isfinite(value):
        return value
    return float(
        Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)
    )


def annualized_fee_apr(*, fees_24h_usd: float, tvl_usd: float) -> float:
    if tvl_usd <= 0:
        return 0.0
    return (fees_24h_usd / tvl_usd) * DAYS_PER_YEAR * 100


def volume_boost(volume_ratio: float) -> float:
    return 1 + VOLUME_BOOST_AMPLITUDE * math.tanh(volume_ratio - 1)


def compute_base_apr(pool: PoolSnapshot) -> float:
    fee_apr = annualized_fee_apr(fees_24h_usd=pool.fees_24h_usd, tvl_usd=pool.tvl_usd)
    volume_ratio = pool.volume_24h_usd / pool.tvl_usd if pool.tvl_usd > 0 else 0.0
    boost = volume_boost(volume_ratio)
    blended = BASELINE_WEIGHT * pool.baseline_apr + FEE_APR_WEIGHT * fee_apr
    return max(0.0, round2(blended * boost))
