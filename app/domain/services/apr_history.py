from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities.apr_history import HistoricalPoint, Horizon
from app.domain.services.apr_estimation import round2
from app.domain.services.deterministic_noise import noise


HORIZONS: tuple[Horizon, ...] = (
    Horizon(label="1D", damping=0.65, slope_bias=0.0),
    Horizon(label="1W", damping=0.75, slope_bias=-0.03),
    Horizon(label="1M", damping=0.82, slope_bias=-0.05),
    Horizon(label="3M", damping=0.9, slope_bias=-0.08),
    Horizon(label="1Y", damping=0.95, slope_bias=-0.12),
)

SEED_NOISE_SPAN = 0.5
TICK_NOISE_SPAN = 0.35


def horizon_seed(seed: str, horizon: Horizon) -> str:
    return f"{seed}-{horizon.label}"


def seed_history(
    base_apr: float,
    seed: str,
    *,
    horizons: Sequence[Horizon] = HORIZONS,
) -> tuple[HistoricalPoint, ...]:
    points: list[HistoricalPoint] = []
    for idx, horizon in enumerate(horizons):
        jitter = (noise(horizon_seed(seed, horizon), idx) - 0.5) * SEED_NOISE_SPAN
        apr = max(0.0, round2(base_apr * (1 + horizon.slope_bias) + jitter))
        points.append(HistoricalPoint(label=horizon.label, apr=apr))
    return tuple(points)


def next_history(
    history: Sequence[HistoricalPoint],
    target_apr: float,
    seed: str,
    step: int,
    *,
    horizons: Sequence[Horizon] = HORIZONS,
) -> tuple[HistoricalPoint, ...]:
    """Avanca um tick: cada horizonte e puxado para o alvo com seu proprio damping.

    Filtro de primeira ordem por horizonte (media movel exponencial) com um
    pequeno ruido deterministico. Horizontes ausentes partem de ``target_apr``.
    """
    current_by_label = {point.label: point.apr for point in history}
    points: list[HistoricalPoint] = []
    for horizon in horizons:
        current = current_by_label.get(horizon.label, target_apr)
        desired = target_apr * (1 + horizon.slope_bias)
        pull = (desired - current) * (1 - horizon.damping)
        jitter = (noise(horizon_seed(seed, horizon), step) - 0.5) * TICK_NOISE_SPAN
        apr = max(0.0, round2(current + pull + jitter))
        points.append(HistoricalPoint(label=horizon.label, apr=apr))
    return tuple(points)
