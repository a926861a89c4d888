from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
import logging
import math
from threading import Lock
import time

from app.application.ports.tick_scheduler_port import ScheduledTick, TickSchedulerPort
from app.domain.entities.apr_history import PoolSnapshot, SimulatedPool
from app.domain.exceptions import AprManagerInputError
from app.domain.services.apr_estimation import compute_base_apr
from app.domain.services.apr_history import next_history, seed_history


DEFAULT_REFRESH_INTERVAL_MS = 15_000
logger = logging.getLogger(__name__)


def _wall_clock_ms() -> float:
    return time.time() * 1000


def _validate_interval(refresh_interval_ms: int) -> int:
    if refresh_interval_ms <= 0:
        raise AprManagerInputError("refresh_interval_ms must be > 0.")
    return refresh_interval_ms


def seed_pool(pool: PoolSnapshot) -> SimulatedPool:
    base_apr = compute_base_apr(pool)
    history = seed_history(base_apr, pool.id)
    latest_apr = history[0].apr if history else base_apr
    return SimulatedPool(pool=pool, apr=latest_apr, history=history)


class AprManager:
    """Mantem o historico simulado de APR das pools e o avanca periodicamente.

    O estado e substituido por inteiro a cada ``reseed``; ``tick`` recalcula o
    alvo a partir do snapshot atual da pool (nao do valor simulado) e avanca a
    serie de cada horizonte. Todas as mutacoes acontecem sob ``_lock``.
    """

    def __init__(
        self,
        *,
        scheduler: TickSchedulerPort,
        refresh_interval_ms: int = DEFAULT_REFRESH_INTERVAL_MS,
        clock: Callable[[], float] | None = None,
        pools: Sequence[PoolSnapshot] | None = None,
    ):
        self._scheduler = scheduler
        self._refresh_interval_ms = _validate_interval(refresh_interval_ms)
        self._clock = clock or _wall_clock_ms
        self._lock = Lock()
        self._pools: Sequence[PoolSnapshot] = ()
        self._simulated: tuple[SimulatedPool, ...] = ()
        self._handle: ScheduledTick | None = None
        self._generation = 0
        if pools is not None:
            self.reseed(pools)

    @property
    def refresh_interval_ms(self) -> int:
        return self._refresh_interval_ms

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._handle is not None

    def reseed(self, pools: Sequence[PoolSnapshot]) -> tuple[SimulatedPool, ...]:
        seeded = tuple(seed_pool(pool) for pool in pools)
        with self._lock:
            self._pools = pools
            self._simulated = seeded
            replaced = self._swap_handle(reschedule=True) if self._handle is not None else None
        self._cancel(replaced)
        logger.info("apr_manager: reseed pools=%s", len(seeded))
        return seeded

    def sync(self, pools: Sequence[PoolSnapshot]) -> bool:
        """Re-seed apenas quando a lista recebida e outro objeto."""
        with self._lock:
            unchanged = pools is self._pools
        if unchanged:
            return False
        self.reseed(pools)
        return True

    def tick(self) -> tuple[SimulatedPool, ...]:
        with self._lock:
            return self._advance()

    def snapshot(self) -> tuple[SimulatedPool, ...]:
        with self._lock:
            return self._simulated

    def set_refresh_interval(self, refresh_interval_ms: int) -> None:
        interval = _validate_interval(refresh_interval_ms)
        with self._lock:
            self._refresh_interval_ms = interval
            replaced = self._swap_handle(reschedule=True) if self._handle is not None else None
        self._cancel(replaced)
        logger.info("apr_manager: refresh_interval_ms=%s", interval)

    def start(self) -> None:
        with self._lock:
            if self._handle is not None:
                return
            self._swap_handle(reschedule=True)
            pools_count = len(self._simulated)
        logger.info(
            "apr_manager: started interval_ms=%s pools=%s",
            self._refresh_interval_ms,
            pools_count,
        )

    def stop(self) -> None:
        with self._lock:
            replaced = self._swap_handle(reschedule=False)
        if replaced is None:
            return
        self._cancel(replaced)
        logger.info("apr_manager: stopped")

    def __enter__(self) -> AprManager:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _swap_handle(self, *, reschedule: bool) -> ScheduledTick | None:
        # caller holds _lock; the returned handle must be cancelled by the caller
        replaced = self._handle
        self._handle = None
        self._generation += 1
        if reschedule:
            generation = self._generation
            self._handle = self._scheduler.schedule(
                interval_seconds=self._refresh_interval_ms / 1000,
                callback=lambda: self._on_timer(generation),
            )
        return replaced

    def _cancel(self, handle: ScheduledTick | None) -> None:
        # outside _lock: a cancel may wait for a callback blocked on it
        if handle is not None:
            handle.cancel()

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            # stale timer from before a stop/restart
            if generation != self._generation or self._handle is None:
                return
            self._advance()

    def _advance(self) -> tuple[SimulatedPool, ...]:
        step = math.floor(self._clock() / self._refresh_interval_ms)
        advanced: list[SimulatedPool] = []
        for simulated, upstream in zip(self._simulated, self._pools):
            target_apr = compute_base_apr(upstream)
            history = next_history(simulated.history, target_apr, upstream.id, step)
            latest_apr = history[0].apr if history else target_apr
            advanced.append(replace(simulated, pool=upstream, apr=latest_apr, history=history))
        self._simulated = tuple(advanced)
        logger.debug("apr_manager: tick step=%s pools=%s", step, len(advanced))
        return self._simulated
