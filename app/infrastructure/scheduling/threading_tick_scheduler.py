from __future__ import annotations

from collections.abc import Callable
import logging
from threading import Event, Thread, current_thread


logger = logging.getLogger(__name__)


class RepeatingTimer:
    def __init__(self, *, interval_seconds: float, callback: Callable[[], None], name: str):
        self._interval_seconds = interval_seconds
        self._callback = callback
        self._stopped = Event()
        self._thread = Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not current_thread():
            self._thread.join(timeout=self._interval_seconds)

    @property
    def cancelled(self) -> bool:
        return self._stopped.is_set()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval_seconds):
            try:
                self._callback()
            except Exception:  # noqa: BLE001
                logger.exception("tick_scheduler: callback failed timer=%s", self._thread.name)


class ThreadingTickScheduler:
    def __init__(self, *, thread_name: str = "apr-manager-tick"):
        self._thread_name = thread_name

    def schedule(self, *, interval_seconds: float, callback: Callable[[], None]) -> RepeatingTimer:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0.")
        timer = RepeatingTimer(
            interval_seconds=interval_seconds,
            callback=callback,
            name=self._thread_name,
        )
        timer.start()
        return timer
