from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class ScheduledTick(Protocol):
    def cancel(self) -> None:
        ...


class TickSchedulerPort(Protocol):
    def schedule(self, *, interval_seconds: float, callback: Callable[[], None]) -> ScheduledTick:
        ...
