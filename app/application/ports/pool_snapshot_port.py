from __future__ import annotations

from typing import Protocol

from app.domain.entities.apr_history import PoolSnapshot


class PoolSnapshotPort(Protocol):
    def list_pools(self) -> list[PoolSnapshot]:
        ...
