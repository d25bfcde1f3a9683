"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class GameClock:
    """Accumulated ``dt`` and tick count since the session started.

    Advanced once per tick by the session; the dev log stamps entries
    with ``time``.
    """
    time: float = 0.0
    ticks: int = 0
