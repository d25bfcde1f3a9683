"""core/events.py — Per-session event bus.

Systems announce what happened; the session and anything else that
cares reacts later, when the bus is drained.  Each session keeps its
bus as a World resource::

    bus = world.res(EventBus)
    bus.subscribe("NpcKilled", on_kill)
    bus.emit(NpcKilled(eid=3, x=140.0, y=220.0, remaining=5))
    bus.drain()

Subscriptions are keyed by the event's class name.  ``Session.tick``
drains once per tick, after contact resolution and the end-of-round
check, so every handler sees the tick's final world state.
"""

from __future__ import annotations
import traceback
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable


# ═══════════════════════════════════════════════════════════════════
#  Events
# ═══════════════════════════════════════════════════════════════════

@dataclass
class NpcKilled:
    """The player touched an NPC; a stain now marks (x, y).

    ``remaining`` is the number of living NPCs right after this kill,
    so several kills on one tick count down 5, 4, 3 rather than all
    reporting the tick's final total.
    """
    eid: int
    x: float = 0.0
    y: float = 0.0
    stain_eid: int | None = None
    remaining: int = 0


@dataclass
class SessionEnded:
    """Every NPC in the session is dead."""
    ticks: int = 0
    time: float = 0.0


# ═══════════════════════════════════════════════════════════════════
#  Bus
# ═══════════════════════════════════════════════════════════════════

# Rounds of re-emitted events one drain() will process before giving up
MAX_DRAIN_ROUNDS = 1000


class EventBus:
    def __init__(self):
        self._pending: list[Any] = []
        self._handlers: dict[str, list[Callable]] = defaultdict(list)
        self._counts: dict[str, int] = defaultdict(int)

    def emit(self, event) -> None:
        """Queue *event*; nothing runs until ``drain()``."""
        self._pending.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def drain(self) -> int:
        """Deliver queued events, including any emitted by handlers.

        A handler that raises is reported and skipped; the remaining
        handlers still run.  Returns how many events were delivered.
        """
        delivered = 0
        for _ in range(MAX_DRAIN_ROUNDS):
            if not self._pending:
                break
            batch, self._pending = self._pending, []
            for event in batch:
                name = type(event).__name__
                self._counts[name] += 1
                for handler in self._handlers.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            delivered += len(batch)
        return delivered

    def stats(self) -> dict[str, int]:
        """Delivered-event counts by class name since the bus was made."""
        return dict(self._counts)

    def __repr__(self) -> str:
        return (f"EventBus(pending={len(self._pending)}, "
                f"types={len(self._handlers)})")
