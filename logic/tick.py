"""logic/tick.py — Per-tick system pipeline.

One call advances a session's world by ``dt``: clock, player movement,
then contact.  Order matters — contact is tested against the position
the player has *after* this tick's move.

Usage::

    from logic.tick import tick_systems
    killed = tick_systems(world, dt, intent, walls, player_eid, npc_eids)
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Sequence

from components import GameClock
from logic.movement import movement_system
from logic.contact import contact_system

if TYPE_CHECKING:
    from core.ecs import World
    from core.collision import Rect
    from logic.movement import InputState


def tick_systems(world: "World", dt: float, intent: "InputState",
                 walls: "Iterable[Rect]", player_eid: int,
                 npc_eids: Sequence[int]) -> list[int]:
    """Run one simulation step.  Returns the NPC ids killed this tick."""
    clock = world.res(GameClock)
    if clock is not None:
        clock.time += dt
        clock.ticks += 1

    movement_system(world, dt, intent, walls)
    return contact_system(world, player_eid, npc_eids)
