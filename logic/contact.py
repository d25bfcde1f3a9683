"""logic/contact.py — Player-vs-NPC contact resolution.

Runs after movement each tick.  Any living NPC whose body touches the
player's (centre distance ≤ sum of radii) dies on the spot and leaves
a stain where it stood.
"""

from __future__ import annotations
from typing import Sequence

from core.ecs import World
from core.events import EventBus, NpcKilled
from components import Body, Npc, Identity, GameClock, DevLog
from logic.entity_factory import spawn_stain


def in_contact(a: Body, b: Body) -> bool:
    """True if two circular bodies touch or overlap."""
    dx = a.x - b.x
    dy = a.y - b.y
    reach = a.radius + b.radius
    return dx * dx + dy * dy <= reach * reach


def contact_system(world: World, player_eid: int,
                   npc_eids: Sequence[int]) -> list[int]:
    """Kill every living NPC in *npc_eids* touching the player.

    NPCs are checked in the order given, so several NPCs dying on the
    same tick always produce their stains in the same order.  Returns
    the ids killed by this call.  Dead NPCs are skipped, so calling it
    again never adds a second stain for the same NPC.
    """
    pbody = world.get(player_eid, Body)
    if pbody is None:
        return []

    bus = world.res(EventBus)
    log = world.res(DevLog)
    clock = world.res(GameClock)
    now = clock.time if clock else 0.0

    npcs = [world.get(eid, Npc) for eid in npc_eids]
    remaining = sum(1 for npc in npcs if npc is not None and npc.alive)
    killed: list[int] = []
    for eid in npc_eids:
        npc = world.get(eid, Npc)
        body = world.get(eid, Body)
        if npc is None or body is None or not npc.alive:
            continue
        if not in_contact(body, pbody):
            continue

        npc.alive = False
        stain = spawn_stain(world, body.x, body.y, npc_eid=eid)
        killed.append(eid)
        remaining -= 1

        if bus is not None:
            bus.emit(NpcKilled(eid=eid, x=body.x, y=body.y,
                               stain_eid=stain, remaining=remaining))
        if log is not None:
            ident = world.get(eid, Identity)
            log.record(eid, "contact", f"killed at ({body.x:.0f}, {body.y:.0f})",
                       name=ident.name if ident else "", t=now)
    return killed
