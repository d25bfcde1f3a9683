"""logic/entity_factory.py — Player, NPC and stain spawning.

Builders read their numbers from ``core.tuning`` (falling back to
``core.constants``) unless the caller passes them explicitly, so tests
can pin exact radii and speeds without touching the tuning file.

Random placement always goes through a caller-supplied
``random.Random`` so a seeded session reproduces the same spawns.
"""

from __future__ import annotations
import random

from core import tuning
from core.collision import Rect
from core.constants import (
    HUMAN_RADIUS, PLAYER_SPEED, NPC_SPAWN_MARGIN, STAIN_RADIUS,
    COLOR_PLAYER, COLOR_NPC, COLOR_STAIN,
)
from core.ecs import World
from components import Body, Identity, Sprite, Player, Npc, Stain

# Draw order: stains under humans, player on top
LAYER_STAIN = 0
LAYER_NPC = 1
LAYER_PLAYER = 2


def random_point_in_room(room: Rect, rng: random.Random,
                         margin: float | None = None) -> tuple[float, float]:
    """Uniform point inside *room*, kept *margin* px from its edges.

    A room narrower than twice the margin collapses onto its
    margin-offset corner rather than failing.
    """
    if margin is None:
        margin = float(tuning.get("npc", "spawn_margin", NPC_SPAWN_MARGIN))
    x = room.x + margin + rng.random() * max(0.0, room.w - margin * 2)
    y = room.y + margin + rng.random() * max(0.0, room.h - margin * 2)
    return x, y


def spawn_player(world: World, x: float, y: float, *,
                 radius: float | None = None,
                 speed: float | None = None) -> int:
    if radius is None:
        radius = float(tuning.get("player", "radius", HUMAN_RADIUS))
    if speed is None:
        speed = float(tuning.get("player", "speed", PLAYER_SPEED))
    eid = world.spawn()
    world.add(eid, Body(x=x, y=y, radius=radius))
    world.add(eid, Player(speed=speed))
    world.add(eid, Identity(name="You", kind="player"))
    world.add(eid, Sprite(color=COLOR_PLAYER, layer=LAYER_PLAYER))
    return eid


def spawn_npc(world: World, x: float, y: float, *,
              radius: float | None = None, name: str = "") -> int:
    if radius is None:
        radius = float(tuning.get("npc", "radius", HUMAN_RADIUS))
    eid = world.spawn()
    world.add(eid, Body(x=x, y=y, radius=radius))
    world.add(eid, Npc(alive=True))
    world.add(eid, Identity(name=name or f"NPC {eid}", kind="npc"))
    world.add(eid, Sprite(color=COLOR_NPC, layer=LAYER_NPC))
    return eid


def spawn_npc_in_room(world: World, room: Rect, rng: random.Random,
                      **kwargs) -> int:
    x, y = random_point_in_room(room, rng)
    return spawn_npc(world, x, y, **kwargs)


def spawn_stain(world: World, x: float, y: float, *,
                npc_eid: int = 0, radius: float | None = None) -> int:
    if radius is None:
        radius = float(tuning.get("stain", "radius", STAIN_RADIUS))
    eid = world.spawn()
    world.add(eid, Body(x=x, y=y, radius=radius))
    world.add(eid, Stain(npc_eid=npc_eid))
    world.add(eid, Identity(name="stain", kind="stain"))
    world.add(eid, Sprite(color=COLOR_STAIN, layer=LAYER_STAIN))
    return eid
