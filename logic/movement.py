"""logic/movement.py — Player movement system.

Turns the four directional flags into a displacement and resolves it
against the house walls one axis at a time, which lets the player
slide along a wall when pushing into it diagonally.

Movement is memoryless: nothing carries over between ticks except the
position itself (no velocity, acceleration or knockback).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable

from core.ecs import World
from core.collision import Rect, circle_collides_any
from components import Body, Player


@dataclass(frozen=True)
class InputState:
    """Polled snapshot of the held movement keys for one frame."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


IDLE = InputState()


def movement_vector(intent: InputState) -> tuple[float, float]:
    """Return a (dx, dy) direction with length 0 or 1.

    Opposite flags cancel.  Diagonals are normalised so the player
    doesn't move √2× faster.
    """
    dx = 0.0
    dy = 0.0
    if intent.up:
        dy -= 1.0
    if intent.down:
        dy += 1.0
    if intent.left:
        dx -= 1.0
    if intent.right:
        dx += 1.0
    if dx != 0.0 and dy != 0.0:
        mag = math.hypot(dx, dy)
        dx /= mag
        dy /= mag
    return dx, dy


def movement_system(world: World, dt: float, intent: InputState,
                    walls: Iterable[Rect]):
    """Move every Player body by ``speed * dt`` along *intent*.

    A move along an axis is discarded if the body would touch a wall;
    the other axis is still tried, from the (possibly updated) X.
    """
    walls = tuple(walls)
    dx, dy = movement_vector(intent)
    if dx == 0.0 and dy == 0.0:
        return

    for _eid, body, player in world.query(Body, Player):
        step = player.speed * dt

        nx = body.x + dx * step
        if not circle_collides_any(nx, body.y, body.radius, walls):
            body.x = nx

        ny = body.y + dy * step
        if not circle_collides_any(body.x, ny, body.radius, walls):
            body.y = ny
