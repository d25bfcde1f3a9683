"""core/layout.py — Static house geometry: walls and rooms.

The house is a rectangle split into ``room_count`` equal vertical strips.
Walls are the four outer edges plus one partition between each pair of
neighbouring strips.  There are no doors: every room is sealed.

Rooms are the strips inset by the wall thickness on every side, so any
point sampled inside a room is clear of every wall.  Only spawn placement
reads the rooms; collision only ever tests against walls.

    layout = build_layout(house_bounds(960, 640, 80), room_count=5,
                          wall_thickness=8)
    layout.walls   # 4 + (room_count - 1) rects
    layout.rooms   # room_count rects, left to right
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from core.collision import Rect


class LayoutError(ValueError):
    """The house cannot be partitioned with the requested parameters."""


@dataclass(frozen=True)
class HouseLayout:
    bounds: Rect
    walls: tuple[Rect, ...]
    rooms: tuple[Rect, ...]
    wall_thickness: float

    @property
    def room_count(self) -> int:
        return len(self.rooms)


def house_bounds(width: float, height: float, margin: float) -> Rect:
    """The house rectangle centred in a *width* × *height* window."""
    return Rect(margin, margin, width - margin * 2, height - margin * 2)


def build_layout(bounds: Rect, room_count: int = 5,
                 wall_thickness: float = 8) -> HouseLayout:
    """Partition *bounds* into sealed rooms.

    Raises ``LayoutError`` for a non-positive room count or wall
    thickness, or when the rooms would have no interior left.
    """
    n = room_count
    t = wall_thickness
    if n < 1:
        raise LayoutError(f"room_count must be >= 1, got {n}")
    if t <= 0:
        raise LayoutError(f"wall_thickness must be > 0, got {t}")

    strip_w = math.floor(bounds.w / n)
    if strip_w - t * 2 <= 0 or bounds.h - t * 2 <= 0:
        raise LayoutError(
            f"house {bounds.w}x{bounds.h} too small for {n} rooms "
            f"with {t}px walls")

    walls: list[Rect] = [
        # top / bottom run past the corners so the box is closed
        Rect(bounds.x - t, bounds.y - t, bounds.w + t * 2, t),
        Rect(bounds.x - t, bounds.bottom, bounds.w + t * 2, t),
        Rect(bounds.x - t, bounds.y, t, bounds.h),
        Rect(bounds.right, bounds.y, t, bounds.h),
    ]
    half = math.floor(t / 2)
    for i in range(1, n):
        walls.append(Rect(bounds.x + i * strip_w - half, bounds.y, t, bounds.h))

    rooms: list[Rect] = []
    for i in range(n):
        rx = bounds.x + i * strip_w
        # last strip absorbs the rounding remainder
        rw = (bounds.right - rx) if i == n - 1 else strip_w
        rooms.append(Rect(rx + t, bounds.y + t, rw - t * 2, bounds.h - t * 2))

    return HouseLayout(bounds=bounds, walls=tuple(walls), rooms=tuple(rooms),
                       wall_thickness=t)
