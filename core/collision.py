"""core/collision.py — Low-level rectangle / circle collision primitives.

These live in ``core/`` (not ``logic/``) because both the layout builder
and gameplay systems (movement, contact, the restart arrow) need them.

All coordinates are pixels, top-left origin, y pointing down.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle.  ``(x, y)`` is the top-left corner."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.w / 2, self.y + self.h / 2

    def inflate(self, r: float) -> Rect:
        """Return a copy grown by *r* on every side."""
        return Rect(self.x - r, self.y - r, self.w + r * 2, self.h + r * 2)

    def contains(self, px: float, py: float) -> bool:
        """Closed-interval point test (edges count as inside)."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Return True if *a* and *b* share a region of positive area.

    Rects that merely touch along an edge do not overlap.
    """
    return not (b.x >= a.right or
                b.right <= a.x or
                b.y >= a.bottom or
                b.bottom <= a.y)


def circle_collides_any(x: float, y: float, r: float,
                        walls: Iterable[Rect]) -> bool:
    """Return True if the circle (x, y, r) touches any rect in *walls*.

    Each wall is inflated by *r* and the centre point is tested against
    the inflated box.  Corners are therefore square, not rounded: a body
    can sit slightly closer to a wall corner on the diagonal than a true
    circle-vs-rect test would allow.  Movement feel depends on this, so
    keep it.
    """
    for w in walls:
        if w.inflate(r).contains(x, y):
            return True
    return False


def point_in_triangle(px: float, py: float,
                      a: tuple[float, float],
                      b: tuple[float, float],
                      c: tuple[float, float]) -> bool:
    """Barycentric point-in-triangle test (edges inclusive)."""
    (x1, y1), (x2, y2), (x3, y3) = a, b, c
    denom = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    if denom == 0:
        return False  # degenerate triangle
    l1 = ((y2 - y3) * (px - x3) + (x3 - x2) * (py - y3)) / denom
    l2 = ((y3 - y1) * (px - x3) + (x1 - x3) * (py - y3)) / denom
    l3 = 1.0 - l1 - l2
    return l1 >= 0 and l2 >= 0 and l3 >= 0
