"""components.spatial — Circular bodies.

All coordinates and radii are in pixels, centre origin.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Body:
    """Circular collision footprint.  ``radius`` never changes."""
    x: float = 0.0        # px
    y: float = 0.0        # px
    radius: float = 14.0  # px

    @property
    def pos(self) -> tuple[float, float]:
        return self.x, self.y
