"""components.rendering — Visual identity and display."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Identity:
    name: str = "unnamed"
    kind: str = "npc"          # "npc", "player", "stain"


@dataclass
class Sprite:
    color: tuple = (255, 255, 255)
    layer: int = 0             # draw order, low first
