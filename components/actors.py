"""components.actors — Player, NPC and stain markers."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Player:
    """Marks the player entity.  The player never dies."""
    speed: float = 160.0       # px/s
    alive: bool = True


@dataclass
class Npc:
    """A stationary NPC.

    ``alive`` flips to False exactly once, when the player touches it.
    Dead NPCs keep their Body so the stain and debug overlay can still
    read where they fell, but no system moves or tests them again.
    """
    alive: bool = True


@dataclass
class Stain:
    """Decorative mark left where an NPC died.  Never collides."""
    npc_eid: int = 0
