"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Body
rendering      Identity, Sprite
actors         Player, Npc, Stain
resources      GameClock
dev_log        DevLog

All public names are re-exported here so callers can write
``from components import Body``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Body

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Identity, Sprite

# ── Actors ───────────────────────────────────────────────────────────
from components.actors import Player, Npc, Stain

# ── World resources / singletons ─────────────────────────────────────
from components.resources import GameClock
from components.dev_log import DevLog

__all__ = [
    "Body",
    "Identity", "Sprite",
    "Player", "Npc", "Stain",
    "GameClock", "DevLog",
]
