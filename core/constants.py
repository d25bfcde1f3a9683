"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Tunable gameplay numbers live in ``data/tuning.toml``; the values here
are the fallbacks used when that file (or a key in it) is missing, plus
the render palette, which is not tunable.

Unit System
-----------
Everything is in screen pixels: positions and radii in px, speeds in
px/s, time in real seconds.  The house occupies the window minus a
lawn margin on every side.
"""

# ── Window / loop ───────────────────────────────────────────────────
WINDOW_W = 960
WINDOW_H = 640
WINDOW_TITLE = "House Sweep"
FPS = 60
MAX_DT = 0.033              # s

# ── House layout ────────────────────────────────────────────────────
HOUSE_MARGIN = 80           # px
ROOM_COUNT = 5
WALL_THICKNESS = 8          # px

# ── Bodies ──────────────────────────────────────────────────────────
# Player and NPC radii must match: contact is symmetric.
HUMAN_RADIUS = 14.0         # px
PLAYER_SPEED = 160.0        # px/s
NPC_COUNT = 6
NPC_SPAWN_MARGIN = 28.0     # px
STAIN_RADIUS = 12.0         # px

# ── Restart arrow (apex at top centre, pointing up) ─────────────────
ARROW_TOP = 40              # px from top of window
ARROW_HALF_W = 18           # px
ARROW_H = 40                # px

# ── Palette ─────────────────────────────────────────────────────────
COLOR_LAWN = (46, 204, 113)
COLOR_FLOOR = (39, 174, 96)
COLOR_ROOM_OUTLINE = (34, 153, 84)
COLOR_WALL = (93, 64, 55)
COLOR_STAIN = (166, 27, 27)
COLOR_PLAYER = (220, 20, 20)
COLOR_NPC = (255, 255, 255)
COLOR_HUD_BG = (0, 0, 0, 153)
COLOR_TEXT = (255, 255, 255)
COLOR_SHADOW = (0, 0, 0, 90)
