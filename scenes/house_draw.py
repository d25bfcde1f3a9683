"""scenes/house_draw.py — Rendering helpers for the house scene.

All pure-draw functions live here so that HouseScene.draw() stays thin.
Every function receives the data it needs as parameters — the session
is only ever read, never mutated.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.collision import Rect, point_in_triangle
from core.constants import (
    ARROW_TOP, ARROW_HALF_W, ARROW_H,
    COLOR_LAWN, COLOR_FLOOR, COLOR_ROOM_OUTLINE, COLOR_WALL, COLOR_STAIN,
    COLOR_HUD_BG, COLOR_TEXT, COLOR_SHADOW,
)
from components import Body, Sprite, Npc, Stain
from logic.session import Session


def _rect(r: Rect) -> pygame.Rect:
    return pygame.Rect(round(r.x), round(r.y), round(r.w), round(r.h))


# ── House ───────────────────────────────────────────────────────────

def draw_house(surface: pygame.Surface, session: Session):
    surface.fill(COLOR_LAWN)
    pygame.draw.rect(surface, COLOR_FLOOR, _rect(session.layout.bounds))
    for room in session.rooms:
        pygame.draw.rect(surface, COLOR_ROOM_OUTLINE, _rect(room), 1)
    for wall in session.walls:
        pygame.draw.rect(surface, COLOR_WALL, _rect(wall))


# ── Entities ────────────────────────────────────────────────────────

def draw_stain(surface: pygame.Surface, x: float, y: float, radius: float):
    """Flattened blood pool, a little wider than tall."""
    w = int(radius + 2) * 2
    h = int(radius - 3) * 2
    pygame.draw.ellipse(surface, COLOR_STAIN,
                        pygame.Rect(int(x) - w // 2, int(y) + 2 - h // 2, w, h))


def draw_human(surface: pygame.Surface, x: float, y: float, color: tuple):
    """Stick figure: head, torso, arms, two legs.  Collision uses the
    Body radius, not this outline."""
    cx, cy = int(x), int(y)
    pygame.draw.circle(surface, color, (cx, cy - 10), 6)
    pygame.draw.rect(surface, color, (cx - 6, cy - 4, 12, 18))
    pygame.draw.rect(surface, color, (cx - 12, cy + 2, 24, 4))
    pygame.draw.rect(surface, color, (cx - 6, cy + 14, 4, 10))
    pygame.draw.rect(surface, color, (cx + 2, cy + 14, 4, 10))


def draw_entities(surface: pygame.Surface, session: Session):
    """Stains first, then living NPCs, then the player, by Sprite.layer."""
    drawn = []
    for eid, body, sprite in session.world.query(Body, Sprite):
        drawn.append((sprite.layer, eid, body, sprite))
    drawn.sort(key=lambda d: (d[0], d[1]))

    world = session.world
    for _layer, eid, body, sprite in drawn:
        if world.has(eid, Stain):
            draw_stain(surface, body.x, body.y, body.radius)
            continue
        npc = world.get(eid, Npc)
        if npc is not None and not npc.alive:
            continue
        draw_human(surface, body.x, body.y, sprite.color)


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, session: Session):
    app.draw_text_bg(surface, f"NPCs left: {session.alive_count}", 18, 16,
                     COLOR_TEXT, COLOR_HUD_BG, font=app.font_lg, pad=6)


# ── Restart arrow ───────────────────────────────────────────────────

def arrow_points(width: int) -> tuple[tuple[float, float], ...]:
    """Apex and base corners of the restart arrow, top-centre of screen."""
    ax = width / 2
    return ((ax, ARROW_TOP),
            (ax - ARROW_HALF_W, ARROW_TOP + ARROW_H),
            (ax + ARROW_HALF_W, ARROW_TOP + ARROW_H))


def hit_restart_arrow(px: float, py: float, width: int) -> bool:
    return point_in_triangle(px, py, *arrow_points(width))


def draw_restart_arrow(surface: pygame.Surface, app: App):
    w = surface.get_width()
    pts = arrow_points(w)

    shadow = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    pygame.draw.polygon(shadow, COLOR_SHADOW, [(x + 6, y + 6) for x, y in pts])
    surface.blit(shadow, (0, 0))
    pygame.draw.polygon(surface, COLOR_TEXT, pts)

    msg = "All NPCs are down. Click the arrow or press R to restart"
    img = app.font_lg.render(msg, True, COLOR_TEXT)
    surface.blit(img, (w // 2 - img.get_width() // 2, ARROW_TOP + ARROW_H + 14))


# ── Debug overlay (Tab) ─────────────────────────────────────────────

def draw_debug_overlay(surface: pygame.Surface, app: App, session: Session):
    """Body circles, inflated wall boxes for the player, and the dev log."""
    r = session.player_radius
    for wall in session.walls:
        pygame.draw.rect(surface, (255, 255, 0), _rect(wall.inflate(r)), 1)
    for _eid, body, _sprite in session.world.query(Body, Sprite):
        pygame.draw.circle(surface, (0, 200, 255),
                           (int(body.x), int(body.y)), int(body.radius), 1)

    px, py = session.player_position
    lines = [
        f"t={session.clock.time:.2f}s  ticks={session.clock.ticks}  "
        f"fps={app.clock.get_fps():.0f}",
        f"player=({px:.1f}, {py:.1f})  state={session.state.name}",
        f"events={session.bus.stats()}",
    ]
    lines += [session.log.format(e) for e in session.log.recent(8)]

    y = surface.get_height() - 16 * len(lines) - 8
    for line in lines:
        app.draw_text_bg(surface, line, 8, y, font=app.font_sm)
        y += 16
