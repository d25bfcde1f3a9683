"""
core/app.py — Pygame window and frame loop

Owns the display, the frame clock and the fonts, and drives exactly one
scene object for the life of the process:

    app = App(title="House Sweep", width=960, height=640)
    app.run(HouseScene(layout))

A scene is anything with ``handle_events(events, app)``,
``update(dt, app)`` and ``draw(surface, app)``.  Setting
``app.running = False`` from any of them ends the loop after the
current frame.

Frame time is measured for real and clamped to ``max_dt`` before the
scene sees it, so a stalled window (dragging, a breakpoint) never
produces one huge simulation step.
"""

from __future__ import annotations
import pygame
from core.constants import FPS, MAX_DT


class App:
    def __init__(self, title: str = "House Sweep", width: int = 960,
                 height: int = 640, fps: int = FPS, max_dt: float = MAX_DT):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.SCALED)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.max_dt = max_dt
        self.dt = 0.0
        self.running = False

        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("sans", 18)

    def run(self, scene) -> None:
        self.running = True
        while self.running:
            self.dt = min(self.max_dt, self.clock.tick(self.fps) / 1000.0)

            scene.handle_events(pygame.event.get(), self)
            scene.update(self.dt, self)
            scene.draw(self.screen, self)

            pygame.display.flip()

        pygame.quit()

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Text over a translucent box sized to it.  Returns the text rect."""
        img = (font or self.font_sm).render(text, True, color)
        w, h = img.get_size()
        box = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        box.fill(bg)
        surface.blit(box, (x - pad, y - pad))
        return surface.blit(img, (x, y))
