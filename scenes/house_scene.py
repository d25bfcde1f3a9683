"""
scenes/house_scene.py — The one playable screen

WASD / arrows walk the red player through the house.  Touching a white
NPC kills it.  Once all are down the restart arrow shows; click it or
press R / Enter for a new round.  Tab toggles the debug overlay, F5
re-reads data/tuning.toml (applies from the next round), Esc quits.

This scene is the composition root for sessions: it holds the current
``Session`` and replaces it wholesale on restart.
"""

from __future__ import annotations
import random
import pygame
from core.app import App
from core.layout import HouseLayout
from core import tuning
from logic.session import Session
from logic.input_manager import InputManager, InputContext
from scenes.house_draw import (
    draw_house, draw_entities, draw_hud, draw_restart_arrow,
    draw_debug_overlay, hit_restart_arrow,
)


class HouseScene:
    """Holds the current session and feeds it one frame at a time."""

    def __init__(self, layout: HouseLayout, rng: random.Random | None = None):
        self.layout = layout
        self.rng = rng or random.Random()
        self.session = Session.new(layout, rng=self.rng)
        self.input = InputManager()
        self.show_debug = False

    def handle_events(self, events: list[pygame.event.Event], app: App):
        self.input.context = (InputContext.ENDED if self.session.is_ended()
                              else InputContext.PLAYING)
        self.input.begin_frame()
        for event in events:
            self.input.feed(event)
        self.input.end_frame()

        if self.input.quit_requested:
            app.running = False
            return
        if self.input.just("toggle_debug"):
            self.show_debug = not self.show_debug
        if self.input.just("reload_tuning"):
            tuning.reload()

        if self.session.is_ended() and self._restart_requested(app):
            try:
                self.session = self.session.restart()
            except ValueError as exc:
                print(f"[SCENE] Restart refused, fix data/tuning.toml: {exc}")

    def _restart_requested(self, app: App) -> bool:
        if self.input.just("restart"):
            return True
        if self.input.just("click_primary") and self.input.click_pos:
            mx, my = self.input.click_pos
            return hit_restart_arrow(mx, my, app.screen.get_width())
        return False

    def update(self, dt: float, app: App):
        self.session.tick(dt, self.input.snapshot())

    def draw(self, surface: pygame.Surface, app: App):
        draw_house(surface, self.session)
        draw_entities(surface, self.session)
        draw_hud(surface, app, self.session)
        if self.session.is_ended():
            draw_restart_arrow(surface, app)
        if self.show_debug:
            draw_debug_overlay(surface, app, self.session)
