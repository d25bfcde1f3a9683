"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context** (playing or the end-of-round screen).

The simulation never sees pygame: each frame the scene turns the held
movement intents into an ``InputState`` snapshot and hands that to the
session.

Usage (in house_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    if self.input.just("restart"):  # discrete press
        ...
    session.tick(dt, self.input.snapshot())
"""

from __future__ import annotations
from enum import Enum, auto
import pygame

from logic.movement import InputState


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines which key-bindings are active."""
    PLAYING = auto()    # walking around the house
    ENDED   = auto()    # all NPCs down, restart arrow showing


# ── Default key bindings ────────────────────────────────────────────

# Each binding is  (pygame key constant, modifier mask or 0)
# For mouse buttons we use negative constants: -1 = LMB

_COMMON_BINDS: dict[str, list[tuple[int, int]]] = {
    "quit":          [(pygame.K_ESCAPE, 0)],
    "toggle_debug":  [(pygame.K_TAB, 0)],
    "reload_tuning": [(pygame.K_F5, 0)],
}

_PLAYING_BINDS: dict[str, list[tuple[int, int]]] = {
    # Movement  (held — continuous)
    "move_up":      [(pygame.K_w, 0), (pygame.K_UP, 0)],
    "move_down":    [(pygame.K_s, 0), (pygame.K_DOWN, 0)],
    "move_left":    [(pygame.K_a, 0), (pygame.K_LEFT, 0)],
    "move_right":   [(pygame.K_d, 0), (pygame.K_RIGHT, 0)],
    **_COMMON_BINDS,
}

_ENDED_BINDS: dict[str, list[tuple[int, int]]] = {
    "restart":      [(pygame.K_r, 0), (pygame.K_RETURN, 0),
                     (pygame.K_KP_ENTER, 0)],
    "click_primary": [(-1, 0)],
    **_COMMON_BINDS,
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses,
    ``held(intent)`` for continuous holds and ``snapshot()`` for the
    movement flags.
    """

    def __init__(self):
        self.context: InputContext = InputContext.PLAYING
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held (key is down right now)
        self._held: set[str] = set()
        # Position of the last mouse press this frame
        self.click_pos: tuple[int, int] | None = None
        self.quit_requested = False

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()
        self.click_pos = None

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  Maps it to intents based on context."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return

        if event.type == pygame.KEYDOWN:
            mods = pygame.key.get_mods()
            for intent, key_list in self._active_binds().items():
                for key, req_mod in key_list:
                    if key >= 0 and event.key == key and (
                            req_mod == 0 or (mods & req_mod)):
                        self._pressed.add(intent)
                        break

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.click_pos = event.pos
            neg_button = -event.button
            for intent, key_list in self._active_binds().items():
                if any(key == neg_button for key, _mod in key_list):
                    self._pressed.add(intent)

        if self.just("quit"):
            self.quit_requested = True

    def end_frame(self):
        """Snapshot held-key state for continuous intents (movement)."""
        self._held.clear()
        keys = pygame.key.get_pressed()
        mods = pygame.key.get_mods()
        for intent, key_list in self._active_binds().items():
            for key, req_mod in key_list:
                if key < 0:
                    continue
                if keys[key] and (req_mod == 0 or (mods & req_mod)):
                    self._held.add(intent)
                    break

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held down."""
        return intent in self._held

    def snapshot(self) -> InputState:
        """The four movement flags as held right now."""
        return InputState(
            up=self.held("move_up"),
            down=self.held("move_down"),
            left=self.held("move_left"),
            right=self.held("move_right"),
        )

    # ── internal ────────────────────────────────────────────────

    def _active_binds(self) -> dict[str, list[tuple[int, int]]]:
        if self.context == InputContext.PLAYING:
            return _PLAYING_BINDS
        return _ENDED_BINDS
