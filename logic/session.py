"""logic/session.py — One playthrough of the house.

A ``Session`` owns everything that a restart throws away: the ECS
world with the player, the NPCs and their stains, the event bus, the
dev log and the clock.  The house layout is shared and never changes.

There is no global "current game".  Whoever drives the frames (the
scene) holds a reference and swaps it on restart::

    session = Session.new(layout, rng=random.Random(7))
    session.tick(dt, InputState(right=True))
    if session.is_ended():
        session = session.restart()

States
------
PLAYING  ticks move the player and resolve contact.
ENDED    every NPC is dead; ``tick`` does nothing until ``restart``.
"""

from __future__ import annotations
import random
from enum import Enum, auto

from core import tuning
from core.collision import Rect
from core.constants import NPC_COUNT, HUMAN_RADIUS
from core.ecs import World
from core.events import EventBus, NpcKilled, SessionEnded
from core.layout import HouseLayout
from components import Body, Npc, Stain, GameClock, DevLog
from logic.entity_factory import spawn_player, spawn_npc_in_room
from logic.movement import InputState, IDLE
from logic.tick import tick_systems


class SessionState(Enum):
    PLAYING = auto()
    ENDED = auto()


class Session:
    """Player, NPCs and stains for one round, plus the round's state.

    Build with ``Session.new``; the constructor expects an already
    populated world.
    """

    def __init__(self, layout: HouseLayout, world: World, player_eid: int,
                 npc_eids: list[int], rng: random.Random):
        self.layout = layout
        self.world = world
        self.player_eid = player_eid
        self._npc_eids: tuple[int, ...] = tuple(npc_eids)
        self._rng = rng
        self.state = SessionState.PLAYING

        self.bus.subscribe("NpcKilled", self._on_npc_killed)
        self.bus.subscribe("SessionEnded", self._on_session_ended)

    # ── Construction ────────────────────────────────────────────────

    @classmethod
    def new(cls, layout: HouseLayout, rng: random.Random | None = None,
            npc_count: int | None = None) -> Session:
        """Spawn a fresh PLAYING session on *layout*.

        The player starts at the centre of room 0.  The first NPC is
        always placed in room 0 too; the others each pick a room
        uniformly at random (rooms may repeat, NPCs may overlap).

        Raises ValueError for fewer than one NPC, or when the tuning
        gives the player and the NPCs different radii.
        """
        if npc_count is None:
            npc_count = int(tuning.get("npc", "count", NPC_COUNT))
        if npc_count < 1:
            raise ValueError(f"npc_count must be >= 1, got {npc_count}")
        radius = float(tuning.get("player", "radius", HUMAN_RADIUS))
        npc_radius = float(tuning.get("npc", "radius", HUMAN_RADIUS))
        if radius != npc_radius:
            raise ValueError(f"player radius {radius} and NPC radius "
                             f"{npc_radius} must match")
        rng = rng or random.Random()

        world = World()
        world.set_res(EventBus())
        world.set_res(DevLog())
        world.set_res(GameClock())

        start = layout.rooms[0]
        px, py = start.center
        player = spawn_player(world, px, py, radius=radius)

        npcs = [spawn_npc_in_room(world, start, rng, radius=radius)]
        for _ in range(npc_count - 1):
            room = layout.rooms[rng.randrange(layout.room_count)]
            npcs.append(spawn_npc_in_room(world, room, rng, radius=radius))

        session = cls(layout, world, player, npcs, rng)
        session.log.record(player, "session", f"started with {npc_count} NPCs",
                           name="session")
        return session

    def restart(self) -> Session:
        """Return a brand-new PLAYING session on the same layout.

        The new session is fully built before it is returned and this
        one is left as it was, so nothing can observe a half-reset
        round.
        """
        fresh = Session.new(self.layout, rng=self._rng,
                            npc_count=len(self._npc_eids))
        print(f"[SESSION] Restarted after {self.clock.ticks} ticks "
              f"({self.clock.time:.1f}s)")
        return fresh

    # ── Simulation ──────────────────────────────────────────────────

    def tick(self, dt: float, intent: InputState = IDLE) -> None:
        """Advance one step.  Does nothing once the session has ended."""
        if self.state is SessionState.ENDED:
            return

        tick_systems(self.world, dt, intent, self.layout.walls,
                     self.player_eid, self._npc_eids)

        if self.alive_count == 0:
            self.state = SessionState.ENDED
            self.bus.emit(SessionEnded(ticks=self.clock.ticks,
                                       time=self.clock.time))
        self.bus.drain()

    def is_ended(self) -> bool:
        return self.state is SessionState.ENDED

    # ── Event handlers ──────────────────────────────────────────────

    def _on_npc_killed(self, ev: NpcKilled) -> None:
        print(f"[SESSION] NPC #{ev.eid} down at ({ev.x:.0f}, {ev.y:.0f}), "
              f"{ev.remaining} left")

    def _on_session_ended(self, ev: SessionEnded) -> None:
        self.log.record(self.player_eid, "session",
                        f"all NPCs down in {ev.ticks} ticks",
                        name="session", t=ev.time)
        print(f"[SESSION] All {len(self._npc_eids)} NPCs down "
              f"after {ev.time:.1f}s")

    # ── Read-only accessors ─────────────────────────────────────────

    @property
    def bus(self) -> EventBus:
        return self.world.res(EventBus)

    @property
    def log(self) -> DevLog:
        return self.world.res(DevLog)

    @property
    def clock(self) -> GameClock:
        return self.world.res(GameClock)

    @property
    def npc_eids(self) -> tuple[int, ...]:
        return self._npc_eids

    @property
    def player_position(self) -> tuple[float, float]:
        return self.world.get(self.player_eid, Body).pos

    @property
    def player_radius(self) -> float:
        return self.world.get(self.player_eid, Body).radius

    @property
    def npc_states(self) -> list[tuple[float, float, bool]]:
        """``(x, y, alive)`` per NPC, in spawn order."""
        out = []
        for eid in self._npc_eids:
            body = self.world.get(eid, Body)
            out.append((body.x, body.y, self.world.get(eid, Npc).alive))
        return out

    @property
    def stain_positions(self) -> list[tuple[float, float]]:
        """Stain centres in the order the NPCs died."""
        return [body.pos for _eid, body, _stain in self.world.query(Body, Stain)]

    @property
    def stain_count(self) -> int:
        return self.world.count(Stain)

    @property
    def alive_count(self) -> int:
        return sum(1 for eid in self._npc_eids if self.world.get(eid, Npc).alive)

    @property
    def walls(self) -> tuple[Rect, ...]:
        return self.layout.walls

    @property
    def rooms(self) -> tuple[Rect, ...]:
        return self.layout.rooms
