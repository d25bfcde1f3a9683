"""test_session.py — Contact resolution and the session state machine.

Sessions are built on the default house with a seeded RNG.  NPC bodies
are then moved by hand so each scenario controls exactly who is in
reach of the player.

Run:  python test_session.py      (or: pytest test_session.py)
"""
from __future__ import annotations
import sys, random, traceback

from core.layout import build_layout, house_bounds
from core.events import NpcKilled
from components import Body, Npc, Player, DevLog
from logic.contact import contact_system, in_contact
from logic.movement import InputState, IDLE
from logic.session import Session, SessionState


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
    assert cond, f"{label} {detail}".strip()


DT = 1.0 / 60.0
LAYOUT = build_layout(house_bounds(960, 640, 80), room_count=5, wall_thickness=8)
FAR = LAYOUT.rooms[-1].center          # (800, 320): nowhere near room 0


def _session(npc_count: int = 6, seed: int = 1234) -> Session:
    """Session with every NPC parked in the far room."""
    s = Session.new(LAYOUT, rng=random.Random(seed), npc_count=npc_count)
    for eid in s.npc_eids:
        _place(s, eid, *FAR)
    return s


def _place(s: Session, eid: int, x: float, y: float):
    body = s.world.get(eid, Body)
    body.x, body.y = x, y


def _place_on_player(s: Session, eid: int, dx: float = 0.0):
    px, py = s.player_position
    _place(s, eid, px + dx, py)


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  SPAWNING
# ═══════════════════════════════════════════════════════════════════════

def test_new_session():
    print("\n=== 1: Fresh session ===")
    s = Session.new(LAYOUT, rng=random.Random(7))
    room0 = LAYOUT.rooms[0]

    check(s.state is SessionState.PLAYING and not s.is_ended(), "1a: starts PLAYING")
    check(len(s.npc_eids) == 6, "1b: six NPCs", f"got {len(s.npc_eids)}")
    check(all(alive for _x, _y, alive in s.npc_states), "1c: all alive")
    check(s.stain_positions == [] and s.stain_count == 0, "1d: no stains")
    check(s.player_position == room0.center, "1e: player at centre of room 0",
          f"{s.player_position}")

    x0, y0, _ = s.npc_states[0]
    check(room0.contains(x0, y0), "1f: first NPC is in the player's room",
          f"({x0:.1f}, {y0:.1f})")
    stray = [(x, y) for x, y, _ in s.npc_states
             if not any(r.contains(x, y) for r in LAYOUT.rooms)]
    check(not stray, "1g: every NPC spawns inside a room", f"{stray}")

    radii = {s.world.get(e, Body).radius for e in s.npc_eids}
    check(radii == {s.player_radius}, "1h: NPC and player radii match",
          f"npc={radii} player={s.player_radius}")
    check(s.world.get(s.player_eid, Player).alive, "1i: player is alive")


def test_seeded_spawns():
    print("\n=== 2: Seeded RNG reproduces spawns ===")
    a = Session.new(LAYOUT, rng=random.Random(99))
    b = Session.new(LAYOUT, rng=random.Random(99))
    check(a.npc_states == b.npc_states, "2a: same seed, same NPC positions")

    c = Session.new(LAYOUT, rng=random.Random(100))
    check(a.npc_states != c.npc_states, "2b: different seed, different positions")


def test_bad_npc_count():
    print("\n=== 3: npc_count validation ===")
    try:
        Session.new(LAYOUT, rng=random.Random(1), npc_count=0)
    except ValueError:
        ok("3a: zero NPCs rejected")
    else:
        check(False, "3a: zero NPCs rejected", "no ValueError")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  CONTACT
# ═══════════════════════════════════════════════════════════════════════

def test_single_npc_scenario():
    print("\n=== 4: One NPC exactly at contact distance ===")
    s = _session(npc_count=1)
    npc = s.npc_eids[0]
    reach = s.world.get(npc, Body).radius + s.player_radius   # 28
    _place_on_player(s, npc, dx=reach)
    spot = s.world.get(npc, Body).pos

    s.tick(DT, IDLE)

    check(not s.world.get(npc, Npc).alive, "4a: NPC at exactly r1+r2 dies")
    check(s.stain_positions == [spot], "4b: one stain at the NPC's position",
          f"{s.stain_positions} vs {spot}")
    check(s.is_ended(), "4c: session ended on the same tick")
    check(s.world.get(npc, Body).pos == spot, "4d: dead NPC did not move")


def test_just_out_of_reach():
    print("\n=== 5: Contact boundary ===")
    s = _session(npc_count=1)
    npc = s.npc_eids[0]
    _place_on_player(s, npc, dx=28.01)
    s.tick(DT, IDLE)
    check(s.world.get(npc, Npc).alive, "5a: 0.01 px beyond reach survives")
    check(not s.is_ended(), "5b: still PLAYING")

    check(in_contact(Body(0, 0, 14), Body(0, 28, 14)), "5c: touching bodies are in contact")
    check(not in_contact(Body(0, 0, 14), Body(20, 21, 14)),
          "5d: diagonal gap is not contact")


def test_death_is_idempotent():
    print("\n=== 6: A dead NPC never triggers again ===")
    s = _session(npc_count=2)
    victim, bystander = s.npc_eids
    _place_on_player(s, victim)
    spot = s.world.get(victim, Body).pos

    first = contact_system(s.world, s.player_eid, s.npc_eids)
    check(first == [victim], "6a: first call kills the victim", f"{first}")

    for _ in range(5):
        again = contact_system(s.world, s.player_eid, s.npc_eids)
        check(again == [], "6b: repeat call kills nobody", f"{again}")
    for _ in range(10):
        s.tick(DT, IDLE)

    check(s.stain_count == 1, "6c: still exactly one stain", f"{s.stain_count}")
    check(s.stain_positions == [spot], "6d: stain has not moved")
    check(s.world.get(victim, Body).pos == spot, "6e: dead NPC has not moved")
    check(s.world.get(bystander, Npc).alive, "6f: far NPC untouched")


def test_simultaneous_kills():
    print("\n=== 7: Several NPCs in reach on one tick ===")
    s = _session(npc_count=6)
    a, b, c = s.npc_eids[1], s.npc_eids[3], s.npc_eids[4]
    _place_on_player(s, c, dx=-10)
    _place_on_player(s, a, dx=5)
    _place_on_player(s, b, dx=20)

    s.tick(DT, IDLE)

    dead = [e for e in s.npc_eids if not s.world.get(e, Npc).alive]
    check(dead == [a, b, c], "7a: all three die on the same tick", f"{dead}")
    expected = [s.world.get(e, Body).pos for e in (a, b, c)]
    check(s.stain_positions == expected, "7b: stains follow NPC order",
          f"{s.stain_positions}")
    check(s.bus.stats().get("NpcKilled") == 3, "7c: three NpcKilled events",
          f"{s.bus.stats()}")
    kills = [e for e in s.log.entries if e["cat"] == "contact"]
    check([e["eid"] for e in kills] == [a, b, c],
          "7d: three contact entries in the dev log")


def test_kill_countdown():
    print("\n=== 7b: Each kill reports the NPCs left after it ===")
    s = _session(npc_count=6)
    seen = []
    s.bus.subscribe("NpcKilled", seen.append)
    for eid in s.npc_eids[:3]:
        _place_on_player(s, eid)

    s.tick(DT, IDLE)
    check([ev.remaining for ev in seen] == [5, 4, 3],
          "7e: same-tick kills count down one by one",
          f"{[ev.remaining for ev in seen]}")

    _place_on_player(s, s.npc_eids[3])
    s.tick(DT, IDLE)
    check(seen[-1].remaining == 2 == s.alive_count,
          "7f: a later kill continues from the survivors")


def test_walking_into_npc():
    print("\n=== 8: Moving the player onto an NPC ===")
    s = _session(npc_count=2)
    npc = s.npc_eids[0]
    px, py = s.player_position
    _place(s, npc, px + 40, py)      # 40 px right, reach is 28

    s.tick(DT, IDLE)
    check(s.world.get(npc, Npc).alive, "8a: out of reach while standing still")

    for _ in range(10):              # ~26.7 px at 160 px/s
        s.tick(DT, InputState(right=True))
    check(not s.world.get(npc, Npc).alive, "8b: dies once the player closes in")
    check(s.stain_positions == [(px + 40, py)], "8c: stain where the NPC stood")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  STATE MACHINE
# ═══════════════════════════════════════════════════════════════════════

def test_win_condition():
    print("\n=== 9: ENDED only once all six are dead ===")
    s = _session(npc_count=6)
    events = []
    s.bus.subscribe("NpcKilled", events.append)

    for eid in s.npc_eids[:5]:
        _place_on_player(s, eid)
    s.tick(DT, IDLE)
    check(s.alive_count == 1, "9a: five of six dead", f"alive={s.alive_count}")
    check(not s.is_ended(), "9b: not ended with one left")
    check(s.stain_count == 5, "9c: one stain per dead NPC")
    check(all(isinstance(e, NpcKilled) for e in events) and len(events) == 5,
          "9d: subscribers saw five kills")

    _place_on_player(s, s.npc_eids[5])
    s.tick(DT, IDLE)
    check(s.is_ended() and s.state is SessionState.ENDED, "9e: sixth kill ends it")
    check(s.bus.stats().get("SessionEnded") == 1, "9f: SessionEnded emitted once")


def test_ended_freezes_simulation():
    print("\n=== 10: ENDED ignores ticks ===")
    s = _session(npc_count=1)
    _place_on_player(s, s.npc_eids[0])
    s.tick(DT, IDLE)
    check(s.is_ended(), "10a: ended")

    pos = s.player_position
    ticks = s.clock.ticks
    for _ in range(30):
        s.tick(DT, InputState(right=True, down=True))
    check(s.player_position == pos, "10b: player frozen", f"{s.player_position}")
    check(s.clock.ticks == ticks, "10c: clock frozen")
    check(s.bus.stats().get("SessionEnded") == 1, "10d: no repeated end event")


def test_restart():
    print("\n=== 11: restart() builds a fresh round ===")
    s = _session(npc_count=6)
    for _ in range(120):
        s.tick(DT, InputState(up=True))
    for eid in s.npc_eids:
        _place_on_player(s, eid)
    s.tick(DT, IDLE)
    check(s.is_ended(), "11a: first round over")

    fresh = s.restart()
    check(fresh is not s, "11b: restart returns a new session")
    check(fresh.state is SessionState.PLAYING, "11c: new session is PLAYING")
    check(len(fresh.npc_eids) == 6 and fresh.alive_count == 6, "11d: six NPCs alive")
    check(fresh.stain_positions == [], "11e: no stains")
    check(fresh.player_position == LAYOUT.rooms[0].center, "11f: player back at spawn")
    check(fresh.clock.ticks == 0, "11g: clock reset")
    check(fresh.layout is s.layout and fresh.walls == s.walls, "11h: same house")
    check(s.is_ended() and s.stain_count == 6, "11i: old session left as it was")
    check(fresh.world.res(DevLog) is not s.world.res(DevLog), "11j: fresh dev log")

    again = fresh.restart()
    check(again.alive_count == 6 and not again.is_ended(),
          "11k: restart also works mid-round")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("New session", test_new_session),
        ("Seeded spawns", test_seeded_spawns),
        ("npc_count", test_bad_npc_count),
        ("Single NPC", test_single_npc_scenario),
        ("Contact boundary", test_just_out_of_reach),
        ("Idempotent death", test_death_is_idempotent),
        ("Simultaneous kills", test_simultaneous_kills),
        ("Kill countdown", test_kill_countdown),
        ("Walking into NPC", test_walking_into_npc),
        ("Win condition", test_win_condition),
        ("ENDED freeze", test_ended_freezes_simulation),
        ("Restart", test_restart),
    ]

    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            pass  # already reported by check()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    print(f"\n{'=' * 60}")
    print(f"  Session Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
