"""components.dev_log — Structured session event log.

A ring-buffer resource that records timestamped kills and session
transitions.  The Tab debug overlay reads the tail of it so the
developer can see what happened this session and when.

Usage:
    log = world.res(DevLog)
    log.record(eid, "contact", "killed", t=clock.time,
               details={"x": 140.0, "y": 220.0})

Each entry is a dict:
    {"t": float, "eid": int, "name": str, "cat": str,
     "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring-buffer of session events for the debug overlay."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 200

    def record(self, eid: int, cat: str, msg: str, *,
               name: str = "", t: float = 0.0,
               details: dict | None = None) -> None:
        self.entries.append({
            "t": t,
            "eid": eid,
            "name": name,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def recent(self, n: int = 8) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    @staticmethod
    def format(entry: dict) -> str:
        """One-line rendering used by the overlay and console."""
        who = entry["name"] or f"#{entry['eid']}"
        return f"{entry['t']:7.2f}s [{entry['cat']}] {who}: {entry['msg']}"
