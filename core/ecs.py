"""
core/ecs.py — Entity-Component-System

Entities are ints. Components are any object, stored by type.
Query by component types to get matching entities.

    w = World()
    e = w.spawn()
    w.add(e, Body(120.0, 200.0, 14.0))
    w.add(e, Npc())

    for eid, body, npc in w.query(Body, Npc):
        if npc.alive:
            body.x += 1

Iteration order is spawn order, so systems that walk a query are
deterministic for a given sequence of spawns.
"""

from __future__ import annotations
from typing import Any, Iterator


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return eid in self._stores.get(comp_type, {})

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for entities that have ALL types."""
        if not types:
            return
        first = self._stores.get(types[0], {})
        rest = [self._stores.get(t, {}) for t in types[1:]]
        # Copy keys so systems may spawn while iterating
        for eid in list(first):
            if eid < 0:
                continue
            if all(eid in s for s in rest):
                yield (eid, first[eid], *(s[eid] for s in rest))

    def count(self, comp_type: type) -> int:
        return sum(1 for _ in self.query(comp_type))

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        self._stores.setdefault(type(resource), {})[-1] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(-1)

