"""Owner of every live game object, grouped by kind."""

from __future__ import annotations

import math
from typing import Optional

from .defs import OBJ_DEAD, ObjId
from .gameobject import GameObject


class ObjectManager:
    """Holds one list of objects per ObjId and drives them each frame."""

    def __init__(self) -> None:
        self._lists: dict[ObjId, list[GameObject]] = {obj_id: [] for obj_id in ObjId}

    def add(self, obj_id: ObjId, obj: Optional[GameObject]) -> None:
        if obj is None:
            return
        self._lists[ObjId(obj_id)].append(obj)

    def objects(self, obj_id: ObjId) -> list[GameObject]:
        return self._lists[ObjId(obj_id)]

    def player(self) -> GameObject:
        players = self._lists[ObjId.PLAYER]
        if not players:
            raise LookupError("no player object")
        return players[0]

    def target(self, obj_id: ObjId, origin: GameObject) -> Optional[GameObject]:
        """Nearest living object of the given kind, or None."""
        best: Optional[GameObject] = None
        best_distance = 0.0
        for candidate in self._lists[ObjId(obj_id)]:
            if candidate.dead:
                continue
            d = math.hypot(
                origin.info.x - candidate.info.x, origin.info.y - candidate.info.y
            )
            if best is None or best_distance > d:
                best = candidate
                best_distance = d
        return best

    def update(self) -> int:
        for bucket in self._lists.values():
            gone: set[int] = set()
            for obj in list(bucket):
                if obj.update() == OBJ_DEAD:
                    obj.release()
                    gone.add(id(obj))
            if gone:
                bucket[:] = [obj for obj in bucket if id(obj) not in gone]
        return 0

    def late_update(self) -> None:
        for bucket in self._lists.values():
            for obj in bucket:
                obj.late_update()
        for bucket in self._lists.values():
            for obj in bucket:
                obj.update_rect()

    def render(self, surface, scroll, bitmaps) -> None:
        for bucket in self._lists.values():
            for obj in bucket:
                obj.render(surface, scroll, bitmaps)

    def release(self) -> None:
        for bucket in self._lists.values():
            for obj in bucket:
                obj.release()
            bucket.clear()