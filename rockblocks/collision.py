"""Collision tests and responses between game objects."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .defs import WINCY
from .gameobject import GameObject


def collide_rect(dst: Iterable[GameObject], src: Iterable[GameObject]) -> None:
    """Kill every pair of objects whose boxes overlap."""
    src = list(src)
    for a in dst:
        for b in src:
            if a.rect.intersection(b.rect) is not None:
                a.kill()
                b.kill()


def collide_circle(dst: Iterable[GameObject], src: Iterable[GameObject]) -> None:
    """Kill every pair of objects whose circles touch."""
    src = list(src)
    for a in dst:
        for b in src:
            if check_circle(a, b):
                a.kill()
                b.kill()


def check_circle(dst: GameObject, src: GameObject) -> bool:
    """True when the centres are no further apart than the sum of the radii."""
    radius = (dst.info.cx + src.info.cx) * 0.5
    return radius >= distance(dst, src)


def check_rect(dst: GameObject, src: GameObject) -> Optional[tuple[float, float]]:
    """Overlap depth along x and y, or None when the boxes are apart."""
    dx = abs(dst.info.x - src.info.x)
    dy = abs(dst.info.y - src.info.y)
    radius_x = (dst.info.cx + src.info.cx) * 0.5
    radius_y = (dst.info.cy + src.info.cy) * 0.5
    if radius_x >= dx and radius_y >= dy:
        return radius_x - dx, radius_y - dy
    return None


def collide_rect_push(dst: Iterable[GameObject], src: Iterable[GameObject]) -> None:
    """Push each dst object sideways out of every src object it overlaps."""
    src = list(src)
    for a in dst:
        for b in src:
            depth = check_rect(a, b)
            if depth is None:
                continue
            push_x = depth[0]
            if a.info.x < b.info.x:
                a.move(-push_x, 0.0)
            else:
                a.move(push_x, 0.0)
            a.update_rect()


def collide_box(player: GameObject, blocks: Iterable[GameObject]) -> None:
    """Push the player left or right out of any block it overlaps."""
    for block in blocks:
        overlap = player.rect.intersection(block.rect)
        if overlap is None:
            continue
        if player.info.x >= block.info.x:
            player.move(overlap.width, 0.0)
        else:
            player.move(-overlap.width, 0.0)
        player.update_rect()


def collide_boss_box(boss: GameObject, blocks: Iterable[GameObject]) -> None:
    """Stand the boss on top of any block it overlaps."""
    for block in blocks:
        overlap = boss.rect.intersection(block.rect)
        if overlap is None:
            continue
        boss.set_pos(boss.info.x, overlap.top - boss.info.cy * 0.5)
        boss.update_rect()


def _in_column(obj: GameObject, block: GameObject) -> bool:
    return block.rect.left - 10 <= obj.info.x < block.rect.right + 10


def ceiling_y(player: GameObject, blocks: Iterable[GameObject]) -> float:
    """Find the nearest block bottom above the player's head.

    Stores the centre height at which the head meets it in player.ceiling_y
    (0 when there is none) and returns it.
    """
    head = player.info.y - player.info.cy * 0.5
    found = 0.0
    best = float(WINCY)
    for block in blocks:
        if not _in_column(player, block):
            continue
        current = float(block.rect.bottom)
        gap = abs(current - head)
        if current <= head and best > gap:
            best = gap
            found = current
    player.ceiling_y = 0.0 if found == 0.0 else found + player.info.cy * 0.5
    return player.ceiling_y


def floor_y(player: GameObject, blocks: Iterable[GameObject]) -> float:
    """Find the nearest block top below the player's feet.

    Stores the centre height at which the feet rest on it in player.line_y
    (0 when there is none) and returns it.
    """
    foot = player.info.y + player.info.cy * 0.5
    found = 0.0
    best = float(WINCY)
    for block in blocks:
        if not _in_column(player, block):
            continue
        current = float(block.rect.top)
        gap = abs(current - foot)
        if current >= foot and best > gap:
            best = gap
            found = current
    player.line_y = 0.0 if found == 0.0 else found - player.info.cy * 0.5
    return player.line_y


def distance(a: GameObject, b: GameObject) -> float:
    """Straight-line distance between two object centres."""
    return math.hypot(a.info.x - b.info.x, a.info.y - b.info.y)