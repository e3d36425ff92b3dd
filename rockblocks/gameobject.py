"""Base game object with a centre/size record and a derived bounding box."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from .defs import OBJ_DEAD, OBJ_NOEVENT, BossType, Direction, Info, ObjId


@dataclass
class Rect:
    """Integer bounding box; right and bottom are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        """Return the overlapping box, or None when the boxes do not overlap."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left >= right or top >= bottom:
            return None
        return Rect(left, top, right, bottom)


class GameObject:
    """Something that lives in the world, updates each frame and can be drawn."""

    def __init__(self) -> None:
        self.info = Info()
        self.rect = Rect()
        self.speed = 0.0
        self.angle = 0.0
        self.distance = 0.0
        self.dead = False
        self.direction: Optional[Direction] = None
        self.target: Optional[GameObject] = None
        self.obj_id: Optional[ObjId] = None
        self.line_y = 0.0
        self.ceiling_y = 0.0
        self.jumping = False
        self.jump_power = 0.0
        self.time = 0.0
        self.hold_bullet = False
        self.ground = False
        self.hp = 0
        self.boss_type: Optional[BossType] = None

    @property
    def point(self) -> tuple[int, int]:
        return int(self.info.x), int(self.info.y)

    def update_rect(self) -> None:
        info = self.info
        self.rect = Rect(
            int(info.x - info.cx * 0.5),
            int(info.y - info.cy * 0.5),
            int(info.x + info.cx * 0.5),
            int(info.y + info.cy * 0.5),
        )

    def set_pos(self, x: float, y: float) -> None:
        self.info.x = x
        self.info.y = y

    def set_size(self, cx: float, cy: float) -> None:
        self.info.cx = cx
        self.info.cy = cy

    def move(self, dx: float, dy: float) -> None:
        self.info.x += dx
        self.info.y += dy

    def kill(self) -> None:
        self.dead = True

    def initialize(self) -> None:
        """Set up size and state; subclasses fill this in."""

    def update(self) -> int:
        if self.dead:
            return OBJ_DEAD
        self.update_rect()
        return OBJ_NOEVENT

    def late_update(self) -> None:
        """Hook run after every object has updated."""

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        """Draw the bounding box as a white rectangle with a black outline."""
        box = pygame.Rect(
            self.rect.left + int(scroll.x),
            self.rect.top + int(scroll.y),
            self.rect.width,
            self.rect.height,
        )
        pygame.draw.rect(surface, (255, 255, 255), box)
        pygame.draw.rect(surface, (0, 0, 0), box, 1)

    def release(self) -> None:
        """Free anything the object holds."""

    def on_collision(self, other: "GameObject", obj_id: ObjId) -> None:
        """React to touching another object."""