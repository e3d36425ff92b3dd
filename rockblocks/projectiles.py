"""Bullets fired by the player, by bosses and by ordinary enemies."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

import pygame

from .animation import TRANSPARENT
from .defs import OBJ_DEAD, OBJ_NOEVENT, PI, Direction, ObjId
from .gameobject import GameObject

_PLAYER_WEAPONS = "../Image/Rock_Man/player_weapon_all.bmp"
_BOSS_ELEC = "../Image/Rock_Man/boss_elec_all.bmp"
_ENEMIES = "../Image/Rock_Man/enemy_all.bmp"
_BOSS_FIRE = "../Image/Rock_Man/boss_fire_all.bmp"
_BOSS_FIRE_FLIP = "../Image/Rock_Man/boss_fire_all_flip.bmp"

# Sheet cell of the plain player shot.
_SHOT_SOURCE = (473, 616)
_SHOT_SIZE = (32, 31)


class BulletKind(Enum):
    """Which player weapon a bullet was configured as."""

    DEFAULT = "default"
    SKILL_ONE = "skill_one"
    SKILL_TWO = "skill_two"


def _insert_images(bitmaps, images) -> None:
    if bitmaps is None:
        return
    for path, key in images:
        try:
            bitmaps.insert(path, key)
        except FileNotFoundError:
            continue


def _blit_keyed(surface, image, dest, src, size) -> None:
    """Copy a sheet region onto the surface, leaving the key colour out."""
    area = pygame.Rect(int(src[0]), int(src[1]), int(size[0]), int(size[1]))
    area = area.clip(image.get_rect())
    if area.width <= 0 or area.height <= 0:
        return
    piece = image.subsurface(area).copy()
    piece.set_colorkey(TRANSPARENT)
    surface.blit(piece, (int(dest[0]), int(dest[1])))


def _find(bitmaps, key: str):
    return bitmaps.find(key) if bitmaps is not None else None


class Bullet(GameObject):
    """A shot travelling in a straight line at its angle (degrees, y up)."""

    IMAGES: tuple[tuple[str, str], ...] = ((_PLAYER_WEAPONS, "Bullet"),)
    IMAGE_KEY = "Bullet"

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        angle: float = 0.0,
        direction: Optional[Direction] = None,
        bitmaps=None,
    ) -> None:
        super().__init__()
        self.set_pos(x, y)
        self.angle = angle
        self.direction = direction
        self.bitmaps = bitmaps
        self.kind: Optional[BulletKind] = None

    def initialize(self) -> None:
        _insert_images(self.bitmaps, self.IMAGES)
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.speed = 5.0
        if self.direction is Direction.LEFT:
            self.speed *= -1

    def _advance(self) -> None:
        radians = self.angle * (PI / 180.0)
        self.info.x += self.speed * math.cos(radians)
        self.info.y -= self.speed * math.sin(radians)

    def update(self) -> int:
        if self.dead:
            return OBJ_DEAD
        self._advance()
        self.update_rect()
        return OBJ_NOEVENT

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        image = _find(bitmaps, self.IMAGE_KEY)
        if image is None:
            return
        dest = (self.rect.left + int(scroll.x), self.rect.top + int(scroll.y))
        _blit_keyed(surface, image, dest, _SHOT_SOURCE, _SHOT_SIZE)

    def as_default(self) -> None:
        self.info.cx = 20.0
        self.info.cy = 20.0
        self.speed = 10.0
        self.kind = BulletKind.DEFAULT

    def as_skill_one(self) -> None:
        self.info.cx = 40.0
        self.info.cy = 40.0
        self.speed = 15.0
        self.kind = BulletKind.SKILL_ONE

    def as_skill_two(self) -> None:
        self.info.cx = 20.0
        self.info.cy = 20.0
        self.rect.right = 50
        self.rect.left = 50
        self.speed = 20.0
        self.kind = BulletKind.SKILL_TWO


class NormalBullet(Bullet):
    """A bullet with no behaviour of its own: it neither moves nor draws."""

    IMAGES = ()

    def initialize(self) -> None:
        """Nothing to set up."""

    def update(self) -> int:
        return OBJ_NOEVENT

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        """Nothing to draw."""


class _FramedBullet(Bullet):
    """Bullet drawn from a cycling set of sheet cells at its top-left corner."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.frame: tuple[int, int] = (0, 0)
        self.counter = 0

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        image = _find(bitmaps, self.IMAGE_KEY)
        if image is None:
            return
        dest = (self.info.x + int(scroll.x), self.info.y + int(scroll.y))
        _blit_keyed(surface, image, dest, self.frame, (self.info.cx, self.info.cy))


class ElecBullet(_FramedBullet):
    """The electric boss's large bolt, cycling through seven frames."""

    IMAGES = ((_BOSS_ELEC, "Boss_Elec"),)
    IMAGE_KEY = "Boss_Elec"
    FRAMES = (
        (5, 90),
        (89, 90),
        (181, 89),
        (262, 90),
        (338, 90),
        (422, 92),
        (487, 90),
    )

    def initialize(self) -> None:
        _insert_images(self.bitmaps, self.IMAGES)
        self.info.cx = 77.0
        self.info.cy = 80.0
        self.speed = 5.0

    def late_update(self) -> None:
        self.counter += 1
        for index, limit in enumerate((5, 10, 15, 20, 25, 30)):
            if self.counter < limit:
                self.frame = self.FRAMES[index]
                return
        if self.counter < 40:
            self.frame = self.FRAMES[6]
            self.counter = 0


class SmallElecBullet(_FramedBullet):
    """A small electric spark fired by ordinary enemies."""

    IMAGES = ((_ENEMIES, "Enemy"),)
    IMAGE_KEY = "Enemy"
    FRAMES = ((882, 207), (882, 236))

    def initialize(self) -> None:
        _insert_images(self.bitmaps, self.IMAGES)
        self.info.cx = 50.0
        self.info.cy = 15.0
        self.speed = 3.0

    def late_update(self) -> None:
        self.counter += 1
        if self.counter < 3:
            self.frame = self.FRAMES[0]
        elif self.counter < 300:
            self.frame = self.FRAMES[1]
            self.counter = 0


class FireStorm(Bullet):
    """The fire boss's flame, launched sideways from above its spawn point."""

    IMAGES = (
        (_BOSS_FIRE, "Left_Fire1"),
        (_BOSS_FIRE, "Left_Fire2"),
        (_BOSS_FIRE, "Left_Fire3"),
        (_BOSS_FIRE_FLIP, "Right_Fire"),
    )

    def initialize(self) -> None:
        self.info.y -= 40.0
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.speed = 5.0
        self.angle = 5.0
        _insert_images(self.bitmaps, self.IMAGES)
        if self.direction is Direction.LEFT:
            self.speed *= -1

    def update(self) -> int:
        self.info.x += self.speed
        self.update_rect()
        return OBJ_NOEVENT

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        left = self.direction is Direction.LEFT
        image = _find(bitmaps, "Left_Fire2" if left else "Right_Fire")
        if image is None:
            return
        dest = (self.rect.left + int(scroll.x), self.rect.top + int(scroll.y))
        src = (308, 98) if left else (161, 2)
        size = (int(self.info.cx) + 15, int(self.info.cy) + 40)
        _blit_keyed(surface, image, dest, src, size)


class PlayerFireBullet(Bullet):
    """A player shot spawned at the player's centre, flying straight sideways."""

    IMAGES = ((_PLAYER_WEAPONS, "Player_Bullet"),)
    IMAGE_KEY = "Player_Bullet"

    def __init__(
        self,
        player: GameObject,
        direction: Optional[Direction] = None,
        bitmaps=None,
    ) -> None:
        super().__init__(direction=direction, bitmaps=bitmaps)
        self.player = player

    def initialize(self) -> None:
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.speed = 5.0
        self.info.x = self.player.info.x
        self.info.y = self.player.info.y
        if self.direction is Direction.LEFT:
            self.speed *= -1
        _insert_images(self.bitmaps, self.IMAGES)

    def update(self) -> int:
        self.info.x += self.speed
        self.update_rect()
        return OBJ_NOEVENT


class GuideBullet(GameObject):
    """A homing shot that steers toward the nearest living monster."""

    def __init__(self, objects, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__()
        self.objects = objects
        self.set_pos(x, y)

    def initialize(self) -> None:
        self.info.cx = 20.0
        self.info.cy = 20.0
        self.speed = 5.0

    def update(self) -> int:
        if self.dead:
            return OBJ_DEAD
        self.target = self.objects.target(ObjId.MONSTER, self)
        if self.target is not None:
            width = self.target.info.x - self.info.x
            height = self.target.info.y - self.info.y
            diagonal = math.hypot(width, height)
            if diagonal > 0:
                radian = math.acos(max(-1.0, min(1.0, width / diagonal)))
                if self.target.info.y > self.info.y:
                    radian = 2.0 * PI - radian
                self.angle = radian * (180.0 / PI)
        radians = self.angle * (PI / 180.0)
        self.info.x += self.speed * math.cos(radians)
        self.info.y -= self.speed * math.sin(radians)
        self.update_rect()
        return OBJ_NOEVENT

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        box = pygame.Rect(
            self.rect.left, self.rect.top, self.rect.width, self.rect.height
        )
        pygame.draw.ellipse(surface, (255, 255, 255), box)
        pygame.draw.ellipse(surface, (0, 0, 0), box, 1)