"""Enemies: the rising fire wall, the egg turret and the electric and fire bosses."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

import pygame

from .animation import TRANSPARENT
from .collision import distance as centre_distance
from .defs import OBJ_DEAD, OBJ_NOEVENT, Direction, ObjId
from .gameobject import GameObject
from .monster import Monster
from .projectiles import ElecBullet, FireStorm, SmallElecBullet

_BOSS_ELEC = "../Image/Rock_Man/boss_elec_all.bmp"
_BOSS_FIRE = "../Image/Rock_Man/boss_fire_all.bmp"
_ENEMIES = "../Image/Rock_Man/enemy_all.bmp"

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)


def _ticks() -> int:
    return int(time.monotonic() * 1000)


def _insert_image(bitmaps, path: str, key: str) -> None:
    if bitmaps is None:
        return
    try:
        bitmaps.insert(path, key)
    except FileNotFoundError:
        pass


def _find(bitmaps, key: str):
    return bitmaps.find(key) if bitmaps is not None else None


def _blit_keyed(surface, image, dest, src, size) -> None:
    """Copy a sheet region onto the surface, leaving the key colour out."""
    area = pygame.Rect(int(src[0]), int(src[1]), int(size[0]), int(size[1]))
    area = area.clip(image.get_rect())
    if area.width <= 0 or area.height <= 0:
        return
    piece = image.subsurface(area).copy()
    piece.set_colorkey(TRANSPARENT)
    surface.blit(piece, (int(dest[0]), int(dest[1])))


def _outlined_rect(surface, colour, left, top, right, bottom) -> None:
    box = pygame.Rect(int(left), int(top), int(right - left), int(bottom - top))
    box.normalize()
    pygame.draw.rect(surface, colour, box)
    pygame.draw.rect(surface, _BLACK, box, 1)


class BehaviourState(Enum):
    IDLE = "idle"
    ATTACK = "attack"
    CHASE = "chase"
    END = "end"


class FireWall(Monster):
    """A pillar of flame that rises, pauses, sinks and pauses again."""

    RISE = 96.0
    PAUSE_MS = 2000

    def __init__(self, clock: Callable[[], int] = _ticks) -> None:
        super().__init__()
        self._clock = clock
        self.idle = False
        self.orig_y = 0.0
        self.render_frame = 120
        self.moving_up = True
        self.frozen = False
        self.time = 0

    def initialize(self) -> None:
        self.set_pos(125.0, 532.0)
        self.set_size(50.0, 150.0)
        self.orig_y = self.info.y
        self.time = self._clock()

    def update(self) -> int:
        if self.frozen:
            return OBJ_DEAD
        if not self.idle:
            if self.moving_up:
                self.info.y -= 1.0
                if self.info.y <= self.orig_y - self.RISE:
                    self._turn(self.orig_y - self.RISE)
            else:
                self.info.y += 1.0
                if self.info.y >= self.orig_y:
                    self._turn(self.orig_y)
        elif self.time + self.PAUSE_MS < self._clock():
            self.idle = False
        self.update_rect()
        return OBJ_NOEVENT

    def _turn(self, y: float) -> None:
        self.moving_up = not self.moving_up
        self.idle = True
        self.info.y = y
        self.time = self._clock()

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        sx = int(scroll.x)
        _outlined_rect(
            surface,
            _WHITE,
            self.rect.left + sx,
            self.rect.top,
            self.rect.right + sx,
            self.rect.bottom,
        )


class EggMonster(Monster):
    """Patrols up and down and fires a pair of sparks when level with the player."""

    MOVE = (763, 209, 34, 40)
    ATTACK1 = (801, 203, 34, 50)
    ATTACK2 = (839, 185, 34, 86)
    SIGHT = 200.0

    def __init__(self, objects, bitmaps=None) -> None:
        super().__init__()
        self.objects = objects
        self.bitmaps = bitmaps
        self.state = BehaviourState.END
        self.frame: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.heading = 1.0
        self.min_y = 0.0
        self.max_y = 0.0
        self.counter = 0

    def initialize(self) -> None:
        self.set_pos(400.0, 600.0)
        self.set_size(34.0, 40.0)
        self.min_y = 200.0
        self.max_y = 500.0
        self.target = self.objects.player()
        _insert_image(self.bitmaps, _ENEMIES, "Enemy")
        self.speed = 1.0

    def update(self) -> int:
        if self.dead:
            return OBJ_DEAD
        self._patrol()
        if self.distance() < self.SIGHT:
            self.state = BehaviourState.ATTACK
        else:
            self.state = BehaviourState.IDLE
        self.update_rect()
        return OBJ_NOEVENT

    def late_update(self) -> None:
        if self.state is BehaviourState.IDLE:
            self.frame = self.MOVE
        elif self.state is BehaviourState.ATTACK:
            if self.frame == self.MOVE:
                self.counter += 1
                if self.counter >= 40:
                    self.frame = self.ATTACK1
                    self.counter = 0
            elif self.frame == self.ATTACK1:
                self.counter += 1
                if self.counter >= 20:
                    self.frame = self.ATTACK2
                    self.objects.add(ObjId.BULLET, self._spark(self.info.y - 35.0))
                    self.objects.add(ObjId.BULLET, self._spark(self.info.y + 35.0))
                    self.counter = 0
            elif self.frame == self.ATTACK2:
                self.counter += 1
                if self.counter >= 20:
                    self.frame = self.MOVE
                    self.counter = 0

    def distance(self) -> float:
        """Vertical distance to the player."""
        return abs(self.target.info.y - self.info.y)

    def _patrol(self) -> None:
        self.info.y -= self.speed * self.heading
        if self.info.y <= self.min_y:
            self.info.y = self.min_y
            self.heading = -1.0
        if self.info.y >= self.max_y:
            self.info.y = self.max_y
            self.heading = 1.0

    def _spark(self, y: float) -> SmallElecBullet:
        self.angle = 0.0 if self.target.info.x > self.info.x else 180.0
        spark = SmallElecBullet(bitmaps=self.bitmaps)
        spark.initialize()
        spark.set_pos(self.info.x, y)
        spark.angle = self.angle
        return spark

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        image = _find(bitmaps, "Enemy")
        if image is None:
            return
        x, y, cx, cy = self.frame
        dest = (self.info.x + int(scroll.x), self.info.y + int(scroll.y))
        _blit_keyed(surface, image, dest, (x, y), (cx, cy))


class _Boss(GameObject):
    """Boss with a maximum health and accumulated damage."""

    def __init__(self, objects, bitmaps=None) -> None:
        self.max_hp = 0.0
        self.damage = 0.0
        super().__init__()
        self.objects = objects
        self.bitmaps = bitmaps

    def _remaining(self) -> float:
        return self.max_hp - self.damage

    def _health_bar(self, surface: pygame.Surface) -> None:
        _outlined_rect(surface, _WHITE, 90, 80, 110, 200)
        _outlined_rect(surface, _RED, 90, 80, 110, 200 - self.damage)


class ElecMan(_Boss):
    """Chases the player from afar and throws bolts when close."""

    IDLE = (0, 0)
    ATTACK1 = (486, 0)
    ATTACK2 = (413, 0)
    CHASE = (280, 0)

    def __init__(self, objects, bitmaps=None) -> None:
        super().__init__(objects, bitmaps)
        self.attack_range = 0.0
        self.chase_range = 0.0
        self.state = BehaviourState.IDLE
        self.frame: tuple[int, int] = (0, 0)
        self.counter = 0

    def hp(self) -> float:
        """Remaining health."""
        return self._remaining()

    def initialize(self) -> None:
        self.target = self.objects.player()
        self.set_pos(300.0, 350.0)
        self.set_size(71.0, 71.0)
        self.attack_range = 150.0
        self.chase_range = 300.0
        self.max_hp = 100.0
        _insert_image(self.bitmaps, _BOSS_ELEC, "Boss_Elec")

    def update(self) -> int:
        gap = centre_distance(self.target, self)
        if self.attack_range < gap <= self.chase_range:
            self.state = BehaviourState.CHASE
            if self.info.x > self.target.info.x:
                self.info.x -= 3.0
            if self.info.x < self.target.info.x:
                self.info.x += 3.0
        elif gap <= self.attack_range:
            self.state = BehaviourState.ATTACK
        else:
            self.state = BehaviourState.IDLE
        self.update_rect()
        return OBJ_NOEVENT

    def late_update(self) -> None:
        if self.state is BehaviourState.IDLE:
            self.frame = self.IDLE
        elif self.state is BehaviourState.CHASE:
            self.frame = self.CHASE
        elif self.state is BehaviourState.ATTACK:
            if self.frame in (self.ATTACK1, self.CHASE):
                self.counter += 1
                if self.counter >= 30:
                    self.frame = self.ATTACK2
                    self.counter = 0
            elif self.frame == self.ATTACK2:
                self.counter += 1
                if self.counter >= 30:
                    self.objects.add(ObjId.BULLET, self._bolt())
                    self.frame = self.ATTACK1
                    self.counter = 0

    def _bolt(self) -> ElecBullet:
        bolt = ElecBullet(bitmaps=self.bitmaps)
        bolt.initialize()
        bolt.set_pos(self.info.x, self.info.y)
        bolt.angle = 0.0
        return bolt

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        image = _find(bitmaps, "Boss_Elec")
        if image is None:
            return
        _blit_keyed(surface, image, (self.info.x, self.info.y), self.frame, (71, 71))


class FireMan(_Boss):
    """Keeps its distance from the player and hurls flames at intervals."""

    KEEP_AWAY = 300.0
    FIRE_REACH = 1000.0
    FIRE_INTERVAL_MS = 800

    def __init__(
        self, objects, bitmaps=None, clock: Callable[[], int] = _ticks
    ) -> None:
        super().__init__(objects, bitmaps)
        self._clock = clock
        self.player: Optional[GameObject] = None
        self.last_fire = clock()
        self.boss_ground = True

    def hp(self) -> float:
        """Remaining health."""
        return self._remaining()

    def initialize(self) -> None:
        self.player = self.objects.player()
        _insert_image(self.bitmaps, _BOSS_FIRE, "Fire_Man")
        self.set_pos(3800.0, 2200.0)
        self.set_size(42.0, 48.0)
        self.speed = 3.0
        self.max_hp = 10.0

    def update(self) -> int:
        player = self.player
        if centre_distance(player, self) < self.KEEP_AWAY:
            if self.info.x < player.info.x:
                self.info.x -= self.speed
            else:
                self.info.x += self.speed
        else:
            reach = abs(self.info.x - player.info.x)
            now = self._clock()
            if reach <= self.FIRE_REACH and self.last_fire + self.FIRE_INTERVAL_MS < now:
                self.last_fire = now
                side = Direction.LEFT if self.info.x > player.info.x else Direction.RIGHT
                self.objects.add(ObjId.BULLET, self._flame(side))
        self.update_rect()
        return OBJ_NOEVENT

    def _flame(self, side: Direction) -> FireStorm:
        # Built like any positioned shot: the side is handed over as its angle.
        flame = FireStorm(bitmaps=self.bitmaps)
        flame.initialize()
        flame.set_pos(self.info.x, self.info.y)
        flame.angle = float(side)
        return flame

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        image = _find(bitmaps, "Fire_Man")
        if image is not None:
            dest = (
                self.rect.left + int(scroll.x),
                self.rect.top + int(scroll.y) - 29,
            )
            _blit_keyed(surface, image, dest, (51, 15), (68, 77))
        self._health_bar(surface)