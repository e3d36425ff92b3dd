"""Shared constants, enumerations and small geometry records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

WINCX = 800
WINCY = 600

PI = 3.141592

OBJ_NOEVENT = 0
OBJ_DEAD = 1

VK_MAX = 0xFF


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    LU = 4
    RU = 5


class DrawPoint(IntEnum):
    HEAD = 0
    TAIL = 1


class DrawDir(IntEnum):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class BlockType(IntEnum):
    ICE = 0
    FIRE = 1
    ELEC = 2
    CUT = 3
    GUT = 4


class BossType(IntEnum):
    CUTMAN = 0
    FIREMAN = 1
    ELECMAN = 2
    ICEMAN = 3
    GUTSMAN = 4


class ObjId(IntEnum):
    PLAYER = 0
    BULLET = 1
    MONSTER = 2
    MOUSE = 3
    SHIELD = 4
    BUTTON = 5
    BLOCK = 6


@dataclass
class Info:
    """Centre position and size of an object."""

    x: float = 0.0
    y: float = 0.0
    cx: float = 0.0
    cy: float = 0.0


@dataclass
class LinePoint:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Line:
    left: LinePoint = field(default_factory=LinePoint)
    right: LinePoint = field(default_factory=LinePoint)


@dataclass
class Box:
    """Four corners of an axis-aligned square."""

    lt: LinePoint = field(default_factory=LinePoint)
    rt: LinePoint = field(default_factory=LinePoint)
    lb: LinePoint = field(default_factory=LinePoint)
    rb: LinePoint = field(default_factory=LinePoint)

    @classmethod
    def from_center(cls, center: LinePoint, size: float) -> "Box":
        half = size * 0.5
        return cls(
            lt=LinePoint(center.x - half, center.y - half),
            rt=LinePoint(center.x + half, center.y - half),
            lb=LinePoint(center.x - half, center.y + half),
            rb=LinePoint(center.x + half, center.y + half),
        )