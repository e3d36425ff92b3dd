"""A plain enemy drawn as a red square."""

from __future__ import annotations

import pygame

from .gameobject import GameObject

_RED = (255, 0, 0)
_BLACK = (0, 0, 0)


class Monster(GameObject):
    """Square enemy that does nothing but stand and be drawn."""

    def __init__(self, x: float = 0.0, y: float = 0.0, size: float = 0.0) -> None:
        super().__init__()
        self.set_pos(x, y)
        self.set_size(size, size)

    def initialize(self) -> None:
        self.info.cx = 50.0
        self.info.cy = 50.0

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        box = pygame.Rect(
            self.rect.left + int(scroll.x),
            self.rect.top + int(scroll.y),
            self.rect.width,
            self.rect.height,
        )
        pygame.draw.rect(surface, _RED, box)
        pygame.draw.rect(surface, _BLACK, box, 1)