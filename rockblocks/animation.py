"""Frame-strip sprite animations and a keyed store of them."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

from .defs import Info
from .gameobject import GameObject

TRANSPARENT = (128, 0, 128)


def _ticks() -> int:
    return int(time.monotonic() * 1000)


@dataclass
class FramePoint:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Frame:
    """One cell of a sprite sheet and where it is drawn."""

    img_lt: FramePoint = field(default_factory=FramePoint)
    pos_lt: FramePoint = field(default_factory=FramePoint)
    size: FramePoint = field(default_factory=FramePoint)
    target_info: Info = field(default_factory=Info)
    duration: int = 0
    max_frame: int = 0


class Animation:
    """A looping sequence of frames cut from one image."""

    def __init__(
        self,
        image: Optional[pygame.Surface] = None,
        now: Optional[int] = None,
        clock: Callable[[], int] = _ticks,
    ) -> None:
        self.frames: list[Frame] = []
        self.current = 0
        self._clock = clock
        self.time = clock() if now is None else now
        self._image: Optional[pygame.Surface] = None
        self.image = image

    @property
    def image(self) -> Optional[pygame.Surface]:
        return self._image

    @image.setter
    def image(self, image: Optional[pygame.Surface]) -> None:
        if image is None:
            self._image = None
            return
        keyed = image.copy()
        keyed.set_colorkey(TRANSPARENT)
        self._image = keyed

    def build(
        self,
        img_lt: FramePoint,
        size: FramePoint,
        target_info: Info,
        duration: int,
        max_frame: int,
    ) -> None:
        """Append max_frame frames laid side by side along the sheet's top row."""
        for i in range(max_frame):
            self.frames.append(
                Frame(
                    img_lt=FramePoint(img_lt.x + i * size.x, 0.0),
                    pos_lt=FramePoint(
                        target_info.x - size.x * 0.5,
                        target_info.y + target_info.cy * 0.5 - size.y,
                    ),
                    size=FramePoint(size.x, size.y),
                    target_info=target_info,
                    duration=duration,
                    max_frame=max_frame,
                )
            )

    def edit_frame(self, img_lt: FramePoint, size: FramePoint, index: int) -> None:
        """Replace the sheet cell of one frame; indices past the end are ignored."""
        if index < 0:
            raise IndexError(f"negative frame index: {index}")
        if not self.frames or index >= self.frames[0].max_frame:
            return
        frame = self.frames[index]
        frame.img_lt = FramePoint(img_lt.x, img_lt.y)
        frame.size = FramePoint(size.x, size.y)

    def advance(self, now: Optional[int] = None) -> int:
        """Step to the next frame once the current one has lasted long enough."""
        if not self.frames:
            return self.current
        now = self._clock() if now is None else now
        if self.time + self.frames[self.current].duration < now:
            self.current += 1
            if self.current == self.frames[0].max_frame:
                self.current = 0
            self.time = now
        return self.current

    def place(self, target: GameObject) -> Frame:
        """Anchor the current frame centred on the target and resting on its bottom."""
        frame = self.frames[self.current]
        frame.pos_lt = FramePoint(
            target.info.x - frame.size.x * 0.5,
            target.info.y + target.info.cy * 0.5 - frame.size.y,
        )
        return frame

    def render(
        self,
        surface: pygame.Surface,
        target: GameObject,
        scroll,
        now: Optional[int] = None,
    ) -> None:
        if not self.frames:
            return
        frame = self.place(target)
        if self.current >= self.frames[0].max_frame:
            return
        if self._image is not None:
            area = pygame.Rect(
                int(frame.img_lt.x),
                int(frame.img_lt.y),
                int(frame.size.x),
                int(frame.size.y),
            )
            dest = (
                int(frame.pos_lt.x + int(scroll.x)),
                int(frame.pos_lt.y + int(scroll.y)),
            )
            surface.blit(self._image, dest, area)
        self.advance(now)


class AnimationStore:
    """Animations by key; the first one stored under a key wins."""

    def __init__(self) -> None:
        self._animations: dict[str, Animation] = {}

    def insert(self, key: str, animation: Animation) -> None:
        self._animations.setdefault(key, animation)

    def find(self, key: str) -> Optional[Animation]:
        return self._animations.get(key)

    def edit(self, key: str, img_lt: FramePoint, size: FramePoint, index: int) -> None:
        animation = self._animations.get(key)
        if animation is not None:
            animation.edit_frame(img_lt, size, index)

    def render(
        self,
        surface: pygame.Surface,
        key: str,
        target: GameObject,
        scroll,
        now: Optional[int] = None,
    ) -> None:
        animation = self._animations.get(key)
        if animation is not None:
            animation.render(surface, target, scroll, now)

    def release(self) -> None:
        self._animations.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._animations

    def __len__(self) -> int:
        return len(self._animations)