"""Window and main loop of the block editor."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Union

import pygame

from .bitmaps import BitmapStore
from .defs import WINCX, WINCY
from .editor import (
    DEFAULT_DATA_PATH,
    EDITOR_KEYS,
    KEY_CONTROL,
    KEY_DOWN,
    KEY_LEFT,
    KEY_LOAD,
    KEY_RIGHT,
    KEY_SAVE,
    KEY_UNDO,
    KEY_UP,
    MOUSE_LEFT,
    BlockEditor,
)
from .keys import KeyState
from .objects import ObjectManager
from .scroll import Scroll

KEY_ESCAPE = "escape"
FRAME_RATE = 100
TITLE = "BoxEditor"

_BACKGROUND = (255, 255, 255)

_PYGAME_KEYS = {
    KEY_LEFT: pygame.K_LEFT,
    KEY_RIGHT: pygame.K_RIGHT,
    KEY_UP: pygame.K_UP,
    KEY_DOWN: pygame.K_DOWN,
    KEY_CONTROL: pygame.K_LCTRL,
    KEY_SAVE: pygame.K_s,
    KEY_LOAD: pygame.K_l,
    KEY_UNDO: pygame.K_z,
    KEY_ESCAPE: pygame.K_ESCAPE,
    "1": pygame.K_1,
    "2": pygame.K_2,
    "3": pygame.K_3,
    "4": pygame.K_4,
    "5": pygame.K_5,
}


class EditorApp:
    """Ties the editor, the world and the input together frame by frame."""

    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        data_path: Union[str, Path] = DEFAULT_DATA_PATH,
        image_root: Union[str, Path, None] = None,
    ) -> None:
        self.surface = surface
        self.held: set[str] = set()
        self.status: Optional[str] = None
        self.objects = ObjectManager()
        self.scroll = Scroll()
        self.bitmaps = BitmapStore(image_root)
        self.keys = KeyState(lambda key: key in self.held, (*EDITOR_KEYS, KEY_ESCAPE))
        self.editor = BlockEditor(
            self.objects, self.scroll, self.keys, self.bitmaps, data_path
        )
        self.editor.initialize()

    def step(self, mouse: tuple[int, int]) -> bool:
        """Run one frame; returns False once the user asks to quit."""
        if self.keys.pressing(KEY_ESCAPE):
            return False
        try:
            self.editor.update(mouse)
        except (OSError, ValueError) as exc:
            self.status = f"Save or load failed: {exc}"
        self.objects.update()
        self.objects.late_update()
        self.keys.update()
        if self.surface is not None:
            self.render(self.surface)
        return True

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(_BACKGROUND)
        self.editor.render(surface)
        self.objects.render(surface, self.scroll, self.bitmaps)

    def _poll(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
        pressed = pygame.key.get_pressed()
        self.held = {name for name, code in _PYGAME_KEYS.items() if pressed[code]}
        if pygame.mouse.get_pressed()[0]:
            self.held.add(MOUSE_LEFT)
        return True

    def run(self) -> int:
        pygame.init()
        try:
            if self.surface is None:
                self.surface = pygame.display.set_mode((WINCX, WINCY))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while self._poll() and self.step(pygame.mouse.get_pos()):
                caption = TITLE if self.status is None else f"{TITLE} - {self.status}"
                pygame.display.set_caption(caption)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()
        return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="rockblocks", description="Tile block editor.")
    parser.add_argument(
        "--data", default=str(DEFAULT_DATA_PATH), help="block file to save and load"
    )
    parser.add_argument("--images", default=None, help="directory images are read from")
    args = parser.parse_args(argv)
    return EditorApp(data_path=args.data, image_root=args.images).run()


if __name__ == "__main__":
    raise SystemExit(main())