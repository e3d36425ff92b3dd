"""Grid block editor: draw rows or columns of tiles, undo them, save and load them."""

from __future__ import annotations

import math
import struct
from pathlib import Path
from typing import Iterator, Optional, Union

import pygame

from .blocks import Block, create_block
from .defs import WINCX, BlockType, DrawDir, Info, ObjId
from .gameobject import Rect
from .keys import KeyState
from .objects import ObjectManager
from .scroll import Scroll

MOUSE_LEFT = "mouse_left"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_CONTROL = "lctrl"
KEY_SAVE = "S"
KEY_LOAD = "L"
KEY_UNDO = "Z"

TYPE_KEYS: dict[str, BlockType] = {
    "1": BlockType.ICE,
    "2": BlockType.FIRE,
    "3": BlockType.ELEC,
    "4": BlockType.CUT,
    "5": BlockType.GUT,
}

EDITOR_KEYS = (
    MOUSE_LEFT,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    KEY_DOWN,
    KEY_CONTROL,
    KEY_SAVE,
    KEY_LOAD,
    KEY_UNDO,
    *TYPE_KEYS,
)

DEFAULT_DATA_PATH = Path("../Data/Block.dat")

_TILE_IMAGES: dict[BlockType, tuple[str, str]] = {
    BlockType.ICE: ("../Image/Rock_Man/tile_ice.bmp", "Tile_Ice"),
    BlockType.FIRE: ("../Image/Rock_Man/tile_fire.bmp", "Tile_Fire"),
    BlockType.ELEC: ("../Image/Rock_Man/tile_elec.bmp", "Tile_Elec"),
    BlockType.CUT: ("../Image/Rock_Man/tile_cut.bmp", "Tile_Cut"),
    BlockType.GUT: ("../Image/Rock_Man/tile_gut.bmp", "Tile_Gut"),
}

# Where the palette preview of each tile type is cut from its sheet.
_PALETTE_SOURCE: dict[BlockType, tuple[int, int]] = {
    BlockType.ICE: (35, 163),
    BlockType.FIRE: (206, 3),
    BlockType.ELEC: (206, 3),
    BlockType.CUT: (206, 3),
    BlockType.GUT: (2, 3),
}

# One saved block: type, centre x, centre y, width, height.
_RECORD = struct.Struct("<i4f")

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)


def save_blocks(blocks, path: Union[str, Path]) -> None:
    """Write every block's type and placement to the file, replacing it."""
    with open(path, "wb") as stream:
        for block in blocks:
            info = block.info
            stream.write(
                _RECORD.pack(int(block.block_type), info.x, info.y, info.cx, info.cy)
            )


def load_blocks(path: Union[str, Path]) -> list[Block]:
    """Read blocks written by save_blocks; records of unknown type are skipped."""
    data = Path(path).read_bytes()
    if len(data) % _RECORD.size:
        raise ValueError(f"truncated block file: {path}")
    blocks: list[Block] = []
    for kind, x, y, cx, cy in _RECORD.iter_unpack(data):
        try:
            block_type = BlockType(kind)
        except ValueError:
            continue
        blocks.append(create_block(block_type, Info(x, y, cx, cy)))
    return blocks


def _snap(value: int, size: int) -> int:
    """Round toward zero to a multiple of size."""
    return math.trunc(value / size) * size


class BlockEditor:
    """Turns mouse strokes on a grid into rows or columns of blocks."""

    def __init__(
        self,
        objects: ObjectManager,
        scroll: Scroll,
        keys: KeyState,
        bitmaps=None,
        data_path: Union[str, Path] = DEFAULT_DATA_PATH,
    ) -> None:
        self.objects = objects
        self.scroll = scroll
        self.keys = keys
        self.bitmaps = bitmaps
        self.data_path = Path(data_path)
        self.head: tuple[int, int] = (0, 0)
        self.tail: tuple[int, int] = (0, 0)
        self.block_size = 0.0
        self.draw_dir = DrawDir.NONE
        self.undo_stack: list[list[Block]] = []
        self.width = 0
        self.height = 0
        self.block_type: Optional[BlockType] = None
        self.speed = 0.0

    def initialize(self) -> None:
        self.block_size = 50.0
        self.width = 50
        self.height = 50
        self.block_type = BlockType.ICE
        self.speed = 10.0
        if self.bitmaps is None:
            return
        for path, key in _TILE_IMAGES.values():
            try:
                self.bitmaps.insert(path, key)
            except FileNotFoundError:
                continue

    def update(self, mouse: tuple[int, int]) -> None:
        """Process one frame of input; mouse is in window coordinates."""
        keys = self.keys
        mx = int(mouse[0]) - int(self.scroll.x)
        my = int(mouse[1]) - int(self.scroll.y)
        size = int(self.block_size)

        if keys.down(MOUSE_LEFT) and self.head == (0, 0):
            self.head = (_snap(mx, size), _snap(my, size))

        if keys.pressing(MOUSE_LEFT):
            hx, hy = self.head
            if self.draw_dir is DrawDir.NONE:
                self.tail = (mx, my)
                if abs(hx - mx) > self.block_size:
                    self.draw_dir = DrawDir.HORIZONTAL
                if abs(hy - my) > self.block_size:
                    self.draw_dir = DrawDir.VERTICAL
            if self.draw_dir is DrawDir.HORIZONTAL:
                self.tail = (mx, hy)
            elif self.draw_dir is DrawDir.VERTICAL:
                self.tail = (hx, my)

        if keys.up(MOUSE_LEFT):
            self.commit_stroke()

        if keys.down(KEY_SAVE):
            self.save()
            return
        if keys.down(KEY_LOAD):
            self.load()
            return

        for key, block_type in TYPE_KEYS.items():
            if keys.down(key):
                self.block_type = block_type

        if keys.pressing(KEY_LEFT):
            self.scroll.shift_x(self.speed)
        if keys.pressing(KEY_RIGHT):
            self.scroll.shift_x(-self.speed)
        if keys.pressing(KEY_UP):
            self.scroll.shift_y(self.speed)
        if keys.pressing(KEY_DOWN):
            self.scroll.shift_y(-self.speed)

        if keys.down(KEY_UNDO) and self.undo_stack and keys.pressing(KEY_CONTROL):
            self.undo()

    def _stroke(self) -> tuple[int, bool]:
        """Number of whole cells between head and tail, and whether tail is ahead."""
        (hx, hy), (tx, ty) = self.head, self.tail
        if self.draw_dir is DrawDir.HORIZONTAL:
            dist, forward = abs(hx - tx), hx < tx
        elif self.draw_dir is DrawDir.VERTICAL:
            dist, forward = abs(hy - ty), hy < ty
        else:
            dist, forward = 0, False
        return int(dist / self.block_size), forward

    def _centres(self) -> Iterator[tuple[float, float]]:
        count, forward = self._stroke()
        hx, hy = self.head
        size = self.block_size
        half = size * 0.5
        if count == 0:
            yield hx + half, hy + half
            return
        sign = 1 if forward else -1
        for i in range(count):
            offset = sign * (half + i * size)
            if self.draw_dir is DrawDir.HORIZONTAL:
                yield hx + offset, hy + half
            else:
                yield hx + half, hy + offset

    def commit_stroke(self) -> list[Block]:
        """Place the blocks of the current stroke and record them as one undo step."""
        size = self.block_size
        placed: list[Block] = []
        for x, y in self._centres():
            block = self.create_block(Info(x, y, size, size))
            self.objects.add(ObjId.BLOCK, block)
            placed.append(block)
        self.undo_stack.append(placed)
        self.head = (0, 0)
        self.tail = (0, 0)
        self.draw_dir = DrawDir.NONE
        return placed

    def preview_cells(self) -> list[Rect]:
        """World-space boxes of the cells the current stroke would fill."""
        count, forward = self._stroke()
        hx, hy = self.head
        size = self.block_size
        cells: list[Rect] = []
        for i in range(count):
            near = i * size if forward else -(i + 1) * size
            if self.draw_dir is DrawDir.HORIZONTAL:
                left, top = hx + near, hy
            else:
                left, top = hx, hy + near
            cells.append(
                Rect(int(left), int(top), int(left + size), int(top + size))
            )
        return cells

    def create_block(self, info: Info) -> Block:
        """Build a block of the selected type."""
        return create_block(self.block_type, info)

    def undo(self) -> list[Block]:
        """Remove the most recent stroke's blocks; returns them, or [] if none."""
        if not self.undo_stack:
            return []
        group = self.undo_stack.pop()
        for block in group:
            block.kill()
        return group

    def save(self, path: Union[str, Path, None] = None) -> None:
        save_blocks(self.objects.objects(ObjId.BLOCK), path or self.data_path)

    def load(self, path: Union[str, Path, None] = None) -> list[Block]:
        """Add the blocks stored in the file to the world."""
        blocks = load_blocks(path or self.data_path)
        for block in blocks:
            self.objects.add(ObjId.BLOCK, block)
        return blocks

    def render(self, surface: pygame.Surface) -> None:
        sx, sy = self.scroll.x, self.scroll.y
        size = self.block_size
        for i in range(self.width):
            x = int(i * size + sx)
            pygame.draw.line(
                surface, _BLACK, (x, int(sy)), (x, int(self.height * size + sy))
            )
        for i in range(self.height):
            y = int(i * size + sy)
            pygame.draw.line(
                surface, _BLACK, (int(sx), y), (int(self.width * size + sx), y)
            )

        bar = pygame.Rect(0, 0, WINCX, int(size * 1.5))
        pygame.draw.rect(surface, _WHITE, bar)
        pygame.draw.rect(surface, _BLACK, bar, 1)

        if self.bitmaps is not None and self.block_type is not None:
            image = self.bitmaps.find(_TILE_IMAGES[self.block_type][1])
            if image is not None:
                src_x, src_y = _PALETTE_SOURCE[self.block_type]
                surface.blit(
                    image, (0, 0), pygame.Rect(src_x, src_y, int(size), int(size))
                )

        ox, oy = int(sx), int(sy)
        for cell in self.preview_cells():
            box = pygame.Rect(cell.left + ox, cell.top + oy, cell.width, cell.height)
            pygame.draw.rect(surface, _WHITE, box)
            pygame.draw.rect(surface, _BLACK, box, 1)