"""Tile blocks of each element type and the factory that builds them."""

from __future__ import annotations

import pygame

from .defs import BlockType, Info, ObjId
from .gameobject import GameObject


class Block(GameObject):
    """A square tile drawn from a region of its sheet image."""

    IMAGE_KEY = "Block"
    IMAGE_PATH = "../Image/maja2.bmp"
    SOURCE_POS = (0, 0)
    SCROLLS_Y = False
    BLOCK_TYPE = BlockType.ICE

    def __init__(self) -> None:
        super().__init__()
        self.block_type = self.BLOCK_TYPE

    def initialize(self) -> None:
        self.info.cx = 50.0
        self.info.cy = 50.0
        self.block_type = self.BLOCK_TYPE

    def render(self, surface: pygame.Surface, scroll, bitmaps) -> None:
        image = bitmaps.find(self.IMAGE_KEY) if bitmaps is not None else None
        if image is None:
            return
        dx = self.rect.left + int(scroll.x)
        dy = self.rect.top + (int(scroll.y) if self.SCROLLS_Y else 0)
        sx, sy = self.SOURCE_POS
        area = pygame.Rect(sx, sy, int(self.info.cx), int(self.info.cy))
        surface.blit(image, (dx, dy), area)


class IceBlock(Block):
    IMAGE_KEY = "Tile_Ice"
    IMAGE_PATH = "../Image/Rock_Man/tile_ice.bmp"
    SOURCE_POS = (35, 163)
    SCROLLS_Y = True
    BLOCK_TYPE = BlockType.ICE


class FireBlock(Block):
    IMAGE_KEY = "Tile_Fire"
    IMAGE_PATH = "../Image/Rock_Man/tile_fire.bmp"
    SOURCE_POS = (30, 30)
    SCROLLS_Y = True
    BLOCK_TYPE = BlockType.FIRE


class ElecBlock(Block):
    IMAGE_KEY = "Tile_Elec"
    IMAGE_PATH = "../Image/Rock_Man/tile_elec.bmp"
    SOURCE_POS = (206, 3)
    SCROLLS_Y = True
    BLOCK_TYPE = BlockType.ELEC


class CutBlock(Block):
    IMAGE_KEY = "Tile_Cut"
    IMAGE_PATH = "../Image/Rock_Man/tile_cut.bmp"
    SOURCE_POS = (206, 3)
    SCROLLS_Y = True
    BLOCK_TYPE = BlockType.CUT


class GutBlock(Block):
    IMAGE_KEY = "Tile_Gut"
    IMAGE_PATH = "../Image/Rock_Man/tile_gut.bmp"
    SOURCE_POS = (2, 3)
    SCROLLS_Y = True
    BLOCK_TYPE = BlockType.GUT


_CLASSES: dict[BlockType, type[Block]] = {
    BlockType.ICE: IceBlock,
    BlockType.FIRE: FireBlock,
    BlockType.ELEC: ElecBlock,
    BlockType.CUT: CutBlock,
    BlockType.GUT: GutBlock,
}


def block_class(block_type: BlockType) -> type[Block]:
    try:
        return _CLASSES[BlockType(block_type)]
    except ValueError:
        raise ValueError(f"unknown block type: {block_type!r}") from None


def create_block(block_type: BlockType, info: Info) -> Block:
    """Build and initialise a block of the given type at the given place and size."""
    block = block_class(block_type)()
    block.initialize()
    block.set_pos(info.x, info.y)
    block.set_size(info.cx, info.cy)
    block.obj_id = ObjId.BLOCK
    return block