# rockblocks

A grid-based tile block editor for a side-scrolling action game, together
with the game objects it works with: blocks, bullets, monsters and bosses,
collision helpers and sprite-sheet animation. Everything draws through
pygame.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## The editor

Start the editor with:

```
rockblocks
```

Options:

- `--data PATH`: the block file that `S` saves to and `L` loads from
  (default `../Data/Block.dat`).
- `--images DIR`: the directory the tile images are read from. Image paths
  such as `../Image/Rock_Man/tile_ice.bmp` are taken relative to this
  directory, or to the current directory when it is not given.

An 800 × 600 window shows a 50 × 50 grid of 50-pixel cells, a bar along the
top and, in its corner, a preview of the selected tile. Controls:

| Input              | Action                                           |
|--------------------|--------------------------------------------------|
| Left mouse drag    | Lay a horizontal or vertical run of blocks       |
| `1` – `5`          | Choose the block type: ice, fire, elec, cut, gut |
| Arrow keys         | Scroll the view                                  |
| `Ctrl` + `Z`       | Undo the last run of blocks                      |
| `S`                | Save the blocks                                  |
| `L`                | Load saved blocks and add them to the world      |
| `Esc`              | Quit                                             |

Pressing the button fixes the start of a run at the corner of the cell under
the cursor. The run locks to a direction once the cursor is more than one
cell away from that corner; while dragging, the cells it would fill are
outlined. Releasing the button places one block per whole cell covered; a
click, or a drag shorter than a cell, places a single block. Each release is
one undo step.

If a save or load fails, the message is shown in the window title. A tile
image that cannot be found is skipped, and blocks of that type are then not
drawn; the grid and the outlines still are.

### Block file format

A block file is a sequence of 20-byte little-endian records, one per block:
the block type as a 32-bit integer (0 ice, 1 fire, 2 elec, 3 cut, 4 gut)
followed by the centre x, centre y, width and height as 32-bit floats.
`load_blocks` raises `ValueError` for a file whose length is not a whole
number of records and skips records of an unknown type.

## Using the pieces

Blocks can be built, saved and read back directly:

```python
from rockblocks.blocks import create_block
from rockblocks.defs import BlockType, Info
from rockblocks.editor import load_blocks, save_blocks

block = create_block(BlockType.FIRE, Info(125.0, 75.0, 50.0, 50.0))
save_blocks([block], "blocks.dat")
restored = load_blocks("blocks.dat")
```

`BlockEditor` can be driven without a window. `KeyState` takes a function
that tells whether a key is held:

```python
from rockblocks.defs import ObjId
from rockblocks.editor import MOUSE_LEFT, BlockEditor
from rockblocks.keys import KeyState
from rockblocks.objects import ObjectManager
from rockblocks.scroll import Scroll

held = set()
keys = KeyState(lambda key: key in held, [MOUSE_LEFT])
objects = ObjectManager()
editor = BlockEditor(objects, Scroll(), keys)
editor.initialize()

held.add(MOUSE_LEFT)
editor.update((120, 80))      # run starts at cell corner (100, 50)
editor.update((320, 80))      # locks horizontal
held.discard(MOUSE_LEFT)
editor.update((320, 80))      # places four blocks
assert len(objects.objects(ObjId.BLOCK)) == 4

editor.undo()                 # marks the four blocks dead
objects.update()              # and this removes them
```

Other modules:

- `rockblocks.defs`: window size, the `ObjId`, `BlockType`, `Direction` and
  other enumerations, and the `Info`, `LinePoint`, `Line` and `Box` records.
- `rockblocks.gameobject`: `GameObject` and `Rect`, the base every object
  builds on.
- `rockblocks.objects`: `ObjectManager`, which holds objects by `ObjId`,
  updates them, drops the dead ones and finds the nearest one of a kind.
- `rockblocks.bitmaps`: `BitmapStore`, which loads each image once by key.
- `rockblocks.scroll` and `rockblocks.keys`: the view offset and
  press/release edge detection.
- `rockblocks.collision`: rectangle and circle overlap, push-out responses,
  and floor and ceiling lookups against blocks.
- `rockblocks.animation`: `Animation` and `AnimationStore` for frames cut
  from a sprite sheet.
- `rockblocks.projectiles`: player shots, boss and enemy bolts, the fire
  boss's flame and a homing `GuideBullet`.
- `rockblocks.monster` and `rockblocks.enemies`: a plain `Monster`, the
  rising `FireWall`, the `EggMonster` turret and the `ElecMan` and `FireMan`
  bosses. `EggMonster`, `ElecMan` and `FireMan` need an object stored under
  `ObjId.PLAYER`; `ObjectManager.player()` raises `LookupError` without one.

## What it does not do

The only command is the editor. There is no playable game: the package has
no player character, no level loop and no screen that runs the enemies,
bosses and projectiles. They are objects to be placed in an `ObjectManager`
and stepped by your own code.