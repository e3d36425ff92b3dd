"""Keyed store of loaded bitmap images."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pygame


class BitmapStore:
    """Loads each image once and hands it out by key."""

    def __init__(self, root: Union[str, Path, None] = None) -> None:
        self._root = Path(root) if root is not None else None
        self._images: dict[str, pygame.Surface] = {}

    def insert(self, path: Union[str, Path], key: str) -> None:
        """Load the file under the key unless the key is already taken."""
        if key in self._images:
            return
        full = Path(path)
        if self._root is not None and not full.is_absolute():
            full = self._root / full
        if not full.is_file():
            raise FileNotFoundError(f"bitmap not found: {full}")
        self._images[key] = pygame.image.load(str(full))

    def find(self, key: str) -> Optional[pygame.Surface]:
        return self._images.get(key)

    def release(self) -> None:
        self._images.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._images

    def __len__(self) -> int:
        return len(self._images)