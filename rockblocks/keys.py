"""Edge-detecting keyboard and mouse button state."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable

from .defs import VK_MAX


class KeyState:
    """Tracks press and release edges on top of a live "is held" probe."""

    def __init__(
        self,
        probe: Callable[[Hashable], bool],
        keys: Iterable[Hashable] = range(VK_MAX),
    ) -> None:
        self._probe = probe
        self._keys = tuple(keys)
        self._latched: set[Hashable] = set()

    def pressing(self, key: Hashable) -> bool:
        """True while the key is held."""
        return bool(self._probe(key))

    def down(self, key: Hashable) -> bool:
        """True once when the key goes from released to held."""
        if key not in self._latched and self.pressing(key):
            self._latched.add(key)
            return True
        return False

    def up(self, key: Hashable) -> bool:
        """True once when the key goes from held to released."""
        if key in self._latched and not self.pressing(key):
            self._latched.discard(key)
            return True
        return False

    def update(self) -> None:
        """Bring every tracked key's latch in line with its live state."""
        for key in self._keys:
            if self.pressing(key):
                self._latched.add(key)
            else:
                self._latched.discard(key)