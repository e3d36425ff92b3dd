"""World scroll offset."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Scroll:
    """Offset added to world coordinates when drawing."""

    x: float = 0.0
    y: float = 0.0

    def shift_x(self, dx: float) -> None:
        self.x += dx

    def shift_y(self, dy: float) -> None:
        self.y += dy