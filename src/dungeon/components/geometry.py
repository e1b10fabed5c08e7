from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Integer coordinate; grid cells before placement, pixels after."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned pixel rectangle in room space, origin at the top-left."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height
