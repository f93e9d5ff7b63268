"""Fog-of-war bookkeeping: which cells of each floor the player has seen."""

from __future__ import annotations

from typing import List

from .config import ConfigurationError


class VisibilityTracker:
    """One discovery grid per floor, indexed ``grids[floor][x][y]``.

    Flags only ever flip from False to True.
    """

    def __init__(self, width: int, height: int, floors: int = 1):
        if width < 1 or height < 1 or floors < 1:
            raise ConfigurationError("size", f"invalid tracker size {width}x{height}x{floors}")
        self.width = width
        self.height = height
        self.grids: List[List[List[bool]]] = [
            [[False for _ in range(height)] for _ in range(width)] for _ in range(floors)
        ]

    @classmethod
    def for_dungeon(cls, dungeon) -> "VisibilityTracker":
        return cls(dungeon.width, dungeon.height, dungeon.floor_count)

    def update(self, floor: int, px: int, py: int, radius: int) -> int:
        """Discover every cell within Manhattan ``radius`` of (px, py).

        Returns how many cells were newly discovered.
        """
        grid = self.grids[floor]
        newly = 0
        for x in range(self.width):
            for y in range(self.height):
                if abs(x - px) + abs(y - py) <= radius and not grid[x][y]:
                    grid[x][y] = True
                    newly += 1
        return newly

    def is_discovered(self, floor: int, x: int, y: int) -> bool:
        return self.grids[floor][x][y]

    def floor_grid(self, floor: int) -> List[List[bool]]:
        return self.grids[floor]

    def discovered_count(self, floor: int) -> int:
        return sum(1 for column in self.grids[floor] for seen in column if seen)


__all__ = ["VisibilityTracker"]
