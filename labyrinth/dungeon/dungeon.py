"""Multi-floor dungeon: a stack of mazes linked by staircases.

High-level generation phases:
    * Generate one ``Maze`` per floor from a shared RNG (spanning tree + secret doors).
    * For every adjacent floor pair draw one (x, y) uniformly; mark it as the
      down staircase on the upper floor and the up staircase on the lower one.

Staircase coordinates ignore maze topology, so a staircase may only be
reachable after a secret door is found. Pairs are drawn independently, so one
cell can end up holding both an up and a down staircase.

Public contract consumed elsewhere:
    Dungeon(config: DungeonConfig) OR Dungeon(seed=..., size=(W, H, floors))
    Attributes: floors, current_floor, config, seed, size, stair_pairs, metrics
"""

from __future__ import annotations

import dataclasses
import random
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .cells import Coord2D
from .config import DungeonConfig
from .maze import Maze

_log = get_logger("dungeon")


class Dungeon:
    def __init__(
        self,
        config: DungeonConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int, int] | None = None,
        rng: Optional[random.Random] = None,
    ):
        # Accept either a config object or the short (seed, size) call style.
        # Overrides and a drawn seed go into a copy; the caller's config is reused as-is.
        overrides: Dict[str, Any] = {}
        if seed is not None:
            overrides["seed"] = seed
        if size is not None:
            if len(size) >= 2:
                overrides["width"], overrides["height"] = size[0], size[1]
            if len(size) >= 3:
                overrides["floors"] = size[2]
        config = dataclasses.replace(config or DungeonConfig(), **overrides)
        self.config = config.validate()
        if rng is None:
            if self.config.seed is None:
                self.config.seed = random.randint(0, 2**31 - 1)
            rng = random.Random(self.config.seed)
        self._rng = rng
        self.seed = self.config.seed
        self.size = (self.config.width, self.config.height, self.config.floors)
        self.floors: List[Maze] = [
            Maze(
                self.config.width,
                self.config.height,
                self._rng,
                start=self.config.start,
                secret_door_chance=self.config.secret_door_chance,
            )
            for _ in range(self.config.floors)
        ]
        self.stair_pairs: List[Coord2D] = []
        self._place_staircases()
        self.current_floor = 0
        self.metrics: Dict[str, Any] = {}
        self._collect_metrics()
        _log.info(
            event="dungeon_generated",
            seed=self.seed,
            width=self.config.width,
            height=self.config.height,
            floors=self.config.floors,
            secret_doors=self.metrics["total_secret_doors"],
        )

    # ------------------------------------------------------------------
    # Staircases
    # ------------------------------------------------------------------
    def _place_staircases(self):
        w, h = self.config.width, self.config.height
        for upper, lower in zip(self.floors, self.floors[1:]):
            x, y = self._rng.randrange(w), self._rng.randrange(h)
            upper.grid[x][y].stairs_down = True
            lower.grid[x][y].stairs_up = True
            self.stair_pairs.append((x, y))

    # ------------------------------------------------------------------
    # Floor access
    # ------------------------------------------------------------------
    @property
    def floor_count(self) -> int:
        return len(self.floors)

    @property
    def floor(self) -> Maze:
        return self.floors[self.current_floor]

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def can_descend(self, x: int, y: int) -> bool:
        return self.floor.cell(x, y).stairs_down and self.current_floor < self.floor_count - 1

    def can_ascend(self, x: int, y: int) -> bool:
        return self.floor.cell(x, y).stairs_up and self.current_floor > 0

    def take_stairs(self, x: int, y: int) -> int:
        """Follow the staircase at (x, y) on the current floor.

        Descending wins when the cell holds both staircases. Returns the floor
        delta (+1 down, -1 up, 0 when no usable staircase is here).
        """
        if self.can_descend(x, y):
            self.current_floor += 1
            return 1
        if self.can_ascend(x, y):
            self.current_floor -= 1
            return -1
        return 0

    # ------------------------------------------------------------------
    # Metrics / convenience outputs
    # ------------------------------------------------------------------
    def _collect_metrics(self):
        per_floor = [m.metrics for m in self.floors]
        self.metrics.update(
            {
                "seed": self.seed,
                "floors": self.floor_count,
                "per_floor": per_floor,
                "total_secret_doors": sum(f["secret_doors"] for f in per_floor),
                "stair_pairs": list(self.stair_pairs),
            }
        )

    def to_ascii(self) -> str:
        blocks = []
        for i, m in enumerate(self.floors):
            blocks.append(f"Floor {i + 1}/{self.floor_count}\n{m.to_ascii()}")
        return "\n\n".join(blocks)

    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.config.width,
            "height": self.config.height,
            "floors": [m.to_json() for m in self.floors],
            "stair_pairs": [list(p) for p in self.stair_pairs],
            "metrics": self.metrics,
        }


__all__ = ["Dungeon", "DungeonConfig"]

if __name__ == "__main__":  # manual quick smoke
    d = Dungeon(seed=1234, size=(8, 6, 2))
    print(d.to_ascii())
    print(d.metrics)
