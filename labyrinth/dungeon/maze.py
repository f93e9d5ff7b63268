"""Single maze floor: randomized depth-first carving plus secret doors.

Generation phases:
    * Link a W x H grid of cells with shared edges (all walls standing).
    * Carve a spanning tree with an explicit-stack depth-first walk from the
      start cell, choosing uniformly among unvisited neighbours.
    * Optionally turn a fraction of the interior walls still standing into
      secret doors (one Bernoulli trial per wall).

Invariants enforced by code & tests:
    * Before secret doors are revealed the open passages form a spanning tree:
      every cell reachable, exactly W*H-1 open edges, no cycles.
    * Boundary walls never open.
    * Secret doors only sit on interior walls that generation left standing.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .cells import DELTAS, DIRECTIONS, EAST, NORTH, SOUTH, WEST, Cell, Coord2D, Edge, Grid2D
from .config import ConfigurationError


class Maze:
    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        *,
        start: Coord2D = (0, 0),
        secret_door_chance: float = 0.0,
    ):
        if not isinstance(width, int) or isinstance(width, bool) or width < 1:
            raise ConfigurationError("width", f"must be a positive integer, got {width!r}")
        if not isinstance(height, int) or isinstance(height, bool) or height < 1:
            raise ConfigurationError("height", f"must be a positive integer, got {height!r}")
        self.width = width
        self.height = height
        if not self.in_bounds(*start):
            raise ConfigurationError("start", f"{start!r} lies outside a {width}x{height} floor")
        self._rng = rng if rng is not None else random.Random()
        # Column-major like the rest of the dungeon code: grid[x][y]
        self.grid: Grid2D = [[Cell(x, y) for y in range(height)] for x in range(width)]
        self._link_edges()
        self.generate(start)
        if secret_door_chance > 0:
            self.add_secret_doors(secret_door_chance)

    # ------------------------------------------------------------------
    # Grid helpers
    # ------------------------------------------------------------------
    def _link_edges(self):
        w, h = self.width, self.height
        for x in range(w):
            for y in range(h):
                cell = self.grid[x][y]
                # North and west edges are shared with the neighbour created earlier
                cell.edges[NORTH] = self.grid[x][y - 1].edges[SOUTH] if y > 0 else Edge(boundary=True)
                cell.edges[WEST] = self.grid[x - 1][y].edges[EAST] if x > 0 else Edge(boundary=True)
                cell.edges[SOUTH] = Edge(boundary=y == h - 1)
                cell.edges[EAST] = Edge(boundary=x == w - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        return self.grid[x][y]

    def neighbor(self, x: int, y: int, direction: str) -> Optional[Coord2D]:
        dx, dy = DELTAS[direction]
        nx, ny = x + dx, y + dy
        if self.in_bounds(nx, ny):
            return nx, ny
        return None

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.grid[x][y]

    def is_open(self, x: int, y: int, direction: str) -> bool:
        return self.cell(x, y).is_open(direction)

    def remove_wall(self, x: int, y: int, direction: str) -> None:
        self.cell(x, y).edges[direction].carve()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, start: Coord2D = (0, 0)) -> None:
        sx, sy = start
        self.grid[sx][sy].visited = True
        stack: List[Coord2D] = [(sx, sy)]
        while stack:
            cx, cy = stack[-1]
            candidates: List[Tuple[int, int, str]] = []
            for direction in DIRECTIONS:
                nxt = self.neighbor(cx, cy, direction)
                if nxt is not None and not self.grid[nxt[0]][nxt[1]].visited:
                    candidates.append((nxt[0], nxt[1], direction))
            if candidates:
                nx, ny, direction = self._rng.choice(candidates)
                self.remove_wall(cx, cy, direction)
                self.grid[nx][ny].visited = True
                stack.append((nx, ny))
            else:
                stack.pop()

    def add_secret_doors(self, chance: float = 0.10) -> int:
        """Mark standing interior walls as secret doors with the given probability.

        Only north and west sides are scanned so each interior wall gets exactly
        one trial. Returns the number of doors placed.
        """
        placed = 0
        for cell in self.cells():
            for direction in (NORTH, WEST):
                edge = cell.edges[direction]
                if edge.boundary or not edge.wall or edge.secret:
                    continue
                if self._rng.random() < chance:
                    edge.secret = True
                    edge.revealed = False
                    placed += 1
        return placed

    def plant_secret_door(self, x: int, y: int, direction: str) -> bool:
        """Hide a door in the wall on ``direction`` of (x, y).

        Refused (returns False) for boundary walls, open passages and existing
        secret doors.
        """
        edge = self.cell(x, y).edges[direction]
        if edge.boundary or not edge.wall or edge.secret:
            return False
        edge.secret = True
        edge.revealed = False
        return True

    # ------------------------------------------------------------------
    # Secret door search
    # ------------------------------------------------------------------
    def search(self, x: int, y: int) -> List[str]:
        """Reveal every hidden door around (x, y); returns the sides revealed."""
        cell = self.cell(x, y)
        return [d for d in DIRECTIONS if cell.edges[d].reveal()]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def open_edges(self) -> List[Tuple[Coord2D, Coord2D]]:
        """Each open passage once, as ((x, y), (nx, ny)) looking south or east."""
        edges = []
        for cell in self.cells():
            for direction in (SOUTH, EAST):
                if cell.edges[direction].is_open:
                    dx, dy = DELTAS[direction]
                    edges.append(((cell.x, cell.y), (cell.x + dx, cell.y + dy)))
        return edges

    def secret_door_count(self) -> int:
        return sum(1 for c in self.cells() for d in (NORTH, WEST) if c.edges[d].secret)

    @property
    def metrics(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.width * self.height,
            "open_passages": len(self.open_edges()),
            "secret_doors": self.secret_door_count(),
            "dead_ends": sum(1 for c in self.cells() if len(c.open_sides()) == 1),
        }

    def to_ascii(self) -> str:
        """Compact wall dump: '+' posts, '-'/'|' walls, 'S' hidden doors, '>'/'<' stairs."""
        lines = []
        for y in range(self.height):
            top = "+"
            mid = ""
            for x in range(self.width):
                cell = self.grid[x][y]
                top += _ascii_wall(cell.edges[NORTH], "---") + "+"
                if x == 0:
                    mid += _ascii_wall(cell.edges[WEST], "|")
                mid += _ascii_content(cell) + _ascii_wall(cell.edges[EAST], "|")
            lines.append(top)
            lines.append(mid)
        bottom = self.height - 1
        lines.append("+" + "".join(_ascii_wall(self.grid[x][bottom].edges[SOUTH], "---") + "+" for x in range(self.width)))
        return "\n".join(lines)

    def to_json(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "cells": [[self.grid[x][y].to_dict() for x in range(self.width)] for y in range(self.height)],
            "metrics": self.metrics,
        }


def _ascii_wall(edge: Edge, glyph: str) -> str:
    if edge.is_open:
        return " " * len(glyph)
    if edge.secret:
        return "S" * len(glyph)
    return glyph


def _ascii_content(cell: Cell) -> str:
    if cell.stairs_up and cell.stairs_down:
        return "<=>"
    if cell.stairs_down:
        return " > "
    if cell.stairs_up:
        return " < "
    return "   "


__all__ = ["Maze"]
