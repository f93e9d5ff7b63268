"""Structural invariant checks used by scripts/diagnose_seeds.py and tests."""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Set

from .cells import DELTAS, DIRECTIONS, OPPOSITE, Coord2D
from .maze import Maze


def reachable(maze: Maze, start: Coord2D = (0, 0)) -> Set[Coord2D]:
    """Cells reachable from ``start`` through open sides."""
    q = deque([start])
    seen = {start}
    while q:
        x, y = q.popleft()
        for d in DIRECTIONS:
            if not maze.grid[x][y].is_open(d):
                continue
            nxt = maze.neighbor(x, y, d)
            if nxt is not None and nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def asymmetric_sides(maze: Maze) -> List[Dict[str, Any]]:
    """Adjacent pairs whose wall / secret / revealed flags disagree."""
    bad = []
    for cell in maze.cells():
        for d in DIRECTIONS:
            nxt = maze.neighbor(cell.x, cell.y, d)
            if nxt is None:
                continue
            mine = cell.edges[d]
            theirs = maze.grid[nxt[0]][nxt[1]].edges[OPPOSITE[d]]
            if (mine.wall, mine.secret, mine.revealed) != (theirs.wall, theirs.secret, theirs.revealed):
                bad.append({"cell": (cell.x, cell.y), "side": d})
    return bad


def open_boundaries(maze: Maze) -> List[Dict[str, Any]]:
    bad = []
    for cell in maze.cells():
        for d in DIRECTIONS:
            dx, dy = DELTAS[d]
            if not maze.in_bounds(cell.x + dx, cell.y + dy) and cell.is_open(d):
                bad.append({"cell": (cell.x, cell.y), "side": d})
    return bad


def analyze_maze(maze: Maze) -> Dict[str, Any]:
    return {
        "open_passages": len(maze.open_edges()),
        "expected_passages": maze.width * maze.height - 1,
        "unreachable_cells": maze.width * maze.height - len(reachable(maze)),
        "asymmetric_sides": asymmetric_sides(maze),
        "open_boundaries": open_boundaries(maze),
        "boundary_secret_doors": [
            (c.x, c.y, d) for c in maze.cells() for d in DIRECTIONS if c.edges[d].secret and c.edges[d].boundary
        ],
    }


def analyze(dungeon) -> Dict[str, Any]:
    floors = [analyze_maze(m) for m in dungeon.floors]
    stair_issues = []
    last = dungeon.floor_count - 1
    for i, m in enumerate(dungeon.floors):
        downs = [(c.x, c.y) for c in m.cells() if c.stairs_down]
        ups = [(c.x, c.y) for c in m.cells() if c.stairs_up]
        if len(downs) != (1 if i < last else 0):
            stair_issues.append({"floor": i, "down": downs})
        if len(ups) != (1 if i > 0 else 0):
            stair_issues.append({"floor": i, "up": ups})
        if i < last and downs and not dungeon.floors[i + 1].grid[downs[0][0]][downs[0][1]].stairs_up:
            stair_issues.append({"floor": i, "unpaired": downs[0]})
    return {"floors": floors, "stair_issues": stair_issues}


__all__ = ["analyze", "analyze_maze", "asymmetric_sides", "open_boundaries", "reachable"]
