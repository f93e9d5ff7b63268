"""Text rendering of a partially discovered floor.

Every output line is ``1 + 4 * width`` characters: a leading column for the
west border, then per cell three content/wall characters and one separator
(the east wall on cell lines). Undiscovered cells are blank.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .dungeon.cells import Cell
from .dungeon.maze import Maze

H_WALL = "═══"
V_WALL = "║"
CORNER = "╔"
BLANK = "   "

PLAYER = " P "
STAIRS_DOWN = " > "
STAIRS_UP = " < "
STAIRS_BOTH = "<=>"


def cell_content(cell: Cell, is_player: bool) -> str:
    if is_player:
        return PLAYER
    if cell.stairs_up and cell.stairs_down:
        return STAIRS_BOTH
    if cell.stairs_down:
        return STAIRS_DOWN
    if cell.stairs_up:
        return STAIRS_UP
    return BLANK


def render_floor(
    maze: Maze,
    discovered: Sequence[Sequence[bool]],
    player: Optional[Tuple[int, int]],
    floor_index: int = 0,
    floor_count: int = 1,
) -> List[str]:
    """Render one floor as a list of lines.

    ``discovered`` is indexed ``[x][y]``; ``floor_index`` is zero-based and
    only shown (as ``Floor i/N``) when there is more than one floor.
    """
    w, h = maze.width, maze.height
    lines: List[str] = []
    if floor_count > 1:
        lines.append(f"Floor {floor_index + 1}/{floor_count}")

    origin = maze.grid[0][0]
    top = CORNER if discovered[0][0] and origin.north_wall and origin.west_wall else " "
    for x in range(w):
        seen = discovered[x][0]
        top += (H_WALL if seen and maze.grid[x][0].north_wall else BLANK) + " "
    lines.append(top)

    for y in range(h):
        first = maze.grid[0][y]
        row = V_WALL if discovered[0][y] and first.west_wall else " "
        bottom = " "
        for x in range(w):
            cell = maze.grid[x][y]
            if discovered[x][y]:
                row += cell_content(cell, player == (x, y))
                row += V_WALL if cell.east_wall else " "
                bottom += (H_WALL if cell.south_wall else BLANK) + " "
            else:
                row += BLANK + " "
                bottom += BLANK + " "
        lines.append(row)
        lines.append(bottom)
    return lines


def render_full(maze: Maze, player=None, floor_index: int = 0, floor_count: int = 1) -> List[str]:
    everything = [[True] * maze.height for _ in range(maze.width)]
    return render_floor(maze, everything, player, floor_index, floor_count)


def render_session(session) -> str:
    lines = render_floor(
        session.maze,
        session.discovered(),
        session.player.pos,
        session.player.floor,
        session.dungeon.floor_count,
    )
    return "\n".join(lines)


__all__ = ["render_floor", "render_full", "render_session", "cell_content"]
