"""Turn resolution service.

One call to ``resolve_turn`` applies exactly one command to a ``Session``:

    * Moves step one cell through an open side (wall absent or secret door
      revealed) and only if the destination is on the floor. Blocked moves
      are ordinary outcomes, not errors.
    * Search reveals every hidden door around the player's cell.
    * UseStairs descends if possible, otherwise ascends, otherwise nothing.
    * Quit deactivates the session.

Every command except Quit counts as a turn and refreshes visibility.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List

from labyrinth.dungeon.cells import DELTAS, DIRECTION_NAMES, EAST, NORTH, SOUTH, WEST
from labyrinth.logging_utils import get_logger
from labyrinth.session import Session

_log = get_logger("turns")


class Command(enum.Enum):
    MOVE_NORTH = "move_north"
    MOVE_SOUTH = "move_south"
    MOVE_EAST = "move_east"
    MOVE_WEST = "move_west"
    SEARCH = "search"
    USE_STAIRS = "use_stairs"
    QUIT = "quit"


MOVE_DIRECTIONS = {
    Command.MOVE_NORTH: NORTH,
    Command.MOVE_SOUTH: SOUTH,
    Command.MOVE_EAST: EAST,
    Command.MOVE_WEST: WEST,
}


@dataclass
class TurnResult:
    command: Command
    moved: bool = False
    found: List[str] = field(default_factory=list)
    floor_delta: int = 0
    newly_discovered: int = 0
    message: str = ""

    @property
    def found_door(self) -> bool:
        return bool(self.found)


def attempt_move(session: Session, direction: str) -> bool:
    """Step the player one cell toward ``direction`` if that side is open."""
    player = session.player
    maze = session.maze
    if not maze.is_open(player.x, player.y, direction):
        return False
    dx, dy = DELTAS[direction]
    nx, ny = player.x + dx, player.y + dy
    if not maze.in_bounds(nx, ny):
        return False
    player.x, player.y = nx, ny
    return True


def search(session: Session) -> List[str]:
    player = session.player
    found = session.maze.search(player.x, player.y)
    if found:
        _log.info(event="secret_door_found", floor=player.floor, x=player.x, y=player.y, sides=",".join(found))
    return found


def use_stairs(session: Session) -> int:
    player = session.player
    delta = session.dungeon.take_stairs(player.x, player.y)
    if delta:
        player.floor = session.dungeon.current_floor
        _log.info(event="floor_change", floor=player.floor, delta=delta, x=player.x, y=player.y)
    return delta


def resolve_turn(session: Session, command: Command) -> TurnResult:
    result = TurnResult(command=command)
    if not session.active:
        result.message = "The session has ended."
        return result
    if command is Command.QUIT:
        session.active = False
        result.message = "You leave the labyrinth."
        _log.info(event="session_end", turns=session.turns, floor=session.player.floor)
        return result

    if command in MOVE_DIRECTIONS:
        direction = MOVE_DIRECTIONS[command]
        result.moved = attempt_move(session, direction)
        if not result.moved:
            result.message = f"A wall blocks the way {DIRECTION_NAMES[direction]}."
    elif command is Command.SEARCH:
        result.found = search(session)
        if result.found:
            sides = ", ".join(DIRECTION_NAMES[d] for d in result.found)
            result.message = f"You discover a hidden door ({sides})!"
        else:
            result.message = "You find nothing unusual."
    elif command is Command.USE_STAIRS:
        here = session.maze.cell(session.player.x, session.player.y)
        both = here.stairs_up and here.stairs_down
        result.floor_delta = use_stairs(session)
        if result.floor_delta > 0:
            result.message = "Both stairways meet here; you take the one down." if both else "You descend the stairs."
        elif result.floor_delta < 0:
            result.message = "You climb the stairs."
        else:
            result.message = "There are no usable stairs here."

    session.turns += 1
    result.newly_discovered = session.refresh_visibility()
    _log.debug(
        event="turn",
        n=session.turns,
        command=command.value,
        x=session.player.x,
        y=session.player.y,
        floor=session.player.floor,
        moved=result.moved,
    )
    return result


__all__ = ["Command", "TurnResult", "attempt_move", "resolve_turn", "search", "use_stairs"]
