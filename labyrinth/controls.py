"""Raw key -> Command translation.

Key names follow Textual's naming (``"up"``, ``"escape"``, plain letters).
Unknown keys map to None and are ignored by the caller: no turn is consumed.
"""

from __future__ import annotations

from typing import Dict, Optional

from .services.turn_service import Command

KEYMAP: Dict[str, Command] = {
    "w": Command.MOVE_NORTH,
    "s": Command.MOVE_SOUTH,
    "d": Command.MOVE_EAST,
    "a": Command.MOVE_WEST,
    "up": Command.MOVE_NORTH,
    "down": Command.MOVE_SOUTH,
    "right": Command.MOVE_EAST,
    "left": Command.MOVE_WEST,
    "f": Command.SEARCH,
    "e": Command.USE_STAIRS,
    "escape": Command.QUIT,
    "q": Command.QUIT,
}

# Footer labels; arrow keys stay hidden since they duplicate WASD
KEY_LABELS: Dict[str, str] = {
    "w": "North",
    "a": "West",
    "s": "South",
    "d": "East",
    "f": "Search",
    "e": "Stairs",
    "escape": "Quit",
}


def command_for_key(key: Optional[str]) -> Optional[Command]:
    if not key:
        return None
    return KEYMAP.get(key if len(key) > 1 else key.lower())


__all__ = ["KEYMAP", "KEY_LABELS", "command_for_key"]
