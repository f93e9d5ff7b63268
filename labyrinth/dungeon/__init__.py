"""Public dungeon package interface."""

from .cells import DIRECTIONS, EAST, NORTH, SOUTH, WEST, Cell, Edge  # noqa: F401
from .config import ConfigurationError, DungeonConfig  # noqa: F401
from .dungeon import Dungeon  # noqa: F401
from .maze import Maze  # noqa: F401
from .visibility import VisibilityTracker  # noqa: F401

__all__ = [
    "Cell",
    "ConfigurationError",
    "DIRECTIONS",
    "Dungeon",
    "DungeonConfig",
    "EAST",
    "Edge",
    "Maze",
    "NORTH",
    "SOUTH",
    "VisibilityTracker",
    "WEST",
]
