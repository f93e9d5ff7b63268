"""
project: Labyrinth Adventures
module: __init__.py
License: MIT

Procedurally generated multi-floor maze explorer with fog of war, secret
doors and staircases. The core (generation, turn resolution, rendering) has
no terminal dependencies; ``labyrinth.tui`` wraps it in a Textual app.
"""

from .dungeon import ConfigurationError, Dungeon, DungeonConfig, Maze, VisibilityTracker  # noqa: F401
from .render import render_floor, render_full  # noqa: F401
from .session import Player, Session  # noqa: F401

__all__ = [
    "ConfigurationError",
    "Dungeon",
    "DungeonConfig",
    "Maze",
    "Player",
    "Session",
    "VisibilityTracker",
    "render_floor",
    "render_full",
]
