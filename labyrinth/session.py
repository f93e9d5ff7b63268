"""Session aggregate: everything one play-through mutates.

A ``Session`` is handed explicitly to ``services.turn_service.resolve_turn``;
nothing about the game lives in module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .dungeon import Dungeon, DungeonConfig, VisibilityTracker


@dataclass
class Player:
    x: int = 0
    y: int = 0
    floor: int = 0

    @property
    def pos(self):
        return (self.x, self.y)


@dataclass
class Session:
    dungeon: Dungeon
    view_radius: int = 3
    player: Player = field(default_factory=Player)
    visibility: VisibilityTracker | None = None
    turns: int = 0
    active: bool = True

    def __post_init__(self):
        if self.visibility is None:
            self.visibility = VisibilityTracker.for_dungeon(self.dungeon)
        self.player.floor = self.dungeon.current_floor
        self.refresh_visibility()

    @classmethod
    def start(cls, config: DungeonConfig | None = None, **dungeon_kwargs) -> "Session":
        """Generate a dungeon and place the player on its start cell."""
        config = config or DungeonConfig()
        dungeon = Dungeon(config, **dungeon_kwargs)
        sx, sy = dungeon.config.start
        return cls(dungeon=dungeon, view_radius=dungeon.config.view_radius, player=Player(sx, sy, 0))

    @property
    def maze(self):
        return self.dungeon.floor

    def refresh_visibility(self) -> int:
        return self.visibility.update(self.player.floor, self.player.x, self.player.y, self.view_radius)

    def discovered(self):
        return self.visibility.floor_grid(self.player.floor)


__all__ = ["Player", "Session"]
