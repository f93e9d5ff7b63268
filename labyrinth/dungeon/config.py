import os
from dataclasses import dataclass
from typing import Optional, Tuple


class ConfigurationError(ValueError):
    """Raised when a dungeon is constructed with unusable parameters."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


@dataclass
class DungeonConfig:
    width: int = 10
    height: int = 10
    floors: int = 3
    view_radius: int = 3
    secret_door_chance: float = 0.10
    start: Tuple[int, int] = (0, 0)
    seed: Optional[int] = None

    def validate(self) -> "DungeonConfig":
        for name in ("width", "height", "floors"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(name, f"must be a positive integer, got {value!r}")
        if not isinstance(self.view_radius, int) or self.view_radius < 0:
            raise ConfigurationError("view_radius", f"must be a non-negative integer, got {self.view_radius!r}")
        if not 0.0 <= self.secret_door_chance <= 1.0:
            raise ConfigurationError(
                "secret_door_chance", f"must be within [0, 1], got {self.secret_door_chance!r}"
            )
        sx, sy = self.start
        if not (0 <= sx < self.width and 0 <= sy < self.height):
            raise ConfigurationError("start", f"{self.start!r} lies outside a {self.width}x{self.height} floor")
        return self

    @classmethod
    def from_env(cls, **overrides) -> "DungeonConfig":
        """Build a config from LABYRINTH_* environment variables.

        Keyword overrides that are not None win over the environment.
        """
        env = {
            "width": ("LABYRINTH_WIDTH", int),
            "height": ("LABYRINTH_HEIGHT", int),
            "floors": ("LABYRINTH_FLOORS", int),
            "view_radius": ("LABYRINTH_VIEW_RADIUS", int),
            "secret_door_chance": ("LABYRINTH_SECRET_CHANCE", float),
            "seed": ("LABYRINTH_SEED", int),
        }
        values = {}
        for field_name, (var, cast) in env.items():
            raw = os.getenv(var)
            if raw in (None, ""):
                continue
            try:
                values[field_name] = cast(raw)
            except ValueError:
                raise ConfigurationError(field_name, f"{var}={raw!r} is not a valid {cast.__name__}") from None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["ConfigurationError", "DungeonConfig"]
