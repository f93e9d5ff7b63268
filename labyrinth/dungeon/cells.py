"""Grid cells and the wall edges they share.

Each side of a cell is an ``Edge``. Two orthogonally adjacent cells hold the
same Edge object for the side between them, so removing a wall, planting a
secret door or revealing one is visible from both cells at once. Boundary
edges are owned by a single cell and refuse to open.
"""

from typing import Dict, List, Tuple

NORTH = "n"
SOUTH = "s"
EAST = "e"
WEST = "w"

# Neighbour enumeration order used by generation
DIRECTIONS = (NORTH, SOUTH, WEST, EAST)

DELTAS: Dict[str, Tuple[int, int]] = {
    NORTH: (0, -1),
    SOUTH: (0, 1),
    WEST: (-1, 0),
    EAST: (1, 0),
}
OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
DIRECTION_NAMES = {NORTH: "north", SOUTH: "south", EAST: "east", WEST: "west"}


class Edge:
    """Wall state between two cells (or between a cell and the outside)."""

    __slots__ = ("wall", "secret", "revealed", "boundary")

    def __init__(self, boundary: bool = False):
        self.wall = True
        self.secret = False
        self.revealed = False
        self.boundary = boundary

    @property
    def is_open(self) -> bool:
        return not self.wall or (self.secret and self.revealed)

    def carve(self) -> None:
        if self.boundary:
            raise ValueError("cannot open a boundary wall")
        self.wall = False

    def reveal(self) -> bool:
        """Reveal a hidden door, opening the passage. Returns True if it changed."""
        if not self.secret or self.revealed:
            return False
        self.revealed = True
        self.wall = False
        return True


class Cell:
    """Lightweight container for one maze grid cell."""

    __slots__ = ("x", "y", "edges", "visited", "stairs_up", "stairs_down")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.edges: Dict[str, Edge] = {}
        self.visited = False
        self.stairs_up = False
        self.stairs_down = False

    def wall(self, direction: str) -> bool:
        return self.edges[direction].wall

    def is_open(self, direction: str) -> bool:
        return self.edges[direction].is_open

    @property
    def north_wall(self) -> bool:
        return self.edges[NORTH].wall

    @property
    def south_wall(self) -> bool:
        return self.edges[SOUTH].wall

    @property
    def east_wall(self) -> bool:
        return self.edges[EAST].wall

    @property
    def west_wall(self) -> bool:
        return self.edges[WEST].wall

    @property
    def secret_doors(self) -> Dict[str, bool]:
        return {d: e.secret for d, e in self.edges.items()}

    @property
    def revealed_doors(self) -> Dict[str, bool]:
        return {d: e.revealed for d, e in self.edges.items()}

    def open_sides(self) -> List[str]:
        return [d for d in DIRECTIONS if self.edges[d].is_open]

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "walls": {d: self.edges[d].wall for d in DIRECTIONS},
            "secret": [d for d in DIRECTIONS if self.edges[d].secret],
            "revealed": [d for d in DIRECTIONS if self.edges[d].revealed],
            "stairs_up": self.stairs_up,
            "stairs_down": self.stairs_down,
        }


Grid2D = List[List[Cell]]
Coord2D = Tuple[int, int]

__all__ = [
    "NORTH",
    "SOUTH",
    "EAST",
    "WEST",
    "DIRECTIONS",
    "DELTAS",
    "OPPOSITE",
    "DIRECTION_NAMES",
    "Edge",
    "Cell",
    "Grid2D",
    "Coord2D",
]
