"""Grid geometry: coordinates, directions and canvas bounds."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Direction(str, Enum):
    """Travel direction of the snake head."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> tuple[int, int]:
        """Unit (dx, dy) offset. y grows downwards."""
        return _VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse a wire name, enum name or keyboard key into a Direction.

        Raises:
            ValueError: If the text names no direction
        """
        key = _KEY_ALIASES.get(text, text)
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {text!r}") from None


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Browser key names sent by the canvas client
_KEY_ALIASES = {
    "ArrowUp": "up",
    "ArrowDown": "down",
    "ArrowLeft": "left",
    "ArrowRight": "right",
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
}


class Coordinate(NamedTuple):
    """Top-left corner of a grid cell, in canvas units."""

    x: int
    y: int


class Bounds(NamedTuple):
    """Canvas size and grid step. Both sizes are multiples of the step."""

    width: int
    height: int
    step: int

    @property
    def cells_x(self) -> int:
        return self.width // self.step

    @property
    def cells_y(self) -> int:
        return self.height // self.step

    @property
    def max_x(self) -> int:
        """Left edge of the last column."""
        return self.width - self.step

    @property
    def max_y(self) -> int:
        """Top edge of the last row."""
        return self.height - self.step

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def contains(self, coord: tuple[int, int]) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def is_aligned(self, coord: tuple[int, int]) -> bool:
        x, y = coord
        return x % self.step == 0 and y % self.step == 0


def offset(coord: Coordinate, direction: Direction, step: int) -> Coordinate:
    """Return the cell one grid step away from coord in direction."""
    dx, dy = direction.vector
    return Coordinate(coord.x + dx * step, coord.y + dy * step)
