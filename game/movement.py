"""Snake body movement.

The body is a head-first tuple of cells. Moving shifts the whole body along
the head's path: a new head is prepended and the tail cell dropped, so the
segments trail the head instead of translating independently.
"""

from __future__ import annotations

from collections.abc import Sequence

from .geometry import Coordinate, Direction, offset

Snake = tuple[Coordinate, ...]


def next_head(snake: Sequence[Coordinate], direction: Direction, step: int) -> Coordinate:
    """Cell the head would occupy after one step in direction."""
    return offset(snake[0], direction, step)


def advance(snake: Sequence[Coordinate], direction: Direction, step: int) -> Snake:
    """Move the snake one step, keeping its length."""
    head = next_head(snake, direction, step)
    return (head, *snake[:-1])


def grow(snake: Sequence[Coordinate], cell: Coordinate) -> Snake:
    """Prepend cell as the new head without dropping the tail."""
    return (Coordinate(*cell), *snake)
