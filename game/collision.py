"""Self-collision detection."""

from __future__ import annotations

from collections.abc import Sequence

from .geometry import Coordinate


def body_range(snake: Sequence[Coordinate], tail_afterglow_length: int) -> Sequence[Coordinate]:
    """Segments a head can collide with.

    Excludes the head itself and the last tail_afterglow_length segments,
    which are treated as a fading afterimage.
    """
    end = len(snake) - tail_afterglow_length
    return snake[1:max(end, 1)]


def is_self_collision(snake: Sequence[Coordinate], tail_afterglow_length: int) -> bool:
    """Whether the head overlaps a non-afterglow body segment.

    A body range shorter than two segments never collides.
    """
    body = body_range(snake, tail_afterglow_length)
    if len(body) < 2:
        return False
    head = snake[0]
    return any(segment == head for segment in body)
