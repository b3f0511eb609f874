"""Boundary deflection.

When the head sits on the edge cell of its axis of travel the snake does not
move; it turns 90 degrees towards the far half of the other axis and keeps
bouncing around the canvas instead of wrapping or dying.
"""

from __future__ import annotations

from .geometry import Bounds, Coordinate, Direction


def is_blocked(head: Coordinate, direction: Direction, bounds: Bounds) -> bool:
    """Whether head is on the edge cell it is travelling towards.

    Only the axis of travel is tested.
    """
    if direction is Direction.UP:
        return head.y <= 0
    if direction is Direction.DOWN:
        return head.y >= bounds.max_y
    if direction is Direction.LEFT:
        return head.x <= 0
    return head.x >= bounds.max_x


def reflect(head: Coordinate, direction: Direction, bounds: Bounds) -> Direction:
    """Return the direction to take from head.

    Unblocked heads keep their direction. A blocked vertical move turns RIGHT
    on the left half of the canvas and LEFT otherwise; a blocked horizontal
    move turns DOWN on the top half and UP otherwise. The midline counts as
    the left/top half.
    """
    if not is_blocked(head, direction, bounds):
        return direction

    center_x, center_y = bounds.center
    if direction.is_vertical:
        return Direction.RIGHT if head.x <= center_x else Direction.LEFT
    return Direction.DOWN if head.y <= center_y else Direction.UP
