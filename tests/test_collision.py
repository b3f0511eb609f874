from game.collision import body_range, is_self_collision
from game.geometry import Coordinate as C


def snake_with_head_over(index, length=5):
    """A straight snake whose head is moved onto segment index."""
    cells = [C(50 - 5 * i, 0) for i in range(length)]
    cells[0] = cells[index]
    return tuple(cells)


def test_body_range_excludes_head_and_afterglow():
    snake = tuple(C(5 * i, 0) for i in range(5))
    assert body_range(snake, 2) == snake[1:3]
    assert body_range(snake, 0) == snake[1:]


def test_overlap_with_body_is_collision():
    assert is_self_collision(snake_with_head_over(1), 2)
    assert is_self_collision(snake_with_head_over(2), 2)


def test_overlap_with_afterglow_is_not_collision():
    assert not is_self_collision(snake_with_head_over(3), 2)
    assert not is_self_collision(snake_with_head_over(4), 2)


def test_short_body_range_never_collides():
    # Body range is a single segment after exclusions
    snake = (C(5, 0), C(5, 0), C(10, 0), C(15, 0))
    assert not is_self_collision(snake, 2)
    assert not is_self_collision((C(0, 0),), 2)


def test_afterglow_longer_than_snake():
    snake = (C(0, 0), C(0, 0), C(5, 0))
    assert body_range(snake, 10) == ()
    assert not is_self_collision(snake, 10)


def test_no_overlap():
    snake = tuple(C(5 * i, 0) for i in range(6))
    assert not is_self_collision(snake, 0)
