import pytest

from game.geometry import Coordinate as C, Direction
from game.state import Command, GameState, Snapshot


def make_snapshot(length, afterglow=2, food=None):
    return Snapshot(
        snake=tuple(C(5 * i, 0) for i in range(length)),
        food=food,
        direction=Direction.LEFT,
        state=GameState.PLAYING,
        tail_afterglow_length=afterglow,
    )


def test_render_slices_partition_snake():
    snapshot = make_snapshot(5)
    assert snapshot.head == C(0, 0)
    assert snapshot.body == (C(5, 0), C(10, 0))
    assert snapshot.tail == (C(15, 0), C(20, 0))
    assert (snapshot.head, *snapshot.body, *snapshot.tail) == snapshot.snake


def test_short_snake_tail_never_includes_head():
    snapshot = make_snapshot(2)
    assert snapshot.body == ()
    assert snapshot.tail == (C(5, 0),)
    assert make_snapshot(1).tail == ()


def test_to_dict():
    data = make_snapshot(3, food=C(20, 5)).to_dict()
    assert data["snake"][0] == {"x": 0, "y": 0}
    assert data["head"] == {"x": 0, "y": 0}
    assert data["body"] == []
    assert len(data["tail"]) == 2
    assert data["food"] == {"x": 20, "y": 5}
    assert data["direction"] == "left"
    assert data["state"] == "playing"


def test_to_dict_without_food_or_direction():
    snapshot = Snapshot(snake=(C(0, 0),), food=None, direction=None, state=GameState.PAUSED)
    data = snapshot.to_dict()
    assert data["food"] is None
    assert data["direction"] is None


def test_snapshot_is_immutable():
    snapshot = make_snapshot(3)
    with pytest.raises(AttributeError):
        snapshot.score = 10


def test_command_parse():
    assert Command.parse("PLAY") is Command.PLAY
    assert Command.parse("restart") is Command.RESTART
    with pytest.raises(ValueError, match="Unknown command"):
        Command.parse("jump")
