from collections import deque

import pytest

from game.config import EngineConfig
from game.engine import SnakeGame
from game.geometry import Bounds, Coordinate


class FixedSpawner:
    """Places food at queued cells, then off in a far corner."""

    def __init__(self, *cells):
        self.cells = deque(Coordinate(*c) for c in cells)
        self.calls = 0

    def spawn(self, bounds: Bounds) -> Coordinate:
        self.calls += 1
        if self.cells:
            return self.cells.popleft()
        return Coordinate(bounds.max_x, bounds.max_y)


@pytest.fixture
def make_game():
    """Build a PLAYING game with a pinned food spawner."""

    def _make(spawner=None, **overrides):
        settings = {"initial_state": "playing", "initial_direction": "right"}
        settings.update(overrides)
        return SnakeGame(EngineConfig(**settings), spawner=spawner or FixedSpawner())

    return _make
