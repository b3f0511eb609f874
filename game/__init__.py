"""Snake engine - grid geometry, movement, collisions and the tick state machine."""

from game.config import EngineConfig, load_config
from game.engine import SnakeGame
from game.food import FoodSpawner
from game.geometry import Bounds, Coordinate, Direction
from game.loop import TickLoop
from game.state import Command, GameState, Snapshot

__all__ = [
    "Bounds",
    "Command",
    "Coordinate",
    "Direction",
    "EngineConfig",
    "FoodSpawner",
    "GameState",
    "SnakeGame",
    "Snapshot",
    "TickLoop",
    "load_config",
]
