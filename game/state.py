from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .geometry import Coordinate, Direction


class GameState(str, Enum):
    """Lifecycle of a game."""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(str, Enum):
    """Control commands accepted from the input side."""

    PLAY = "play"
    PAUSE = "pause"
    RESTART = "restart"

    @classmethod
    def parse(cls, text: str) -> Command:
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"Unknown command: {text!r}") from None


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the world after a tick, handed to renderers."""

    snake: Tuple[Coordinate, ...]  # Head first
    food: Optional[Coordinate]  # None while waiting for respawn
    direction: Optional[Direction]  # None until the first direction command
    state: GameState
    score: int = 0  # Food eaten since the last reset
    tick: int = 0  # Ticks evaluated since the last reset
    width: int = 300
    height: int = 150
    step: int = 5
    tail_afterglow_length: int = 2

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    @property
    def body(self) -> Tuple[Coordinate, ...]:
        """Segments between the head and the fading tail."""
        end = max(len(self.snake) - self.tail_afterglow_length, 1)
        return self.snake[1:end]

    @property
    def tail(self) -> Tuple[Coordinate, ...]:
        """The last tail_afterglow_length segments, never the head."""
        start = max(len(self.snake) - self.tail_afterglow_length, 1)
        return self.snake[start:]

    def to_dict(self) -> dict[str, Any]:
        """Convert Snapshot to a dictionary for JSON serialization."""
        return {
            "snake": [{"x": x, "y": y} for x, y in self.snake],
            "head": {"x": self.head.x, "y": self.head.y},
            "body": [{"x": x, "y": y} for x, y in self.body],
            "tail": [{"x": x, "y": y} for x, y in self.tail],
            "food": {"x": self.food.x, "y": self.food.y} if self.food is not None else None,
            "direction": self.direction.value if self.direction is not None else None,
            "state": self.state.value,
            "score": self.score,
            "tick": self.tick,
            "width": self.width,
            "height": self.height,
            "step": self.step,
        }
