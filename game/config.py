"""Engine configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .geometry import Bounds, Coordinate, Direction
from .state import GameState


class EngineConfig(BaseModel):
    """Settings fixed when a game is constructed.

    Invalid settings raise pydantic.ValidationError at construction.
    """

    model_config = ConfigDict(frozen=True)

    step: int = Field(5, gt=0)  # Size of one cell in canvas units
    width: int = Field(300, gt=0)
    height: int = Field(150, gt=0)
    tick_ms: int = Field(75, gt=0)  # Lower is faster
    tail_afterglow_length: int = Field(2, ge=0)
    initial_snake: list[tuple[int, int]] = Field(default_factory=lambda: [(0, 0)])
    initial_direction: Optional[Direction] = None  # None idles until the first input
    initial_state: GameState = GameState.PAUSED
    seed: Optional[int] = None  # Food placement seed

    @model_validator(mode="after")
    def _check_grid(self) -> EngineConfig:
        if self.width % self.step or self.height % self.step:
            raise ValueError(
                f"Canvas {self.width}x{self.height} is not a multiple of step {self.step}"
            )
        if not self.initial_snake:
            raise ValueError("initial_snake must have at least one segment")

        bounds = self.bounds
        for cell in self.initial_snake:
            if not bounds.contains(cell) or not bounds.is_aligned(cell):
                raise ValueError(f"Initial segment {cell} is not a cell of the grid")
        for a, b in zip(self.initial_snake, self.initial_snake[1:]):
            if abs(a[0] - b[0]) + abs(a[1] - b[1]) != self.step:
                raise ValueError(f"Initial segments {a} and {b} are not adjacent")
        return self

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.width, self.height, self.step)

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000

    def initial_cells(self) -> tuple[Coordinate, ...]:
        return tuple(Coordinate(x, y) for x, y in self.initial_snake)


def load_config(config_path: str | Path) -> EngineConfig:
    """Load configuration from YAML file."""
    with open(config_path) as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}
    return EngineConfig(**data)
