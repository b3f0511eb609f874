"""Food placement."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from .geometry import Bounds, Coordinate


class Spawner(Protocol):
    """Anything that can place a food cell on the grid."""

    def spawn(self, bounds: Bounds) -> Coordinate: ...


class FoodSpawner:
    """Uniform random food placement.

    Each axis is drawn independently over its grid cells and scaled by the
    grid step. Cells occupied by the snake are not avoided, so food may
    appear on top of the body.
    """

    def __init__(self, seed: int | None = None):
        """Initialize the spawner.

        Args:
            seed: Optional random seed for reproducible placement
        """
        self.rng = np.random.default_rng(seed)

    def spawn(self, bounds: Bounds) -> Coordinate:
        cell_x = int(self.rng.integers(0, bounds.cells_x))
        cell_y = int(self.rng.integers(0, bounds.cells_y))
        return Coordinate(cell_x * bounds.step, cell_y * bounds.step)
