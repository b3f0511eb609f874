import logging
from typing import Optional

from .boundary import reflect
from .collision import is_self_collision
from .config import EngineConfig
from .food import FoodSpawner, Spawner
from .geometry import Coordinate, Direction
from .movement import Snake, advance, grow, next_head
from .state import Command, GameState, Snapshot

logger = logging.getLogger(__name__)


class SnakeGame:
    """Tick-driven snake engine with a bouncing boundary.

    All world state (snake, food, direction, lifecycle) is replaced once per
    tick inside step(). The only value written from outside a tick is the
    pending direction recorded by set_direction().
    """

    def __init__(self, config: Optional[EngineConfig] = None, spawner: Optional[Spawner] = None):
        """Initialize the game.

        Args:
            config: Engine settings, defaults to EngineConfig()
            spawner: Food placement strategy, defaults to a FoodSpawner
                seeded from the config
        """
        self.config = config or EngineConfig()
        self.bounds = self.config.bounds
        self.spawner: Spawner = spawner or FoodSpawner(seed=self.config.seed)

        self.snake: Snake = ()
        self.food: Optional[Coordinate] = None
        self.direction: Optional[Direction] = None
        self.state: GameState = self.config.initial_state
        self.score: int = 0
        self.tick: int = 0
        self.pending_direction: Optional[Direction] = None
        self.reset()

    def reset(self) -> Snapshot:
        """Restore the configured initial world and lifecycle state."""
        self.snake = self.config.initial_cells()
        self.food = None
        self.direction = self.config.initial_direction
        self.state = self.config.initial_state
        self.score = 0
        self.tick = 0
        self.pending_direction = None
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        """Get the current world as an immutable snapshot."""
        return Snapshot(
            snake=self.snake,
            food=self.food,
            direction=self.direction,
            state=self.state,
            score=self.score,
            tick=self.tick,
            width=self.bounds.width,
            height=self.bounds.height,
            step=self.bounds.step,
            tail_afterglow_length=self.config.tail_afterglow_length,
        )

    get_state = snapshot

    # ----- Input -----

    def set_direction(self, direction: Direction) -> bool:
        """Record a direction for the next tick.

        A direction that exactly reverses the current one is discarded.
        A later call before the next tick replaces an earlier one.

        Returns:
            True if the direction was recorded
        """
        if self.direction is not None and direction is self.direction.opposite:
            logger.debug("Discarding reversal %s while moving %s", direction.value, self.direction.value)
            return False
        self.pending_direction = direction
        return True

    def handle_command(self, command: Command) -> bool:
        """Apply a control command. Returns False if it did not apply."""
        if command is Command.PLAY:
            return self.play()
        if command is Command.PAUSE:
            return self.pause()
        return self.restart()

    def play(self) -> bool:
        if self.state is not GameState.PAUSED:
            logger.debug("Ignoring play while %s", self.state.value)
            return False
        self._transition(GameState.PLAYING)
        return True

    def pause(self) -> bool:
        if self.state is not GameState.PLAYING:
            logger.debug("Ignoring pause while %s", self.state.value)
            return False
        self._transition(GameState.PAUSED)
        return True

    def restart(self) -> bool:
        """Reset the world and start playing in one call."""
        previous = self.state
        self.reset()
        self.state = GameState.PLAYING
        logger.info("Restarted game (was %s)", previous.value)
        return True

    # ----- Tick -----

    def step(self) -> Snapshot:
        """Advance the game by one tick.

        Does nothing unless PLAYING. Order within a tick: respawn food that
        went missing on an earlier tick, commit the pending direction, check
        self-collision, check eating, then deflect or move.

        Returns:
            The snapshot after the tick
        """
        if self.state is not GameState.PLAYING:
            return self.snapshot()

        self.tick += 1

        if self.food is None:
            self.food = self.spawner.spawn(self.bounds)
            logger.debug("Spawned food at %s", self.food)

        self._commit_direction()

        if is_self_collision(self.snake, self.config.tail_afterglow_length):
            self._transition(GameState.GAME_OVER)
            return self.snapshot()

        if self.direction is None:
            return self.snapshot()

        if next_head(self.snake, self.direction, self.bounds.step) == self.food:
            self.snake = grow(self.snake, self.food)
            self.food = None
            self.score += 1
            return self.snapshot()

        new_direction = reflect(self.snake[0], self.direction, self.bounds)
        if new_direction is not self.direction:
            self.direction = new_direction
        else:
            self.snake = advance(self.snake, self.direction, self.bounds.step)

        return self.snapshot()

    def _commit_direction(self) -> None:
        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None

    def _transition(self, new_state: GameState) -> None:
        logger.info("Game %s -> %s (score %d)", self.state.value, new_state.value, self.score)
        self.state = new_state
