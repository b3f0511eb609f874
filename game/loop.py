"""Fixed-period tick scheduling on asyncio."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .engine import SnakeGame
from .state import GameState, Snapshot

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Snapshot], Awaitable[None]]
ErrorCallback = Callable[[Exception], Awaitable[None]]


class TickLoop:
    """Runs SnakeGame.step() once per tick period while the game is PLAYING.

    Only one tick task exists at a time, so ticks never overlap. The task
    ends on its own when the game leaves PLAYING and is cancelled by stop().
    Direction input is read by the engine at tick time, so the loop always
    sees the latest pending direction.
    """

    def __init__(
        self,
        game: SnakeGame,
        on_snapshot: SnapshotCallback,
        on_error: ErrorCallback | None = None,
    ):
        self.game = game
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking if the game is PLAYING and no loop is running."""
        if self.running or self.game.state is not GameState.PLAYING:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Cancel the tick task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        period = self.game.config.tick_seconds
        try:
            while self.game.state is GameState.PLAYING:
                await asyncio.sleep(period)
                # Paused or stopped while sleeping
                if self.game.state is not GameState.PLAYING:
                    break
                snapshot = self.game.step()
                await self.on_snapshot(snapshot)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.exception("Tick loop stopped")
            if self.on_error is not None:
                await self._report(e)

    async def _report(self, error: Exception) -> None:
        try:
            await self.on_error(error)
        except Exception:
            logger.exception("Could not report tick loop failure")
