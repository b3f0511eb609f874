import json
import logging
import os
import socket
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError

from game.config import EngineConfig, load_config
from game.engine import SnakeGame
from game.geometry import Direction
from game.loop import TickLoop
from game.state import Command, GameState, Snapshot

BASE_DIR = Path(__file__).parent
load_dotenv(BASE_DIR / ".env")

logger = logging.getLogger(__name__)


def get_config() -> EngineConfig:
    """Engine settings from the YAML file named by SNAKE_CONFIG, else defaults."""
    config_path = os.environ.get("SNAKE_CONFIG")
    if config_path:
        return load_config(config_path)
    return EngineConfig()


app = FastAPI(title="SnakeBounce")
app.state.config = get_config()


class DirectionMessage(BaseModel):
    """Client request to turn the snake."""

    type: str
    direction: str


class CommandMessage(BaseModel):
    """Client request to play, pause or restart."""

    type: str
    command: str


@app.get("/config")
async def get_engine_config():
    """Return the active engine configuration."""
    return app.state.config.model_dump(mode="json")


class GameSession:
    """Manages a single game session."""

    def __init__(self, websocket: WebSocket, config: EngineConfig):
        self.websocket = websocket
        self.game = SnakeGame(config)
        self.loop = TickLoop(self.game, self.send_snapshot, self.send_error)

    async def send_snapshot(self, snapshot: Snapshot) -> None:
        await self.websocket.send_json({
            "type": "state_update",
            "state": snapshot.to_dict(),
        })
        if snapshot.state is GameState.GAME_OVER:
            await self.websocket.send_json({
                "type": "game_over",
                "state": snapshot.to_dict(),
                "final_score": snapshot.score,
            })

    async def send_error(self, error: Exception) -> None:
        await self.websocket.send_json({
            "type": "error",
            "message": str(error),
        })

    async def handle_message(self, message: dict) -> None:
        if not isinstance(message, dict):
            raise ValueError("Message must be a JSON object")
        msg_type = message.get("type")

        if msg_type == "direction":
            request = DirectionMessage(**message)
            # Takes effect on the next tick
            self.game.set_direction(Direction.parse(request.direction))

        elif msg_type == "command":
            request = CommandMessage(**message)
            await self.apply_command(Command.parse(request.command))

        else:
            raise ValueError(f"Unknown message type: {msg_type!r}")

    async def apply_command(self, command: Command) -> None:
        # No tick may run while the lifecycle changes
        await self.loop.stop()
        self.game.handle_command(command)
        await self.send_snapshot(self.game.snapshot())
        self.loop.start()

    async def close(self) -> None:
        await self.loop.stop()


@app.websocket("/ws/game")
async def websocket_game(websocket: WebSocket):
    """WebSocket endpoint for real-time game communication."""
    await websocket.accept()

    session = GameSession(websocket, app.state.config)
    await session.send_snapshot(session.game.snapshot())
    # Configs may start the game already PLAYING
    session.loop.start()

    try:
        while True:
            data = await websocket.receive_text()
            try:
                await session.handle_message(json.loads(data))
            except (ValueError, ValidationError) as e:
                # json.JSONDecodeError is a ValueError
                await session.send_error(e)
    except WebSocketDisconnect:
        logger.info("Client disconnected")
    finally:
        await session.close()


def find_available_port(start_port: int = 8000, max_attempts: int = 100) -> int:
    """First port from start_port on that can be bound on all interfaces.

    Raises:
        RuntimeError: If none of the max_attempts ports is free
    """
    last_port = start_port + max_attempts - 1
    for port in range(start_port, last_port + 1):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as candidate:
            try:
                candidate.bind(("0.0.0.0", port))
            except OSError:
                continue
        return port

    raise RuntimeError(f"No free port between {start_port} and {last_port}")


def run(port: Optional[int] = None) -> None:
    import uvicorn

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    default_port = 8000
    port = port or int(os.environ.get("PORT", 0))
    if not port:
        port = find_available_port(default_port)
        if port != default_port:
            logger.info("Port %d is in use, using port %d instead", default_port, port)

    logger.info("Starting server at http://localhost:%d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
