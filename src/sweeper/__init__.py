"""
sweeper - Minesweeper game engine.

Board generation with a safe first click, cascading reveals, and a
win/loss state machine, plus a gymnasium environment for agents.
"""
from .game import (
    CellView,
    Game,
    GameConfig,
    GameState,
    InvalidConfiguration,
    InvalidCoordinate,
    MinesweeperEnv,
)

__version__ = "0.1.0"

__all__ = [
    "CellView",
    "Game",
    "GameConfig",
    "GameState",
    "InvalidConfiguration",
    "InvalidCoordinate",
    "MinesweeperEnv",
]
