"""
Minesweeper game module.

Provides core game logic: grid, mine placement, reveal cascade and
the game state machine.
"""
from .cell import Cell, CellKind, CellState, CellView
from .errors import InvalidConfiguration, InvalidCoordinate, MinesweeperError
from .events import CellRevealed, EventBus, FlagToggled, GameEvent, GameLost, GameWon
from .grid import Coordinate, Grid
from .placer import MinePlacer
from .reveal import RevealEngine, RevealResult
from .game import Game, GameConfig, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellKind",
    "CellState",
    "CellView",
    "MinesweeperError",
    "InvalidConfiguration",
    "InvalidCoordinate",
    "CellRevealed",
    "FlagToggled",
    "GameWon",
    "GameLost",
    "GameEvent",
    "EventBus",
    "Coordinate",
    "Grid",
    "MinePlacer",
    "RevealEngine",
    "RevealResult",
    "Game",
    "GameConfig",
    "GameState",
    "MinesweeperEnv",
]
