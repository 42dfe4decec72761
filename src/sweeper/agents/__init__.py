"""
Minesweeper players module.

- Player: Interface for anything that picks moves in a Game
- RandomAgent: Baseline random selection
"""
from .player import Player
from .random_agent import RandomAgent

__all__ = [
    "Player",
    "RandomAgent",
]
