"""
Player interface for driving a game.
"""
from typing import Protocol

from ..game.game import Game
from ..game.grid import Coordinate


class Player(Protocol):
    """Anything that picks the next cell to reveal in a running game."""

    def select_move(self, game: Game) -> Coordinate:
        ...
