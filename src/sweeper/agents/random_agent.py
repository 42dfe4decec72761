"""
Random player for Minesweeper.

Serves as a baseline for evaluation runs and drives randomized games
in tests.
"""
from typing import Optional, Sequence

import numpy as np

from ..game.game import Game
from ..game.grid import Coordinate


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent:
    """
    Reveals a uniformly chosen hidden, unflagged cell.

    Only what the game exposes to any collaborator is used: the list of
    cells that can still be revealed.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Args:
            seed: Seed for numpy's default generator.
        """
        self.rng = np.random.default_rng(seed)

    def choose(self, candidates: Sequence[Coordinate]) -> Coordinate:
        """
        Pick one of candidates.

        Raises:
            ValueError: If there is nothing to choose from.
        """
        if not candidates:
            raise ValueError("No cells left to reveal")
        return candidates[int(self.rng.integers(len(candidates)))]

    def select_move(self, game: Game) -> Coordinate:
        """Pick the next cell to reveal in game."""
        return self.choose(game.get_valid_actions())
