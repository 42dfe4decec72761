"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard agent interface on top of the game controller.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .events import CellRevealed, GameEvent, GameLost, GameWon
from .game import Game, GameConfig


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at x = i % width, y = i // width.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or GameConfig()
        self.game = Game.from_config(self.config)
        self.game.subscribe(self._record_events)
        self._last_events: Tuple[GameEvent, ...] = ()

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0

    def _record_events(self, events: Tuple[GameEvent, ...]) -> None:
        self._last_events = events

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.reset(rng=None if seed is None else random.Random(seed))
        self._steps = 0
        self._last_events = ()

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell selected by action.

        Args:
            action: Cell index (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        self._last_events = ()
        self.game.reveal(x, y)
        reward = self._calculate_reward(self._last_events)

        observation = self.game.get_observation()
        terminated = not self.game.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    @staticmethod
    def _calculate_reward(events: Tuple[GameEvent, ...]) -> float:
        """Score the batch of events produced by one reveal."""
        if not any(isinstance(event, CellRevealed) for event in events):
            return -0.1
        if any(isinstance(event, GameWon) for event in events):
            return 10.0
        if any(isinstance(event, GameLost) for event in events):
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.cells_revealed,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": len(self.game.get_valid_actions()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.game.get_valid_actions():
            mask[y * self.config.width + x] = True
        return mask
