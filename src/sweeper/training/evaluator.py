"""
Evaluation harness for Minesweeper agents.

Plays seeded episodes through the environment and aggregates results.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..agents.player import Player
from ..game.environment import MinesweeperEnv
from ..game.game import GameConfig

logger = logging.getLogger(__name__)


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    revealed_cells: int = 0


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Episode i is seeded with seed + i when a seed is given, so two
    evaluators with the same seed play the same boards.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Game configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode (default: cell count).
            seed: Base seed for mine placement.
        """
        self.config = config or GameConfig()
        self.num_episodes = num_episodes
        if max_steps is None:
            max_steps = self.config.width * self.config.height
        self.max_steps = max_steps
        self.seed = seed

    def run_episode(
        self, agent: Player, env: MinesweeperEnv, episode: int = 0
    ) -> EpisodeStats:
        """Play one episode and return its statistics."""
        stats = EpisodeStats()
        seed = None if self.seed is None else self.seed + episode
        env.reset(seed=seed)

        for _ in range(self.max_steps):
            x, y = agent.select_move(env.game)
            _, reward, terminated, truncated, info = env.step(
                y * self.config.width + x
            )

            stats.total_reward += float(reward)
            stats.steps += 1
            stats.revealed_cells = info["revealed"]

            if terminated or truncated:
                stats.won = info["game_state"] == "WON"
                break

        return stats

    def evaluate(self, agent: Player) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(config=self.config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            stats = self.run_episode(agent, env, episode)
            wins += int(stats.won)
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_revealed += stats.revealed_cells

        logger.debug(
            "%s won %d of %d episodes",
            type(agent).__name__, wins, self.num_episodes,
        )
        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, Player]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents on the same boards.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s...", name)
            results[name] = self.evaluate(agent)
        return results
