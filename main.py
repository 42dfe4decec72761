#!/usr/bin/env python3
"""
sweeper - Main entry point.

Usage:
    python main.py simulate [--games N] [--width W] [--height H] [--mines M] [--seed S]
    python main.py play [--width W] [--height H] [--mines M] [--seed S]
"""
import argparse
import logging
from typing import Dict

from sweeper.agents import RandomAgent
from sweeper.game import Game, GameConfig, InvalidConfiguration
from sweeper.training import Evaluator


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Build a validated game configuration from CLI arguments."""
    return GameConfig(
        width=args.width,
        height=args.height,
        num_mines=args.mines,
        seed=args.seed,
    )


def simulate(args: argparse.Namespace) -> Dict[str, float]:
    """Evaluate the random agent over many seeded games."""
    config = config_from_args(args)
    agent = RandomAgent(seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(
        f"Simulating {args.games} games on {config.width}x{config.height} "
        f"with {config.num_mines} mines..."
    )
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    return results


def play(args: argparse.Namespace) -> Game:
    """Play one game with the random agent, printing each move."""
    config = config_from_args(args)
    game = Game.from_config(config)
    agent = RandomAgent(seed=args.seed)

    step = 0
    while game.is_playing:
        x, y = agent.select_move(game)
        game.reveal(x, y)
        step += 1
        print(
            f"Step {step}: reveal ({x}, {y}) -> {game.state.name} "
            f"({game.safe_cells_remaining} safe cells left)"
        )

    print(f"\nFinal: {game.state.name} after {step} moves")
    return game


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        description="sweeper - Minesweeper engine simulations"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--width", type=int, default=9, help="Board columns")
        sub.add_argument("--height", type=int, default=9, help="Board rows")
        sub.add_argument("--mines", type=int, default=10, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Evaluate the random agent"
    )
    add_board_args(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    play_parser = subparsers.add_parser(
        "play", help="Play one game with the random agent"
    )
    add_board_args(play_parser)

    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "simulate":
            simulate(args)
        elif args.command == "play":
            play(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
