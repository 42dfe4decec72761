"""
Pytest configuration and shared fixtures.
"""
import sys
from collections import deque
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Tuple

import pytest

# Add src and the project root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from sweeper.game import Cell, CellKind, Game, GameConfig, Grid


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """
    Random source that replays a fixed list of (x, y) draws.

    Each draw consumes two randrange calls: x first, then y.
    """

    def __init__(self, draws: Iterable[Tuple[int, int]]) -> None:
        self._values = deque(value for pos in draws for value in pos)

    def randrange(self, n: int) -> int:
        value = self._values.popleft()
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) // 2


@pytest.fixture
def scripted_random() -> type:
    """The ScriptedRandom class, for tests that drive a placer directly."""
    return ScriptedRandom


GameFactory = Callable[..., Game]


@pytest.fixture
def make_game() -> GameFactory:
    """
    Build a game whose mines are drawn from a script.

    Draws rejected by the placer (duplicates, safe zone) still consume
    script entries, so scripts may include them on purpose.
    """
    def factory(
        width: int,
        height: int,
        draws: Sequence[Tuple[int, int]],
        num_mines: Optional[int] = None,
    ) -> Game:
        count = len(draws) if num_mines is None else num_mines
        return Game(width, height, count, rng=ScriptedRandom(draws))

    return factory


@pytest.fixture
def wall_game(make_game: GameFactory) -> Game:
    """
    6x4 board with a wall of mines in column 3, not yet started.

    Revealing (0, 0) opens columns 0-2; revealing (5, 0) afterwards
    opens columns 4-5.
    """
    return make_game(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])


@pytest.fixture
def chord_game(make_game: GameFactory) -> Game:
    """
    5x3 board with mines at (2, 0) and (2, 2), opened at (0, 1).

    Columns 0-1 are revealed; (1, 1) shows 2.
    """
    game = make_game(5, 3, [(2, 0), (2, 2)])
    game.reveal(0, 1)
    return game


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game(seed=1234)


@pytest.fixture
def empty_game() -> Game:
    """Create a game with no mines for cascade testing."""
    return Game(5, 5, 0, seed=0)


# ============================================================================
# Cell and Grid Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=CellKind.MINE)


@pytest.fixture
def grid() -> Grid:
    """Create a 4x3 grid."""
    return Grid(4, 3)


@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(9, 9, 10)
