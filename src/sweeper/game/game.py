"""
Game controller for Minesweeper.

Implements the game state machine: mine placement on the first reveal,
reveal/flag/chord dispatch, and win/lose detection.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

import numpy as np

from .cell import CellView
from .errors import InvalidConfiguration
from .events import (
    CellRevealed,
    EventBus,
    FlagToggled,
    GameEvent,
    GameLost,
    GameWon,
    Listener,
)
from .grid import Coordinate, Grid
from .placer import MinePlacer, RandomSource
from .reveal import RevealEngine

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


def max_safe_zone(width: int, height: int) -> int:
    """Size of the largest first-click safe zone a board can have."""
    return min(3, width) * min(3, height)


@dataclass
class GameConfig:
    """
    Configuration for a Minesweeper game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Seed for the default random source.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Ensure configuration values are valid.

        Mines must stay strictly below the number of cells outside the
        largest possible safe zone. Boards no bigger than that safe zone
        only allow zero mines.
        """
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.max_mines
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def max_mines(self) -> int:
        outside = self.width * self.height - max_safe_zone(self.width, self.height)
        return max(0, outside - 1)

    @property
    def safe_cells(self) -> int:
        return self.width * self.height - self.num_mines


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Minesweeper game.

    The only object callers drive directly. Each action runs to
    completion, cascade included, before subscribers are notified with
    the batch of events it produced.
    """

    def __init__(
        self,
        width: int = 9,
        height: int = 9,
        num_mines: int = 10,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Create a game. Mines are placed on the first reveal.

        Args:
            width: Number of columns.
            height: Number of rows.
            num_mines: Total mines to place.
            rng: Random source for mine placement. Defaults to
                random.Random(seed).
            seed: Seed for the default random source.

        Raises:
            InvalidConfiguration: If the board cannot hold the mines.
        """
        self.config = GameConfig(width, height, num_mines, seed)
        self._rng = rng if rng is not None else random.Random(seed)
        self._events = EventBus()
        self._new_board()

    @classmethod
    def from_config(
        cls, config: GameConfig, rng: Optional[RandomSource] = None
    ) -> "Game":
        """Create a game from an existing configuration."""
        return cls(
            config.width,
            config.height,
            config.num_mines,
            rng=rng,
            seed=config.seed,
        )

    def _new_board(self) -> None:
        self.grid = Grid(self.config.width, self.config.height)
        self._placer = MinePlacer(self.grid)
        self._engine = RevealEngine(self.grid)
        self._state = GameState.NOT_STARTED
        self._cells_revealed = 0
        self._flags_placed = 0

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Reveal the cell at (x, y).

        On the first reveal, places mines around a safe zone at this
        cell. Zero-count cells cascade to their neighbors. Revealing a
        mine loses the game.

        Raises:
            InvalidCoordinate: If (x, y) is off the grid.
        """
        self.grid.check_bounds(x, y)
        if self._state.is_terminal:
            return

        if self._state == GameState.NOT_STARTED:
            self._handle_first_reveal(x, y)

        events: List[GameEvent] = []
        self._reveal_cell(x, y, events)
        self._events.publish(events)

    def toggle_flag(self, x: int, y: int) -> None:
        """
        Place or remove a flag. Revealed cells cannot be flagged.

        Raises:
            InvalidCoordinate: If (x, y) is off the grid.
        """
        cell = self.grid.cell_at(x, y)
        if self._state.is_terminal:
            return
        if not cell.toggle_flag():
            return

        self._flags_placed += 1 if cell.is_flagged else -1
        self._events.publish([FlagToggled(x, y)])

    def chord(self, x: int, y: int) -> None:
        """
        Reveal all unflagged neighbors of a satisfied numbered cell.

        Only acts when (x, y) is revealed, has adjacent mines, and has
        exactly that many flagged neighbors.

        Raises:
            InvalidCoordinate: If (x, y) is off the grid.
        """
        self.grid.check_bounds(x, y)
        if not self._can_chord(x, y):
            return

        events: List[GameEvent] = []
        for neighbor_x, neighbor_y in self.grid.neighbors_of(x, y):
            if self._state != GameState.IN_PROGRESS:
                break
            self._reveal_cell(neighbor_x, neighbor_y, events)
        self._events.publish(events)

    def reset(self, rng: Optional[RandomSource] = None) -> None:
        """
        Discard the board and start over with the same configuration.

        Args:
            rng: New random source for mine placement. The current one
                is kept when omitted.
        """
        if rng is not None:
            self._rng = rng
        self._new_board()

    # ========================================================================
    # Internal Transitions
    # ========================================================================

    def _handle_first_reveal(self, x: int, y: int) -> None:
        """Place mines and start the game."""
        self._placer.generate((x, y), self.config.num_mines, self._rng)
        self._state = GameState.IN_PROGRESS

    def _reveal_cell(self, x: int, y: int, events: List[GameEvent]) -> None:
        """Reveal one cell and record the consequences in events."""
        result = self._engine.reveal(x, y)
        if not result.changed:
            return

        events.extend(CellRevealed(rx, ry) for rx, ry in result.revealed)
        if result.hit_mine:
            self._lose(events)
            return

        self._cells_revealed += len(result.revealed)
        self._check_win_condition(events)

    def _lose(self, events: List[GameEvent]) -> None:
        """End the game and clear flags that were not on mines."""
        self._state = GameState.LOST
        for (x, y), cell in self.grid.cells():
            if cell.is_flagged and not cell.is_mine:
                cell.mark_flagged_wrong()
                self._flags_placed -= 1
                events.append(FlagToggled(x, y))
        events.append(GameLost())
        logger.info("Game lost after revealing %d cells", self._cells_revealed)

    def _check_win_condition(self, events: List[GameEvent]) -> None:
        """Check if all non-mine cells are revealed."""
        if self._cells_revealed >= self.config.safe_cells:
            self._state = GameState.WON
            events.append(GameWon())
            logger.info("Game won on %dx%d board with %d mines",
                        self.config.width, self.config.height,
                        self.config.num_mines)

    def _can_chord(self, x: int, y: int) -> bool:
        """Check if chord action is valid."""
        if self._state != GameState.IN_PROGRESS:
            return False
        cell = self.grid.cell_at(x, y)
        if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
            return False
        return self._count_adjacent_flags(x, y) == cell.adjacent_mines

    def _count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_x, neighbor_y in self.grid.neighbors_of(x, y):
            if self.grid.cell_at(neighbor_x, neighbor_y).is_flagged:
                count += 1
        return count

    # ========================================================================
    # Subscriptions
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Receive a tuple of events after every action that changes the game.

        Returns:
            A callable that cancels the subscription.
        """
        return self._events.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Stop delivering events to listener."""
        self._events.unsubscribe(listener)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return not self._state.is_terminal

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    @property
    def cells_revealed(self) -> int:
        """Number of safe cells revealed so far."""
        return self._cells_revealed

    @property
    def safe_cells_remaining(self) -> int:
        return self.config.safe_cells - self._cells_revealed

    @property
    def flags_placed(self) -> int:
        return self._flags_placed

    @property
    def mines_remaining(self) -> int:
        """Mine count minus placed flags, as shown on a mine counter."""
        return self.config.num_mines - self._flags_placed

    def cell_view(self, x: int, y: int) -> CellView:
        """
        Get what may be shown about the cell at (x, y).

        Raises:
            InvalidCoordinate: If (x, y) is off the grid.
        """
        return self.grid.cell_at(x, y).to_view()

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for (x, y), cell in self.grid.cells():
            obs[y, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Coordinate]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (x, y) positions that are hidden and unflagged.
        """
        return [pos for pos, cell in self.grid.cells() if cell.is_hidden]

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of all mines, row by row. Empty before the first reveal."""
        return [pos for pos, cell in self.grid.cells() if cell.is_mine]
