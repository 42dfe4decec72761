"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/empty).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class CellKind(Enum):
    """What a cell contains. Fixed once mines are placed."""

    EMPTY = auto()
    MINE = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        kind: Whether this cell is empty or holds a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
        flagged_wrong: Set when the game is lost on a flag that did
            not cover a mine.
    """

    kind: CellKind = CellKind.EMPTY
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    flagged_wrong: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def mark_flagged_wrong(self) -> None:
        """Drop the flag from a non-mine cell and remember it was wrong."""
        self.state = CellState.HIDDEN
        self.flagged_wrong = True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind == CellKind.MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_view(self) -> "CellView":
        """Build the read-only view handed to collaborators."""
        if not self.is_revealed:
            return CellView(
                revealed=False,
                flagged=self.is_flagged,
                flagged_wrong=self.flagged_wrong,
            )
        return CellView(
            revealed=True,
            flagged=False,
            flagged_wrong=self.flagged_wrong,
            adjacent_mines=None if self.is_mine else self.adjacent_mines,
            is_mine=self.is_mine,
        )

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What a collaborator may know about a cell.

    Mine identity and adjacent count are withheld (None) until the cell
    is revealed.
    """

    revealed: bool
    flagged: bool
    flagged_wrong: bool
    adjacent_mines: Optional[int] = None
    is_mine: Optional[bool] = None
