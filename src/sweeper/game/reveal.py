"""
Reveal engine for Minesweeper.

Opens single cells and cascades through connected zero-count regions.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)


@dataclass
class RevealResult:
    """
    Outcome of a single reveal.

    Attributes:
        revealed: Positions opened by this reveal, in reveal order.
        hit_mine: Whether the target cell was a mine.
    """

    revealed: List[Coordinate] = field(default_factory=list)
    hit_mine: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.revealed)


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Reveals cells on a grid.

    The engine reports a mine hit but never changes the game state
    itself; that is left to the caller.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal the cell at (x, y), cascading from zero-count cells.

        Revealed and flagged cells are left untouched.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            RevealResult listing every opened position.
        """
        result = RevealResult()
        cell = self.grid.cell_at(x, y)
        if not cell.reveal():
            return result

        result.revealed.append((x, y))
        if cell.is_mine:
            result.hit_mine = True
            return result

        if cell.adjacent_mines == 0:
            self._cascade(x, y, result)
        return result

    def _cascade(self, x: int, y: int, result: RevealResult) -> None:
        """
        Open the zero-count region around (x, y) and its numbered border.

        Cells are revealed as they are pushed, so each one enters the
        work-list at most once. Flags stop the cascade.
        """
        pending = [(x, y)]
        while pending:
            current_x, current_y = pending.pop()
            for neighbor_x, neighbor_y in self.grid.neighbors_of(
                current_x, current_y
            ):
                neighbor = self.grid.cell_at(neighbor_x, neighbor_y)
                if neighbor.is_mine or not neighbor.is_hidden:
                    continue
                neighbor.reveal()
                result.revealed.append((neighbor_x, neighbor_y))
                if neighbor.adjacent_mines == 0:
                    pending.append((neighbor_x, neighbor_y))

        logger.debug(
            "Cascade from (%d, %d) opened %d cells",
            x, y, len(result.revealed),
        )
