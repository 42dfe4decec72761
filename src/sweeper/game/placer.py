"""
Mine placement for Minesweeper boards.

Mines are placed lazily on the first reveal so the first cell opened,
and its neighbors, are always safe.
"""
import logging
from typing import Protocol, Set

from .cell import CellKind
from .errors import InvalidConfiguration
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [0, n)."""

    def randrange(self, n: int) -> int:
        ...


# ============================================================================
# Mine Placer
# ============================================================================

class MinePlacer:
    """
    Assigns mines to a grid and computes adjacent mine counts.

    A placer may run only once per grid.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._placed = False

    @property
    def placed(self) -> bool:
        """Whether mines have been placed on the grid."""
        return self._placed

    def generate(
        self, safe_origin: Coordinate, num_mines: int, rng: RandomSource
    ) -> Set[Coordinate]:
        """
        Place mines randomly, keeping the 3x3 area around safe_origin clear.

        Args:
            safe_origin: (x, y) of the first revealed cell.
            num_mines: Number of mines to place.
            rng: Random source used for every draw.

        Returns:
            Set of mine positions.

        Raises:
            InvalidConfiguration: If the mines do not fit outside the
                safe zone.
            RuntimeError: If mines were already placed on this grid.
        """
        if self._placed:
            raise RuntimeError("Mines have already been placed")

        safe_zone = self.grid.safe_zone(*safe_origin)
        available = len(self.grid) - len(safe_zone)
        if num_mines > available:
            raise InvalidConfiguration(
                f"Cannot place {num_mines} mines outside the safe zone "
                f"({available} cells available)"
            )

        mines = self._draw_mines(safe_zone, num_mines, rng)
        for x, y in mines:
            self.grid.cell_at(x, y).kind = CellKind.MINE
        self._calculate_adjacent_mines()
        self._placed = True

        logger.debug(
            "Placed %d mines on %dx%d grid, safe origin %s",
            num_mines, self.grid.width, self.grid.height, safe_origin,
        )
        return mines

    def _draw_mines(
        self, safe_zone: Set[Coordinate], num_mines: int, rng: RandomSource
    ) -> Set[Coordinate]:
        """Draw positions until num_mines distinct unsafe ones are accepted."""
        mines: Set[Coordinate] = set()
        while len(mines) < num_mines:
            x = rng.randrange(self.grid.width)
            y = rng.randrange(self.grid.height)
            if (x, y) in mines or (x, y) in safe_zone:
                continue
            mines.add((x, y))
        return mines

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for (x, y), cell in self.grid.cells():
            if not cell.is_mine:
                cell.adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self.grid.neighbors_of(x, y):
            if self.grid.cell_at(neighbor_x, neighbor_y).is_mine:
                count += 1
        return count
