"""
Grid module for Minesweeper game.

Fixed-size 2D collection of cells addressed by (x, y) coordinates,
where x is the column and y is the row.
"""
from typing import Iterator, List, Set, Tuple

from .cell import Cell
from .errors import InvalidCoordinate

Coordinate = Tuple[int, int]


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular board of cells with bounds-checked neighbor lookups.

    Cells are stored row by row; a cell's identity is its coordinate,
    and neighbor enumeration is a pure function of the coordinate and
    the grid bounds.
    """

    def __init__(self, width: int, height: int) -> None:
        """
        Create a grid of hidden, empty cells.

        Args:
            width: Number of columns.
            height: Number of rows.
        """
        self.width = width
        self.height = height
        self._rows: List[List[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    def __len__(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, x: int, y: int) -> None:
        """Raise InvalidCoordinate unless (x, y) is on the grid."""
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self.width, self.height)

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            InvalidCoordinate: If the position is off the grid.
        """
        self.check_bounds(x, y)
        return self._rows[y][x]

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors_of(self, x: int, y: int) -> List[Coordinate]:
        """
        Get valid neighboring positions.

        Order is row-major (top row first, left to right) so results
        are reproducible.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            List of up to 8 (x, y) tuples, excluding the center.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def safe_zone(self, x: int, y: int) -> Set[Coordinate]:
        """The position itself plus all of its neighbors."""
        zone = set(self.neighbors_of(x, y))
        zone.add((x, y))
        return zone

    # ========================================================================
    # Iteration
    # ========================================================================

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Yield ((x, y), cell) pairs, row by row."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield (x, y), cell
