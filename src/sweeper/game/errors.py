"""
Exception types raised by the Minesweeper engine.

Actions on a finished game are not errors; they are silently ignored.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Raised when a board cannot be built from the given parameters."""


class InvalidCoordinate(MinesweeperError, IndexError):
    """Raised when an action targets a position outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y
