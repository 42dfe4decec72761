"""
Unit tests for the reveal engine.

Tests single reveals, the zero-count cascade and flag blocking.
"""
import random
from typing import Sequence, Set, Tuple

import pytest
from sweeper.game import Grid, MinePlacer, RevealEngine


@pytest.fixture
def build_grid(scripted_random: type):
    """Build a grid with mines drawn from a script around a safe origin."""
    def factory(
        width: int,
        height: int,
        mines: Sequence[Tuple[int, int]],
        origin: Tuple[int, int] = (0, 0),
    ) -> Grid:
        grid = Grid(width, height)
        MinePlacer(grid).generate(origin, len(mines), scripted_random(mines))
        return grid

    return factory


def revealed_positions(grid: Grid) -> Set[Tuple[int, int]]:
    return {pos for pos, cell in grid.cells() if cell.is_revealed}


# ============================================================================
# Single Reveal Tests
# ============================================================================

class TestSingleReveal:
    """Test revealing numbered cells and mines."""

    def test_numbered_cell_reveals_only_itself(self, build_grid) -> None:
        grid = build_grid(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])
        result = RevealEngine(grid).reveal(2, 1)

        assert result.revealed == [(2, 1)]
        assert result.hit_mine is False
        assert revealed_positions(grid) == {(2, 1)}

    def test_mine_is_reported(self, build_grid) -> None:
        """The engine reports a mine hit without cascading."""
        grid = build_grid(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])
        result = RevealEngine(grid).reveal(3, 2)

        assert result.hit_mine is True
        assert result.revealed == [(3, 2)]
        assert grid.cell_at(3, 2).is_revealed is True

    def test_revealed_cell_is_noop(self, build_grid) -> None:
        grid = build_grid(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])
        engine = RevealEngine(grid)
        engine.reveal(2, 1)

        result = engine.reveal(2, 1)
        assert result.changed is False
        assert result.revealed == []

    def test_flagged_cell_is_noop(self, build_grid) -> None:
        grid = build_grid(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])
        grid.cell_at(3, 0).toggle_flag()

        result = RevealEngine(grid).reveal(3, 0)

        assert result.changed is False
        assert result.hit_mine is False
        assert grid.cell_at(3, 0).is_flagged is True


# ============================================================================
# Cascade Tests
# ============================================================================

class TestCascade:
    """Test zero-count flood fill."""

    def test_cascade_stops_at_numbered_border(self, build_grid) -> None:
        """Zero region plus its numbered border, nothing past the wall."""
        grid = build_grid(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])
        result = RevealEngine(grid).reveal(0, 0)

        expected = {(x, y) for x in range(3) for y in range(4)}
        assert set(result.revealed) == expected
        assert len(result.revealed) == len(expected)
        assert revealed_positions(grid) == expected

    def test_cascade_reveals_whole_board_without_mines(self) -> None:
        grid = Grid(5, 5)
        MinePlacer(grid).generate((2, 2), 0, random.Random(0))

        result = RevealEngine(grid).reveal(2, 2)

        assert len(result.revealed) == 25
        assert result.revealed[0] == (2, 2)

    def test_cascade_from_center_of_known_layout(self, build_grid) -> None:
        """Mines in three corners leave every safe cell connected."""
        grid = build_grid(5, 5, [(0, 0), (4, 4), (0, 4)], origin=(2, 2))
        result = RevealEngine(grid).reveal(2, 2)

        mines = {(0, 0), (4, 4), (0, 4)}
        expected = {pos for pos in grid.coordinates()} - mines
        assert set(result.revealed) == expected

    def test_cascade_never_reveals_mines(self) -> None:
        for seed in range(10):
            grid = Grid(10, 10)
            MinePlacer(grid).generate((5, 5), 20, random.Random(seed))
            RevealEngine(grid).reveal(5, 5)
            assert not any(
                cell.is_mine and cell.is_revealed for _, cell in grid.cells()
            )

    def test_each_cell_revealed_once(self) -> None:
        grid = Grid(12, 12)
        MinePlacer(grid).generate((0, 0), 10, random.Random(7))
        result = RevealEngine(grid).reveal(0, 0)
        assert len(result.revealed) == len(set(result.revealed))

    def test_large_board_cascade(self) -> None:
        """Cascade depth is not limited by the call stack."""
        grid = Grid(300, 300)
        MinePlacer(grid).generate((0, 0), 0, random.Random(0))

        result = RevealEngine(grid).reveal(0, 0)

        assert len(result.revealed) == 300 * 300


# ============================================================================
# Flag Blocking Tests
# ============================================================================

class TestCascadeFlags:
    """Flags are a hard stop for the cascade."""

    def test_flag_cuts_single_row_cascade(self) -> None:
        grid = Grid(7, 1)
        MinePlacer(grid).generate((0, 0), 0, random.Random(0))
        grid.cell_at(3, 0).toggle_flag()

        result = RevealEngine(grid).reveal(0, 0)

        assert result.revealed == [(0, 0), (1, 0), (2, 0)]
        assert grid.cell_at(3, 0).is_flagged is True
        assert all(grid.cell_at(x, 0).is_hidden for x in range(4, 7))

    def test_flagged_zero_cell_inside_region_stays_hidden(self, build_grid) -> None:
        grid = build_grid(6, 4, [(3, 0), (3, 1), (3, 2), (3, 3)])
        grid.cell_at(1, 2).toggle_flag()

        result = RevealEngine(grid).reveal(0, 0)

        expected = {(x, y) for x in range(3) for y in range(4)} - {(1, 2)}
        assert set(result.revealed) == expected
        assert grid.cell_at(1, 2).is_flagged is True
