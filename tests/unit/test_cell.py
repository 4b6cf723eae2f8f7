"""
Unit tests for Cell class.

Tests cell defaults, reveal behavior, visual state and observation values.
"""
import pytest
from sweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.has_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden and unmarked by default."""
        cell = Cell()
        assert cell.revealed is False
        assert cell.flagged is False
        assert cell.questioned is False
        assert cell.reserved is False
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0

    def test_cell_keeps_coordinate(self) -> None:
        """Cell should remember the position it was created with."""
        cell = Cell(coordinate=(3, 5))
        assert cell.coordinate == (3, 5)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_opens_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should open it."""
        hidden_cell.reveal()
        assert hidden_cell.revealed is True
        assert hidden_cell.is_hidden is False

    def test_reveal_twice_keeps_cell_open(self, hidden_cell: Cell) -> None:
        """Revealing an already revealed cell leaves it revealed."""
        hidden_cell.reveal()
        hidden_cell.reveal()
        assert hidden_cell.revealed is True

    def test_reveal_flagged_cell_is_allowed(self, hidden_cell: Cell) -> None:
        """Flags are markings only and do not block a reveal."""
        hidden_cell.flagged = True
        hidden_cell.reveal()
        assert hidden_cell.revealed is True


# ============================================================================
# Cell State Tests
# ============================================================================

class TestCellState:
    """Test the derived visual state."""

    def test_flagged_state(self, hidden_cell: Cell) -> None:
        """Flagged hidden cell reports FLAGGED."""
        hidden_cell.flagged = True
        assert hidden_cell.state == CellState.FLAGGED

    def test_questioned_state(self, hidden_cell: Cell) -> None:
        """Question-marked hidden cell reports QUESTIONED."""
        hidden_cell.questioned = True
        assert hidden_cell.state == CellState.QUESTIONED

    def test_flag_takes_precedence_over_question(
        self, hidden_cell: Cell
    ) -> None:
        """A cell carrying both marks shows the flag."""
        hidden_cell.flagged = True
        hidden_cell.questioned = True
        assert hidden_cell.state == CellState.FLAGGED

    def test_revealed_takes_precedence_over_marks(
        self, hidden_cell: Cell
    ) -> None:
        """Revealed cells ignore any leftover marking."""
        hidden_cell.flagged = True
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.flagged = True
        assert hidden_cell.to_observation() == -2

    def test_questioned_cell_observation_is_negative_three(
        self, hidden_cell: Cell
    ) -> None:
        """Question-marked cell should return -3 for observation."""
        hidden_cell.questioned = True
        assert hidden_cell.to_observation() == -3

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
