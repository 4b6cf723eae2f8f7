"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src (package imports) and the project root (entry points) to path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from sweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create an 8x8 board with no mines for cascade testing."""
    return Board(BoardConfig(8, 8))


@pytest.fixture
def corner_mine_board() -> Board:
    """Create an 8x8 board with a single mine at (0, 0)."""
    board = Board(BoardConfig(8, 8))
    board.set_mine(0, 0)
    return board


@pytest.fixture
def center_mine_board() -> Board:
    """Create an 8x8 board with a single mine at (4, 4)."""
    board = Board(BoardConfig(8, 8))
    board.set_mine(4, 4)
    return board


@pytest.fixture
def wall_board() -> Board:
    """Create an 8x8 board with a column of mines at col 3."""
    board = Board(BoardConfig(8, 8))
    board.place_mines((row, 3) for row in range(8))
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)
