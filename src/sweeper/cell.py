"""
Cell module for the Minesweeper engine.

Represents individual squares of the grid: their content (mine and
neighbouring-mine count) and their markings (revealed, flag, question).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    QUESTIONED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Flag and question marks are plain markings: nothing in the engine reads
    them, and revealing a marked cell is allowed.

    Attributes:
        has_mine: Whether this cell contains a mine.
        flagged: Whether the cell is marked with a flag.
        questioned: Whether the cell is marked with a question mark.
        reserved: Unused placeholder.
        revealed: Whether the cell has been opened.
        coordinate: (row, col) position of this cell on its board.
        adjacent_mines: Count of mines in the 8 surrounding cells (0-8).
    """

    has_mine: bool = False
    flagged: bool = False
    questioned: bool = False
    reserved: bool = False
    revealed: bool = False
    coordinate: Tuple[int, int] = (0, 0)
    adjacent_mines: int = 0

    def reveal(self) -> None:
        """Open this cell; opening it again changes nothing."""
        self.revealed = True

    @property
    def state(self) -> CellState:
        """Visual state, revealed taking precedence over any marking."""
        if self.revealed:
            return CellState.REVEALED
        if self.flagged:
            return CellState.FLAGGED
        if self.questioned:
            return CellState.QUESTIONED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still closed."""
        return not self.revealed

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Question-marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        state = self.state
        if state == CellState.HIDDEN:
            return -1
        if state == CellState.FLAGGED:
            return -2
        if state == CellState.QUESTIONED:
            return -3
        if self.has_mine:
            return 9
        return self.adjacent_mines
