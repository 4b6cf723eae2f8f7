"""
Board module for the Minesweeper engine.

Implements the game board with coordinate validation, mine placement with
incremental neighbour counts, and the cascade reveal.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

MIN_HEIGHT = 8
MAX_HEIGHT = 50
MIN_WIDTH = 8
MAX_WIDTH = 50

# Cascade propagation order: N, E, S, W
CASCADE_DIRECTIONS: Tuple[Coordinate, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """Outcome of a reveal at a single coordinate."""

    REVEALED = auto()
    OUT_OF_BOUNDS = auto()
    ALREADY_REVEALED = auto()
    ALREADY_VISITED = auto()
    HIT_MINE = auto()
    BOARD_CLEARED = auto()


@dataclass
class BoardConfig:
    """
    Dimensions of a Minesweeper board.

    The MIN/MAX limits are policy for the setup layers; the board itself
    accepts any positive size.

    Attributes:
        height: Number of rows.
        width: Number of columns.
    """

    height: int = MIN_HEIGHT
    width: int = MIN_WIDTH

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.height < 1 or self.width < 1:
            raise ValueError("Board dimensions must be positive")

    @property
    def within_limits(self) -> bool:
        """Check the dimensions against the MIN/MAX policy bounds."""
        return (
            MIN_HEIGHT <= self.height <= MAX_HEIGHT
            and MIN_WIDTH <= self.width <= MAX_WIDTH
        )

    @property
    def total_cells(self) -> int:
        return self.height * self.width


SMALLEST = BoardConfig(MIN_HEIGHT, MIN_WIDTH)
LARGEST = BoardConfig(MAX_HEIGHT, MAX_WIDTH)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, the mine total, the count of safely revealed
    cells and the player-alive flag. None of the grid operations raise on
    an out-of-range coordinate; they report it through their return value.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    num_mines: int = field(default=0, init=False)
    cleared_cells: int = field(default=0, init=False)
    is_player_alive: bool = field(default=True, init=False)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _visited: Dict[Coordinate, None] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a blank grid where every cell caches its own position."""
        self._grid = [
            [Cell(coordinate=(row, col)) for col in range(self.width)]
            for row in range(self.height)
        ]

    def reset(self, config: Optional[BoardConfig] = None) -> None:
        """
        Reset the board to a blank, mine-free grid.

        Args:
            config: New dimensions; keeps the current ones if omitted.
        """
        if config is not None:
            self.config = config
        self._init_grid()
        self.num_mines = 0
        self.cleared_cells = 0
        self.is_player_alive = True
        self._visited.clear()

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def _get_neighbors(self, row: int, col: int) -> List[Coordinate]:
        """
        Get valid positions of the 8 surrounding cells.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """
        Count mines among the 8 cells surrounding a position.

        Off-grid neighbours are skipped. This scans the grid and does not
        read the counts kept by set_mine.

        Returns:
            Number of neighbouring mines, or -1 if the position is invalid.
        """
        if not self.is_valid_position(row, col):
            return -1
        return sum(
            1 for neighbor_row, neighbor_col in self._get_neighbors(row, col)
            if self._grid[neighbor_row][neighbor_col].has_mine
        )

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    def set_mine(self, row: int, col: int) -> bool:
        """
        Place a mine and bump the neighbour count of surrounding cells.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if a mine was placed, False if the position is invalid or
            already holds a mine.
        """
        if not self.is_valid_position(row, col):
            logger.debug(f"Ignoring mine at invalid position ({row}, {col})")
            return False

        cell = self._grid[row][col]
        if cell.has_mine:
            logger.debug(f"Ignoring duplicate mine at ({row}, {col})")
            return False

        cell.has_mine = True
        self.num_mines += 1
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            self._grid[neighbor_row][neighbor_col].adjacent_mines += 1
        return True

    def place_mines(self, positions: Iterable[Coordinate]) -> int:
        """
        Place a mine at each position in turn.

        Returns:
            Number of mines actually placed.
        """
        return sum(1 for row, col in positions if self.set_mine(row, col))

    # ========================================================================
    # Cascade Reveal (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int, initial: bool = True) -> RevealResult:
        """
        Reveal a cell and cascade through connected empty cells.

        An initial call is the player's own choice: it starts a fresh pass
        and a mine there kills the player. Cells with no neighbouring mines
        spread the reveal to their orthogonal neighbours (N, E, S, W),
        depth first; numbered cells are revealed but stop the spread, and
        mines met while spreading are left hidden. The pass stops as soon
        as every safe cell has been visited.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.
            initial: False when continuing an existing pass.

        Returns:
            Outcome at the requested position.
        """
        if initial:
            self._visited.clear()

        result = self._reveal_single(row, col, initial)
        if result == RevealResult.REVEALED:
            self._cascade(row, col)
            logger.debug(
                f"Reveal at ({row}, {col}) opened {len(self._visited)} cells"
            )
        return result

    def _reveal_single(self, row: int, col: int, initial: bool) -> RevealResult:
        """Reveal one cell without spreading."""
        if self._pass_complete:
            return RevealResult.BOARD_CLEARED
        if not self.is_valid_position(row, col):
            return RevealResult.OUT_OF_BOUNDS

        cell = self._grid[row][col]
        if cell.revealed:
            return RevealResult.ALREADY_REVEALED
        if (row, col) in self._visited:
            return RevealResult.ALREADY_VISITED

        if cell.has_mine:
            if initial:
                self.is_player_alive = False
                logger.debug(f"Mine hit at ({row}, {col})")
            return RevealResult.HIT_MINE

        cell.reveal()
        self.cleared_cells += 1
        self._visited[cell.coordinate] = None
        return RevealResult.REVEALED

    def _cascade(self, row: int, col: int) -> None:
        """Spread a reveal from an opened cell using an explicit stack."""
        stack: List[Coordinate] = []
        self._push_spread_targets(stack, row, col)
        while stack and not self._pass_complete:
            next_row, next_col = stack.pop()
            result = self._reveal_single(next_row, next_col, initial=False)
            if result == RevealResult.REVEALED:
                self._push_spread_targets(stack, next_row, next_col)

    def _push_spread_targets(
        self, stack: List[Coordinate], row: int, col: int
    ) -> None:
        """Push orthogonal neighbours of an empty cell, N ending on top."""
        if self._grid[row][col].adjacent_mines != 0:
            return
        for delta_row, delta_col in reversed(CASCADE_DIRECTIONS):
            stack.append((row + delta_row, col + delta_col))

    @property
    def _pass_complete(self) -> bool:
        return len(self._visited) >= self.safe_cells

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.config.total_cells - self.num_mines

    @property
    def visited(self) -> Tuple[Coordinate, ...]:
        """Positions opened by the current reveal pass, in reveal order."""
        return tuple(self._visited)

    @property
    def is_won(self) -> bool:
        """Check if every safe cell is open and the player survived."""
        return self.is_player_alive and self.cleared_cells >= self.safe_cells

    @property
    def is_lost(self) -> bool:
        return not self.is_player_alive

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.is_lost:
            return GameState.LOST
        if self.is_won:
            return GameState.WON
        return GameState.PLAYING

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in self._grid:
            yield from row

    def get_hidden_positions(self) -> List[Coordinate]:
        """
        Get positions of cells that are not revealed yet.

        Returns:
            List of (row, col) positions in row-major order.
        """
        return [cell.coordinate for cell in self.iter_cells() if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of Cell.to_observation() values.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.iter_cells():
            obs[cell.coordinate] = cell.to_observation()
        return obs
