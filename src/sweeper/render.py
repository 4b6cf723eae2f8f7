"""
Text rendering of a Minesweeper board.

Draws the grid as a bordered table with row and column headers. Renderers
only read board state.
"""
from typing import List

from .board import Board
from .cell import Cell, CellState


HIDDEN_SYMBOLS = {
    CellState.HIDDEN: "H",
    CellState.FLAGGED: "F",
    CellState.QUESTIONED: "?",
}


def render_cell(cell: Cell) -> str:
    """
    Render a single cell as one character.

    Hidden cells show H, F (flag) or ? (question). Revealed cells show M
    for a mine, the neighbouring-mine count, or a blank when it is zero.
    """
    if not cell.revealed:
        return HIDDEN_SYMBOLS[cell.state]
    if cell.has_mine:
        return "M"
    if cell.adjacent_mines != 0:
        return str(cell.adjacent_mines)
    return " "


def render_border(width: int) -> str:
    """Horizontal rule spanning the row-label column and `width` cells."""
    return "+----+" + "---+" * width


def _column_label(col: int) -> str:
    if col < 10:
        return f" {col} "
    return f"{col:>3}"


def _row_label(row: int) -> str:
    return f"{row:>3}  "


def render_grid(board: Board) -> str:
    """
    Render the whole board as a table.

    Args:
        board: Board to draw.

    Returns:
        Multi-line string; every header and grid row is followed by a
        border line.
    """
    border = render_border(board.width)
    header = "     |" + "".join(
        _column_label(col) + "|" for col in range(board.width)
    )

    lines: List[str] = [header, border]
    for row in range(board.height):
        cells = "".join(
            f" {render_cell(board.get_cell(row, col))} |"
            for col in range(board.width)
        )
        lines.append(_row_label(row) + "|" + cells)
        lines.append(border)

    return "\n".join(lines)
