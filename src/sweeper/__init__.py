"""
Minesweeper engine module.

Provides the board model, mine placement, cascade reveal, text rendering
and a Gymnasium environment.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    Coordinate,
    GameState,
    RevealResult,
    SMALLEST,
    LARGEST,
    MIN_HEIGHT,
    MAX_HEIGHT,
    MIN_WIDTH,
    MAX_WIDTH,
)
from .render import render_cell, render_border, render_grid
from .environment import CascadeEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "Coordinate",
    "GameState",
    "RevealResult",
    "SMALLEST",
    "LARGEST",
    "MIN_HEIGHT",
    "MAX_HEIGHT",
    "MIN_WIDTH",
    "MAX_WIDTH",
    "render_cell",
    "render_border",
    "render_grid",
    "CascadeEnv",
]
