"""
Minesweeper game module.

Provides the game core (board generation, flood-fill reveal, flag
toggling) and a gymnasium environment for clicking on the canvas.
"""
from .cell import Cell, CellState
from .placement import place_mines
from .board import (
    Board,
    BoardConfig,
    DEFAULT,
    CELL_SIZE,
    create_grid,
    apply_mines,
    compute_adjacency,
    new_board,
)
from .actions import reveal, toggle_flag, toggle_flag_at
from .environment import ClickEnv

__all__ = [
    "Cell",
    "CellState",
    "place_mines",
    "Board",
    "BoardConfig",
    "DEFAULT",
    "CELL_SIZE",
    "create_grid",
    "apply_mines",
    "compute_adjacency",
    "new_board",
    "reveal",
    "toggle_flag",
    "toggle_flag_at",
    "ClickEnv",
]
