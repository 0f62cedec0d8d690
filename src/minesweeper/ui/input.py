"""
Input adapter for the Minesweeper canvas.

Translates pointer events in canvas pixels into board actions and
redraws the cells those actions change.
"""
from typing import Callable, List, Optional, Tuple

from ..actions import reveal, toggle_flag_at
from ..board import CELL_SIZE, Board
from ..cell import CellState
from .renderer import Renderer


class InputAdapter:
    """
    Dispatches primary and secondary clicks to one board.

    The adapter owns the board it was constructed with; every action
    goes through that board and is drawn on the given renderer.
    """

    def __init__(
        self,
        board: Board,
        renderer: Renderer,
        cell_size: int = CELL_SIZE,
        origin: Tuple[int, int] = (0, 0),
        on_mine_revealed: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            board: Board the clicks act on.
            renderer: Renderer that changed cells are drawn on.
            cell_size: Side of one cell, in pixels.
            origin: Pixel offset (x, y) of the canvas within the page.
            on_mine_revealed: Called with (row, col) when a mine is clicked.
        """
        self.board = board
        self.renderer = renderer
        self.cell_size = cell_size
        self.origin = origin
        self.on_mine_revealed = on_mine_revealed

    def pixel_to_cell(self, px: int, py: int) -> Optional[Tuple[int, int]]:
        """
        Convert page pixel coordinates to a board position.

        Returns:
            (row, col), or None if the point is outside the board.
        """
        origin_x, origin_y = self.origin
        row = (py - origin_y) // self.cell_size
        col = (px - origin_x) // self.cell_size
        if not self.board.is_valid_position(row, col):
            return None
        return row, col

    def draw_board(self) -> None:
        """Draw the initial board, every cell unopened."""
        self.renderer.draw_empty_board()

    def on_primary_click(self, px: int, py: int) -> List[Tuple[int, int]]:
        """
        Reveal the cell under the pointer.

        Returns:
            Positions opened by the click.
        """
        position = self.pixel_to_cell(px, py)
        if position is None:
            return []
        row, col = position
        opened = reveal(self.board, row, col, on_mine_revealed=self._mine_revealed)
        for opened_row, opened_col in opened:
            cell = self.board.grid[opened_row][opened_col]
            x, y = self._cell_origin(opened_row, opened_col)
            self.renderer.draw_opened(x, y, cell.adjacent_mines or None)
        return opened

    def on_secondary_click(self, px: int, py: int) -> bool:
        """
        Toggle the flag on the cell under the pointer.

        Returns:
            True, meaning the default context menu is suppressed.
        """
        position = self.pixel_to_cell(px, py)
        if position is None:
            return True
        row, col = position
        state = toggle_flag_at(self.board, row, col)
        x, y = self._cell_origin(row, col)
        if state == CellState.FLAGGED:
            self.renderer.draw_flag(x, y)
        elif state == CellState.UNOPENED:
            self.renderer.draw_unopened(x, y)
        return True

    def _mine_revealed(self, row: int, col: int) -> None:
        x, y = self._cell_origin(row, col)
        self.renderer.draw_mine(x, y)
        if self.on_mine_revealed is not None:
            self.on_mine_revealed(row, col)

    def _cell_origin(self, row: int, col: int) -> Tuple[int, int]:
        return col * self.cell_size, row * self.cell_size
