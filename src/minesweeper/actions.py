"""
Player actions for Minesweeper.

Reveal with flood fill of zero-count regions, and flag toggling.
Both take the board explicitly; nothing here holds game state.
"""
from typing import Callable, List, Optional, Tuple

from .board import Board
from .cell import Cell, CellState


MineCallback = Callable[[int, int], None]


# ============================================================================
# Reveal
# ============================================================================

def reveal(
    board: Board,
    row: int,
    col: int,
    on_mine_revealed: Optional[MineCallback] = None,
) -> List[Tuple[int, int]]:
    """
    Reveal a cell at the given position.

    Revealing a mine, flagged or not, leaves its state untouched and
    reports it through ``on_mine_revealed``. Flagged safe cells stay
    closed. Revealing a cell with no adjacent mines opens
    its whole zero region and the numbered cells bordering it.

    Args:
        board: Board to act on. Adjacency counts must be computed.
        row: Row index to reveal.
        col: Column index to reveal.
        on_mine_revealed: Called with (row, col) when the target is a mine.

    Returns:
        Positions opened by this call, in opening order. Empty if the
        position is out of bounds, already opened, flagged, or a mine.
    """
    if not board.annotated:
        raise RuntimeError("Adjacency counts must be computed before revealing")

    cell = board.get_cell(row, col)
    if cell is None or cell.is_opened:
        return []

    # Mines report even when flagged; their state never changes here
    if cell.is_mine:
        if on_mine_revealed is not None:
            on_mine_revealed(row, col)
        return []

    if not cell.open():
        return []
    opened = [(row, col)]
    if cell.adjacent_mines == 0:
        opened.extend(_flood_fill(board, row, col))
    return opened


def _flood_fill(board: Board, row: int, col: int) -> List[Tuple[int, int]]:
    """Open the region around an opened zero cell using a work stack."""
    opened = []
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        for neighbor_row, neighbor_col in board.neighbors(current_row, current_col):
            neighbor = board.grid[neighbor_row][neighbor_col]
            # Opened and flagged cells act as the visited set
            if neighbor.is_mine or not neighbor.open():
                continue
            opened.append((neighbor_row, neighbor_col))
            if neighbor.adjacent_mines == 0:
                stack.append((neighbor_row, neighbor_col))
    return opened


# ============================================================================
# Flag Toggle
# ============================================================================

def toggle_flag(cell: Cell) -> CellState:
    """Flag an unopened cell or unflag a flagged one. Opened cells are left alone."""
    cell.toggle_flag()
    return cell.state


def toggle_flag_at(board: Board, row: int, col: int) -> Optional[CellState]:
    """
    Toggle flag on the cell at a board position.

    Returns:
        The cell's resulting state, or None if the position is invalid.
    """
    cell = board.get_cell(row, col)
    if cell is None:
        return None
    return toggle_flag(cell)
