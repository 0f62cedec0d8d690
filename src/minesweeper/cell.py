"""
Cell module for Minesweeper.

Represents individual cells on the game board with their position,
state (unopened/opened/flagged) and content (mine/number).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    UNOPENED = auto()
    OPENED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index of the cell, fixed for its lifetime.
        col: Column index of the cell, fixed for its lifetime.
        is_mine: Whether this cell contains a mine.
        state: Current visual state (unopened, opened, or flagged).
        adjacent_mines: Count of mines in neighboring cells (0-8), or
            None until counts are computed. Always None for mines.
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    state: CellState = CellState.UNOPENED
    adjacent_mines: Optional[int] = None

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was opened, False if it was already
            opened or is flagged.
        """
        if self.state != CellState.UNOPENED:
            return False
        self.state = CellState.OPENED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is opened.
        """
        if self.state == CellState.OPENED:
            return False
        if self.state == CellState.UNOPENED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.UNOPENED
        return True

    @property
    def position(self) -> Tuple[int, int]:
        """(row, col) of this cell."""
        return self.row, self.col

    @property
    def is_unopened(self) -> bool:
        """Check if cell is unopened."""
        return self.state == CellState.UNOPENED

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.state == CellState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its observation value.

        Returns:
            -1: Unopened cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
        """
        if self.state == CellState.UNOPENED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.adjacent_mines or 0
