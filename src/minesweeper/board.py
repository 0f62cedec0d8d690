"""
Board module for Minesweeper.

Implements the grid model: board configuration, grid creation,
mine application and adjacency counting.
"""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .placement import place_mines


# ============================================================================
# Constants
# ============================================================================

DEFAULT_ROWS = 20
DEFAULT_COLS = 15
DEFAULT_MINES = 10
CELL_SIZE = 5

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        cell_size: Side of one cell on the canvas, in pixels.
    """

    width: int = DEFAULT_COLS
    height: int = DEFAULT_ROWS
    num_mines: int = DEFAULT_MINES
    cell_size: int = CELL_SIZE

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")
        if self.cell_size < 1:
            raise ValueError("Cell size must be positive")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


DEFAULT = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Rows and columns are fixed at creation.
    """

    rows: int
    cols: int
    grid: List[List[Cell]] = field(default_factory=list, repr=False)
    annotated: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if not self.grid:
            self.grid = [
                [Cell(row=row, col=col) for col in range(self.cols)]
                for row in range(self.rows)
            ]

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        result = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                result.append((new_row, new_col))
        return result

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    def index_to_position(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col) position."""
        return index // self.cols, index % self.cols

    def position_to_index(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat index."""
        return row * self.cols + col

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self.grid[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over all cells, row by row."""
        for row in self.grid:
            yield from row

    def mine_count(self) -> int:
        """Number of mines on the board."""
        return sum(1 for cell in self.iter_cells() if cell.is_mine)

    def count_state(self, state: CellState) -> int:
        """Number of cells currently in the given state."""
        return sum(1 for cell in self.iter_cells() if cell.state == state)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = unopened
                -2 = flagged
                0-8 = opened with adjacent count
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.iter_cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_unopened_positions(self) -> List[Tuple[int, int]]:
        """Positions of cells that can still be revealed or flagged."""
        return [cell.position for cell in self.iter_cells() if cell.is_unopened]


# ============================================================================
# Board Construction
# ============================================================================

def create_grid(rows: int, cols: int) -> Board:
    """Create a board of unopened, mine-free cells."""
    return Board(rows=rows, cols=cols)


def apply_mines(board: Board, mine_indices: Iterable[int]) -> Board:
    """
    Mark the cells at the given flat indices as mines.

    Args:
        board: Board to place mines on.
        mine_indices: Flat indices, mapped as (index // cols, index % cols).

    Returns:
        The same board, with mines set.
    """
    for index in mine_indices:
        if not 0 <= index < board.total_cells:
            raise ValueError(
                f"Mine index {index} outside board of {board.total_cells} cells"
            )
        row, col = board.index_to_position(index)
        board.grid[row][col].is_mine = True
    return board


def compute_adjacency(board: Board) -> Board:
    """
    Calculate adjacent mine counts for all non-mine cells.

    Must run exactly once, after mines are applied and before any reveal.
    """
    if board.annotated:
        raise RuntimeError("Adjacency counts have already been computed")
    for cell in board.iter_cells():
        if cell.is_mine:
            continue
        cell.adjacent_mines = _count_adjacent_mines(board, cell.row, cell.col)
    board.annotated = True
    return board


def _count_adjacent_mines(board: Board, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.grid[neighbor_row][neighbor_col].is_mine:
            count += 1
    return count


def new_board(
    config: Optional[BoardConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Build a ready-to-play board.

    Args:
        config: Board configuration (default: 20x15 with 10 mines).
        rng: Random generator used for mine placement.

    Returns:
        Board with mines placed and adjacency counts computed.
    """
    config = config or BoardConfig()
    board = create_grid(config.height, config.width)
    mines = place_mines(config.total_cells, config.num_mines, rng)
    apply_mines(board, mines)
    return compute_adjacency(board)
