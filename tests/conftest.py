"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    Cell,
    apply_mines,
    compute_adjacency,
    create_grid,
    new_board,
)


def build_board(rows: int, cols: int, mines) -> Board:
    """Create an annotated board with mines at the given (row, col) positions."""
    board = create_grid(rows, cols)
    apply_mines(board, [row * cols + col for row, col in mines])
    return compute_adjacency(board)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible boards."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create a default 20x15 board with 10 mines."""
    return new_board(rng=rng)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with a single mine at (0, 0)."""
    return build_board(3, 3, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return build_board(5, 5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board split by a column of mines.

    Column 2 is all mines, so revealing the left side never reaches
    the right side.
    """
    return build_board(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def unopened_cell() -> Cell:
    """Create an unopened cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """Small board configuration with a large cell size."""
    return BoardConfig(width=4, height=3, num_mines=2, cell_size=10)


@pytest.fixture
def board_factory():
    """Factory building annotated boards from explicit mine positions."""
    return build_board
