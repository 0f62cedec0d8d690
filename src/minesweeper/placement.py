"""
Mine placement for Minesweeper.

Chooses which flat cell indices hold mines.
"""
from typing import Optional, Set

import numpy as np


def place_mines(
    total_cells: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> Set[int]:
    """
    Pick mine positions uniformly at random without replacement.

    Takes a prefix of a random permutation of all cell indices and
    repeats until the prefix holds exactly ``mine_count`` distinct
    indices.

    Args:
        total_cells: Number of cells on the board.
        mine_count: Number of mines to place.
        rng: Random generator to draw from (default: fresh generator).

    Returns:
        Set of flat indices in [0, total_cells).
    """
    if total_cells < 0:
        raise ValueError("Number of cells cannot be negative")
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")
    if mine_count > total_cells:
        raise ValueError(f"Too many mines (max {total_cells})")

    rng = rng if rng is not None else np.random.default_rng()

    positions: Set[int] = set()
    while len(positions) != mine_count:
        prefix = rng.permutation(total_cells)[:mine_count]
        positions = {int(index) for index in prefix}
    return positions
