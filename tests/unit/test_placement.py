"""
Unit tests for mine placement.
"""
import pytest
import numpy as np
from minesweeper import place_mines


class TestPlaceMines:
    """Test random mine index selection."""

    @pytest.mark.parametrize("total,count", [(9, 1), (300, 10), (50, 49), (1, 0)])
    def test_returns_requested_number_of_indices(
        self, rng: np.random.Generator, total: int, count: int
    ) -> None:
        """Should return exactly the requested number of distinct indices."""
        positions = place_mines(total, count, rng)
        assert len(positions) == count
        assert all(0 <= index < total for index in positions)

    def test_full_board_returns_every_index(self) -> None:
        """Placing as many mines as cells uses every index once."""
        assert place_mines(9, 9) == set(range(9))

    def test_indices_are_plain_ints(self, rng: np.random.Generator) -> None:
        """Indices should be Python ints, not numpy scalars."""
        positions = place_mines(20, 5, rng)
        assert all(type(index) is int for index in positions)

    def test_same_seed_gives_same_mines(self) -> None:
        """Seeded generators should be reproducible."""
        first = place_mines(300, 10, np.random.default_rng(7))
        second = place_mines(300, 10, np.random.default_rng(7))
        assert first == second

    def test_every_cell_can_hold_a_mine(self) -> None:
        """Over many draws, every index should be chosen at least once."""
        rng = np.random.default_rng(0)
        seen = set()
        for _ in range(200):
            seen |= place_mines(10, 2, rng)
        assert seen == set(range(10))

    def test_too_many_mines_raises_error(self) -> None:
        """More mines than cells should raise ValueError."""
        with pytest.raises(ValueError, match="Too many mines"):
            place_mines(9, 10)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            place_mines(9, -1)
