"""
Text renderer for terminals: one character per cell.
"""
from typing import List, Optional

from .renderer import Renderer


UNOPENED_SYMBOL = "#"
FLAGGED_SYMBOL = "F"
MINE_SYMBOL = "*"
EMPTY_SYMBOL = "."


class TextRenderer(Renderer):
    """Keeps a character grid and renders it as rows of text."""

    def __init__(self, rows: int, cols: int, cell_size: int) -> None:
        super().__init__(rows, cols, cell_size)
        self.chars: List[List[str]] = [[" "] * cols for _ in range(rows)]

    def draw_unopened(self, x: int, y: int) -> None:
        self._put(x, y, UNOPENED_SYMBOL)

    def draw_opened(self, x: int, y: int, count: Optional[int] = None) -> None:
        self._put(x, y, str(count) if count else EMPTY_SYMBOL)

    def draw_flag(self, x: int, y: int) -> None:
        self._put(x, y, FLAGGED_SYMBOL)

    def draw_mine(self, x: int, y: int) -> None:
        self._put(x, y, MINE_SYMBOL)

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "\n".join(" ".join(row) for row in self.chars)

    def _put(self, x: int, y: int, symbol: str) -> None:
        row, col = y // self.cell_size, x // self.cell_size
        if 0 <= row < self.rows and 0 <= col < self.cols:
            self.chars[row][col] = symbol
