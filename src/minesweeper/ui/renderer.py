"""
Base renderer interface for the Minesweeper canvas.

Defines the drawing calls the input adapter makes. Coordinates are
pixels: the top-left corner of a cell is (col * cell_size, row * cell_size).
"""
from abc import ABC, abstractmethod
from typing import Optional


# ============================================================================
# Base Renderer Interface
# ============================================================================

class Renderer(ABC):
    """
    Abstract base class for canvas renderers.

    All renderers must implement the four cell drawing calls.
    """

    def __init__(self, rows: int, cols: int, cell_size: int) -> None:
        """
        Initialize the renderer.

        Args:
            rows: Number of rows on the board.
            cols: Number of columns on the board.
            cell_size: Side of one cell, in pixels.
        """
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size

    @property
    def width(self) -> int:
        """Canvas width in pixels."""
        return self.cols * self.cell_size

    @property
    def height(self) -> int:
        """Canvas height in pixels."""
        return self.rows * self.cell_size

    @abstractmethod
    def draw_unopened(self, x: int, y: int) -> None:
        """Draw an unopened cell with its top-left corner at (x, y)."""

    @abstractmethod
    def draw_opened(self, x: int, y: int, count: Optional[int] = None) -> None:
        """Draw an opened cell, with its adjacent mine count if non-zero."""

    @abstractmethod
    def draw_flag(self, x: int, y: int) -> None:
        """Draw a flag on the cell at (x, y)."""

    @abstractmethod
    def draw_mine(self, x: int, y: int) -> None:
        """Draw a mine on the cell at (x, y)."""

    def draw_empty_board(self) -> None:
        """Draw every cell as unopened."""
        for col in range(self.cols):
            for row in range(self.rows):
                self.draw_unopened(col * self.cell_size, row * self.cell_size)


# ============================================================================
# Renderer Group
# ============================================================================

class RendererGroup(Renderer):
    """Forwards every drawing call to several renderers of the same board."""

    def __init__(self, *renderers: Renderer) -> None:
        if not renderers:
            raise ValueError("RendererGroup needs at least one renderer")
        first = renderers[0]
        super().__init__(first.rows, first.cols, first.cell_size)
        self.renderers = renderers

    def draw_unopened(self, x: int, y: int) -> None:
        for renderer in self.renderers:
            renderer.draw_unopened(x, y)

    def draw_opened(self, x: int, y: int, count: Optional[int] = None) -> None:
        for renderer in self.renderers:
            renderer.draw_opened(x, y, count)

    def draw_flag(self, x: int, y: int) -> None:
        for renderer in self.renderers:
            renderer.draw_flag(x, y)

    def draw_mine(self, x: int, y: int) -> None:
        for renderer in self.renderers:
            renderer.draw_mine(x, y)
