"""
Raster renderer backed by a numpy RGB canvas.
"""
from typing import Dict, Optional, Tuple

import numpy as np

from .renderer import Renderer


Color = Tuple[int, int, int]

# ============================================================================
# Constants
# ============================================================================

UNOPENED_CELL_COLOR: Color = (192, 192, 192)
UNOPENED_CELL_BORDER_COLOR: Color = (0, 0, 0)
OPENED_CELL_COLOR: Color = (0x17, 0xB1, 0x69)
OPENED_CELL_BORDER_COLOR: Color = (0x00, 0x64, 0x00)
FLAG_COLOR: Color = (255, 0, 0)
MINE_COLOR: Color = (0, 0, 0)

NUMBER_COLORS: Dict[int, Color] = {
    1: (255, 0, 0),
    2: (255, 165, 0),
    3: (255, 255, 0),
    4: (0, 128, 0),
    5: (0, 0, 255),
    6: (75, 0, 130),
    7: (238, 130, 238),
    8: (255, 255, 255),
}


# ============================================================================
# Raster Renderer
# ============================================================================

class RasterRenderer(Renderer):
    """
    Draws cells into an (height, width, 3) uint8 array.

    Numbers and flags are drawn as a solid block in the middle of the
    cell, in the number's colour or the flag colour.
    """

    def __init__(self, rows: int, cols: int, cell_size: int) -> None:
        super().__init__(rows, cols, cell_size)
        self.canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def frame(self) -> np.ndarray:
        """Return a copy of the current canvas."""
        return self.canvas.copy()

    def draw_unopened(self, x: int, y: int) -> None:
        self._fill_cell(x, y, UNOPENED_CELL_COLOR, UNOPENED_CELL_BORDER_COLOR)

    def draw_opened(self, x: int, y: int, count: Optional[int] = None) -> None:
        self._fill_cell(x, y, OPENED_CELL_COLOR, OPENED_CELL_BORDER_COLOR)
        if count:
            self._fill_mark(x, y, NUMBER_COLORS[count])

    def draw_flag(self, x: int, y: int) -> None:
        self._fill_mark(x, y, FLAG_COLOR)

    def draw_mine(self, x: int, y: int) -> None:
        size = self.cell_size
        self.canvas[y:y + size, x:x + size] = MINE_COLOR

    def _fill_cell(self, x: int, y: int, fill: Color, border: Color) -> None:
        """Fill a cell and stroke its one-pixel border."""
        size = self.cell_size
        self.canvas[y:y + size, x:x + size] = fill
        self.canvas[y, x:x + size] = border
        self.canvas[y + size - 1, x:x + size] = border
        self.canvas[y:y + size, x] = border
        self.canvas[y:y + size, x + size - 1] = border

    def _fill_mark(self, x: int, y: int, color: Color) -> None:
        """Fill the centre block of a cell, inside its border."""
        inset = max(1, self.cell_size // 3) if self.cell_size > 2 else 0
        size = self.cell_size
        self.canvas[y + inset:y + size - inset, x + inset:x + size - inset] = color
