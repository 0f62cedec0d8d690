"""
Minesweeper canvas adapters.

Provides the drawing and pointer layers around the game core:
- Renderer: Base drawing interface
- RendererGroup: Draws on several renderers at once
- RasterRenderer: numpy RGB canvas
- TextRenderer: One character per cell for terminals
- InputAdapter: Pointer events to reveal/flag actions
"""
from .renderer import Renderer, RendererGroup
from .raster import RasterRenderer
from .text import TextRenderer
from .input import InputAdapter

__all__ = [
    "Renderer",
    "RendererGroup",
    "RasterRenderer",
    "TextRenderer",
    "InputAdapter",
]
