"""
Gymnasium environment for clicking on the Minesweeper canvas.

Drives the input adapter with pointer events, so a board can be played
by scripts and agents the same way a person plays it with a mouse.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, new_board
from .cell import CellState
from .ui.input import InputAdapter
from .ui.raster import RasterRenderer
from .ui.renderer import RendererGroup
from .ui.text import TextRenderer


PRIMARY_BUTTON = 0
SECONDARY_BUTTON = 1


# ============================================================================
# Click Environment
# ============================================================================

class ClickEnv(gym.Env):
    """
    Gymnasium environment for pointer-driven Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = unopened cell
        - -2 = flagged cell
        - 0-8 = opened cell with adjacent mine count

    Actions:
        MultiDiscrete (button, px, py). Button 0 reveals, button 1
        toggles a flag, at canvas pixel (px, py).

    Rewards:
        Number of cells opened by the click.

    Episodes never terminate; they are truncated after ``max_steps``.
    Clicking a mine is reported in ``info["mines_revealed"]``.
    """

    metadata = {"render_modes": ["human", "ansi", "rgb_array"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        max_steps: int = 100,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 20x15 with 10 mines).
            render_mode: How to render the environment.
            max_steps: Steps before an episode is truncated.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.max_steps = max_steps

        canvas_width = self.config.width * self.config.cell_size
        canvas_height = self.config.height * self.config.cell_size

        self.observation_space = spaces.Box(
            low=-2,
            high=8,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.MultiDiscrete(
            [2, canvas_width, canvas_height]
        )

        self.board: Optional[Board] = None
        self.renderer: Optional[RasterRenderer] = None
        self.text: Optional[TextRenderer] = None
        self.adapter: Optional[InputAdapter] = None
        self._steps = 0
        self._mines_revealed = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment with a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)

        self.board = new_board(self.config, rng=self.np_random)
        shape = (self.config.height, self.config.width, self.config.cell_size)
        self.renderer = RasterRenderer(*shape)
        self.text = TextRenderer(*shape)
        self.adapter = InputAdapter(
            self.board,
            RendererGroup(self.renderer, self.text),
            cell_size=self.config.cell_size,
            on_mine_revealed=self._on_mine_revealed,
        )
        self.adapter.draw_board()
        self._steps = 0
        self._mines_revealed = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Click once on the canvas.

        Args:
            action: (button, px, py).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._require_reset("step")

        button, px, py = (int(value) for value in action)
        self._steps += 1

        reward = 0.0
        if button == PRIMARY_BUTTON:
            reward = float(len(self.adapter.on_primary_click(px, py)))
        else:
            self.adapter.on_secondary_click(px, py)

        observation = self.board.get_observation()
        truncated = self._steps >= self.max_steps

        return observation, reward, False, truncated, self._get_info()

    def _require_reset(self, method: str) -> None:
        if self.adapter is None:
            raise RuntimeError(f"Call reset() before {method}()")

    def _on_mine_revealed(self, row: int, col: int) -> None:
        self._mines_revealed += 1

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        self._require_reset("_get_info")
        return {
            "steps": self._steps,
            "opened": self.board.count_state(CellState.OPENED),
            "flagged": self.board.count_state(CellState.FLAGGED),
            "mines_revealed": self._mines_revealed,
        }

    def render(self):
        """Render the canvas as an RGB frame or as text."""
        self._require_reset("render")
        if self.render_mode == "rgb_array":
            return self.renderer.frame()
        if self.render_mode == "ansi":
            return self.text.render()
        if self.render_mode == "human":
            print(self.text.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of cells that can still be clicked usefully.

        Returns:
            Boolean (rows, cols) array where True = unopened cell.
        """
        self._require_reset("get_action_mask")
        return self.board.get_observation() == -1

    def cell_to_pixel(self, row: int, col: int) -> Tuple[int, int]:
        """Pixel (px, py) at the centre of a cell."""
        size = self.config.cell_size
        return col * size + size // 2, row * size + size // 2
