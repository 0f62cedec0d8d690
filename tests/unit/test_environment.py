"""
Unit tests for the gymnasium click environment.
"""
import pytest
import numpy as np
from minesweeper import BoardConfig, ClickEnv
from minesweeper.environment import PRIMARY_BUTTON, SECONDARY_BUTTON


@pytest.fixture
def env(small_config: BoardConfig) -> ClickEnv:
    """Environment over a small 3x4 board, already reset."""
    env = ClickEnv(config=small_config, render_mode="ansi", max_steps=5)
    env.reset(seed=0)
    return env


def find_cell(env: ClickEnv, mine: bool):
    """First (row, col) whose mine flag matches."""
    for cell in env.board.iter_cells():
        if cell.is_mine == mine:
            return cell.position
    raise AssertionError("no such cell")


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_covers_canvas(self, env: ClickEnv) -> None:
        """Actions are (button, px, py) over the canvas."""
        assert list(env.action_space.nvec) == [2, 40, 30]

    def test_reset_observation(self, env: ClickEnv) -> None:
        """Reset gives an all unopened observation."""
        obs, info = env.reset(seed=1)
        assert obs.shape == (3, 4)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info == {"steps": 0, "opened": 0, "flagged": 0, "mines_revealed": 0}

    def test_reset_places_configured_mines(self, env: ClickEnv) -> None:
        """Each reset builds a board with the configured mines."""
        env.reset(seed=3)
        assert env.board.mine_count() == 2

    def test_same_seed_same_board(self, small_config: BoardConfig) -> None:
        """Seeding reset reproduces the mine layout."""
        first = ClickEnv(config=small_config)
        second = ClickEnv(config=small_config)
        first.reset(seed=42)
        second.reset(seed=42)
        mines = [
            {c.position for c in e.board.iter_cells() if c.is_mine}
            for e in (first, second)
        ]
        assert mines[0] == mines[1]


class TestStep:
    """Test clicking through the environment."""

    def test_primary_click_reward_is_cells_opened(self, env: ClickEnv) -> None:
        """Reward counts the cells the click opened."""
        row, col = find_cell(env, mine=False)
        px, py = env.cell_to_pixel(row, col)
        obs, reward, terminated, truncated, info = env.step(
            (PRIMARY_BUTTON, px, py)
        )
        assert reward == info["opened"] >= 1
        assert obs[row, col] >= 0
        assert terminated is False
        assert truncated is False

    def test_mine_click_is_reported(self, env: ClickEnv) -> None:
        """Clicking a mine shows up in info, and does not end the episode."""
        px, py = env.cell_to_pixel(*find_cell(env, mine=True))
        _, reward, terminated, _, info = env.step(
            np.array([PRIMARY_BUTTON, px, py])
        )
        assert reward == 0.0
        assert terminated is False
        assert info["mines_revealed"] == 1

    def test_secondary_click_flags(self, env: ClickEnv) -> None:
        """Right click flags the cell."""
        obs, reward, _, _, info = env.step((SECONDARY_BUTTON, 0, 0))
        assert obs[0, 0] == -2
        assert reward == 0.0
        assert info["flagged"] == 1

    def test_truncates_after_max_steps(self, env: ClickEnv) -> None:
        """Episodes are truncated at max_steps."""
        truncated = False
        for _ in range(5):
            _, _, _, truncated, _ = env.step((SECONDARY_BUTTON, 0, 0))
        assert truncated is True

    def test_step_before_reset_raises(self, small_config: BoardConfig) -> None:
        """Stepping a fresh environment is an error."""
        with pytest.raises(RuntimeError, match="reset"):
            ClickEnv(config=small_config).step((PRIMARY_BUTTON, 0, 0))


class TestRender:
    """Test render modes and the action mask."""

    def test_ansi_render(self, env: ClickEnv) -> None:
        """ANSI render starts all unopened."""
        assert env.render() == "# # # #\n# # # #\n# # # #"

    def test_rgb_render(self, small_config: BoardConfig) -> None:
        """rgb_array render returns the canvas."""
        env = ClickEnv(config=small_config, render_mode="rgb_array")
        env.reset(seed=0)
        frame = env.render()
        assert frame.shape == (30, 40, 3)
        assert frame.dtype == np.uint8

    def test_action_mask_tracks_unopened(self, env: ClickEnv) -> None:
        """Opened and flagged cells drop out of the mask."""
        assert env.get_action_mask().all()
        env.step((SECONDARY_BUTTON, 0, 0))
        assert not env.get_action_mask()[0, 0]

    def test_ansi_render_shows_clicked_mine(self) -> None:
        """A clicked mine appears in the text render like on the canvas."""
        env = ClickEnv(config=BoardConfig(3, 3, 9), render_mode="ansi")
        env.reset(seed=0)
        px, py = env.cell_to_pixel(2, 2)
        env.step((PRIMARY_BUTTON, px, py))
        assert env.render() == "# # #\n# # #\n# # *"
        assert tuple(env.renderer.frame()[py, px]) == (0, 0, 0)

    def test_ansi_render_matches_opened_cells(self, env: ClickEnv) -> None:
        """Opened cells show their counts in the text render."""
        row, col = find_cell(env, mine=False)
        env.step((PRIMARY_BUTTON, *env.cell_to_pixel(row, col)))
        count = env.board.grid[row][col].adjacent_mines
        symbol = str(count) if count else "."
        assert env.render().splitlines()[row].split(" ")[col] == symbol


class TestBeforeReset:
    """Test that a fresh environment refuses to be used."""

    @pytest.mark.parametrize("mode", ["ansi", "rgb_array", "human"])
    def test_render_before_reset_raises(
        self, small_config: BoardConfig, mode: str
    ) -> None:
        """Rendering needs a board."""
        with pytest.raises(RuntimeError, match="reset"):
            ClickEnv(config=small_config, render_mode=mode).render()

    def test_action_mask_before_reset_raises(
        self, small_config: BoardConfig
    ) -> None:
        """The action mask needs a board."""
        with pytest.raises(RuntimeError, match="reset"):
            ClickEnv(config=small_config).get_action_mask()
