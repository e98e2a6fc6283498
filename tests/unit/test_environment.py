"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import Board, BoardConfig, Game, MinesweeperEnv, make_vec_env


@pytest.fixture
def env() -> MinesweeperEnv:
    return MinesweeperEnv(BoardConfig(4, 4, 3))


@pytest.fixture
def pinned_env(center_mine_board: Board) -> MinesweeperEnv:
    """3x3 environment with its mine in the middle."""
    env = MinesweeperEnv(BoardConfig(3, 3, 1))
    env.game = Game.from_board(center_mine_board)
    return env


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_covers_grid(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 16

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=5)
        assert obs.shape == (4, 4)
        assert obs.dtype == np.int8
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "IN_PROGRESS"
        assert info["total_safe"] == 13

    def test_same_seed_same_layout(self, env: MinesweeperEnv) -> None:
        env.reset(seed=11)
        first = env.game.board.snapshot_mines()
        env.reset(seed=11)
        assert np.array_equal(first, env.game.board.snapshot_mines())


class TestStep:
    """Test rewards and termination."""

    def test_safe_reveal_rewards_one(self, pinned_env: MinesweeperEnv) -> None:
        obs, reward, terminated, truncated, info = pinned_env.step(0)
        assert reward == 1.0
        assert obs[0, 0] == 1
        assert terminated is False
        assert truncated is False
        assert info["revealed"] == 1

    def test_repeat_action_penalized(self, pinned_env: MinesweeperEnv) -> None:
        pinned_env.step(0)
        _, reward, _, _, _ = pinned_env.step(0)
        assert reward == pytest.approx(-0.1)

    def test_mine_ends_episode(self, pinned_env: MinesweeperEnv) -> None:
        obs, reward, terminated, _, info = pinned_env.step(4)
        assert reward == -10.0
        assert terminated is True
        assert obs[1, 1] == 9
        assert info["game_state"] == "LOST"

    def test_last_safe_cell_wins(self, pinned_env: MinesweeperEnv) -> None:
        for action in (0, 1, 2, 3, 5, 6, 7):
            pinned_env.step(action)
        _, reward, terminated, _, info = pinned_env.step(8)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_action_mask_tracks_hidden_cells(self, pinned_env: MinesweeperEnv) -> None:
        pinned_env.step(0)
        mask = pinned_env.get_action_mask()
        assert mask.shape == (9,)
        assert mask[0] == False  # noqa: E712
        assert int(mask.sum()) == 8


class TestRender:
    """Test render modes."""

    def test_ansi_render(self, center_mine_board: Board) -> None:
        env = MinesweeperEnv(BoardConfig(3, 3, 1), render_mode="ansi")
        env.game = Game.from_board(center_mine_board)
        assert env.render().splitlines()[1] == "0 . . ."

    def test_no_render_mode_returns_none(self, env: MinesweeperEnv) -> None:
        assert env.render() is None

    def test_human_render_prints(self, center_mine_board: Board, capsys) -> None:
        env = MinesweeperEnv(BoardConfig(3, 3, 1), render_mode="human")
        env.game = Game.from_board(center_mine_board)
        env.step(0)
        assert env.render() is None
        assert capsys.readouterr().out.splitlines()[1] == "0 1 . ."


class TestVectorEnv:
    """Test the vectorized environment factory."""

    def test_vec_env_reset_and_step(self) -> None:
        envs = make_vec_env(2, BoardConfig(3, 3, 1))
        try:
            obs, _ = envs.reset(seed=1)
            assert obs.shape == (2, 3, 3)
            assert np.all(obs == -1)
            obs, rewards, _, _, _ = envs.step(np.array([0, 0]))
            assert obs.shape == (2, 3, 3)
            assert rewards.shape == (2,)
        finally:
            envs.close()
