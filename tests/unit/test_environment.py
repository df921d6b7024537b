"""
Unit tests for MinesweeperEnv.

Tests spaces, reset/step semantics, rewards and rendering.
"""
import numpy as np
import pytest
from board_engine import BoardConfig, GameStatus, MinesweeperEnv, render_board


@pytest.fixture
def env(tiny_config: BoardConfig) -> MinesweeperEnv:
    environment = MinesweeperEnv(config=tiny_config, render_mode="ansi")
    environment.reset(seed=0)
    return environment


class TestSpaces:
    """Test observation and action spaces."""

    def test_spaces_match_board(self, env: MinesweeperEnv) -> None:
        assert env.observation_space.shape == (4, 4)
        assert env.action_space.n == 16

    def test_default_config(self) -> None:
        environment = MinesweeperEnv()
        assert environment.observation_space.shape == (9, 9)


class TestResetAndStep:
    """Test episode flow."""

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=1)
        assert np.all(obs == -1)
        assert obs.dtype == np.int8
        assert info["game_state"] == "START"
        assert info["valid_actions"] == 16
        assert info["remaining_flags"] == 2

    def test_first_step_is_safe(self, env: MinesweeperEnv) -> None:
        _, reward, terminated, truncated, info = env.step(5)
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert info["steps"] == 1
        assert info["revealed"] >= 1
        assert terminated is (info["game_state"] == "WON")

    def test_invalid_action_penalized(self, env: MinesweeperEnv) -> None:
        env.step(5)
        if env.game.is_over:
            pytest.skip("first reveal finished the game")
        _, reward, _, _, _ = env.step(5)
        assert reward == pytest.approx(-0.1)

    def test_same_seed_same_game(self, tiny_config: BoardConfig) -> None:
        boards = []
        for _ in range(2):
            environment = MinesweeperEnv(config=tiny_config)
            environment.reset(seed=42)
            environment.step(0)
            boards.append(
                {(r, c) for r, c, tile in environment.game.grid if tile.is_mine}
            )
        assert boards[0] == boards[1]

    def test_hitting_mine_terminates(self, env: MinesweeperEnv) -> None:
        env.step(0)
        mines = [
            r * 4 + c for r, c, tile in env.game.grid
            if tile.is_mine and not tile.is_revealed
        ]
        if not mines:
            pytest.skip("first reveal finished the game")

        _, reward, terminated, _, info = env.step(mines[0])

        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == GameStatus.LOST.name

    def test_action_mask_tracks_hidden_tiles(self, env: MinesweeperEnv) -> None:
        mask = env.get_action_mask()
        assert mask.dtype == bool
        assert mask.sum() == 16

        env.step(0)

        assert env.get_action_mask()[0] == False  # noqa: E712


class TestRender:
    """Test ASCII rendering."""

    def test_render_hidden_board(self, env: MinesweeperEnv) -> None:
        assert env.render() == "\n".join([". . . ."] * 4)

    def test_render_shows_flags_and_explosion(self) -> None:
        environment = MinesweeperEnv(config=BoardConfig(3, 3, 1))
        environment.reset()
        game = environment.game
        game.place_mines([(0, 0)])
        game.toggle_flag(2, 2)
        assert render_board(game).splitlines()[2] == ". . F"

        game.reveal(0, 0)

        assert render_board(game).splitlines() == ["X 1  ", "1 1  ", "     "]

    def test_human_mode_prints(self, tiny_config: BoardConfig, capsys) -> None:
        environment = MinesweeperEnv(config=tiny_config, render_mode="human")
        environment.reset()
        assert environment.render() is None
        assert ". . . ." in capsys.readouterr().out
