"""
Unit tests for the playtest agents and evaluator.
"""
import numpy as np
import pytest
from board_engine import BoardConfig
from playtest import Evaluator, PlaytestStats, RandomAgent


# ============================================================================
# Random Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test random action selection."""

    def test_selects_only_valid_actions(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        mask = np.array([False, False, True, False])
        for _ in range(20):
            assert agent.select_action(np.zeros((2, 2)), mask) == 2

    def test_uses_hidden_tiles_without_mask(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        observation = np.array([[0, 1], [-1, -2]], dtype=np.int8)
        assert agent.select_action(observation) == 2

    def test_no_valid_actions_returns_zero(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        assert agent.select_action(np.zeros((2, 2)), np.zeros(4, dtype=bool)) == 0

    def test_position_conversion(self) -> None:
        agent = RandomAgent(3, 5)
        assert agent.action_to_position(7) == (1, 2)
        assert agent.position_to_action(1, 2) == 7


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluator:
    """Test batch playtesting."""

    def test_every_game_finishes(self, tiny_config: BoardConfig) -> None:
        """Random play always ends in a win or a loss within one step per tile."""
        evaluator = Evaluator(tiny_config, num_games=20, seed=3)
        stats = evaluator.evaluate(RandomAgent(4, 4, seed=3))

        assert stats.games == 20
        assert stats.wins + stats.losses == 20
        assert 0.0 <= stats.win_rate <= 1.0
        assert stats.avg_steps >= 1.0

    def test_mine_free_board_always_wins(self) -> None:
        evaluator = Evaluator(BoardConfig(3, 3, 0), num_games=5)
        stats = evaluator.evaluate(RandomAgent(3, 3, seed=1))
        assert stats.wins == 5
        assert stats.avg_steps == 1.0
        assert stats.avg_revealed == 9.0

    def test_verbose_prints_progress(
        self, tiny_config: BoardConfig, capsys
    ) -> None:
        evaluator = Evaluator(
            tiny_config, num_games=4, log_frequency=2, verbose=True
        )
        evaluator.evaluate(RandomAgent(4, 4, seed=0))

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("Game 2/4 | Win Rate:")

    def test_empty_stats(self) -> None:
        stats = PlaytestStats()
        assert stats.win_rate == 0.0
        assert stats.to_dict()["games"] == 0

    def test_stats_to_dict(self) -> None:
        stats = PlaytestStats(games=4, wins=1, losses=3, total_steps=10)
        report = stats.to_dict()
        assert report["win_rate"] == pytest.approx(0.25)
        assert report["avg_steps"] == pytest.approx(2.5)
