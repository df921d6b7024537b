"""
Playtest evaluation for Minesweeper agents.

Plays batches of games through the Gymnasium environment and collects
win/loss statistics.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import time

from board_engine import BoardConfig, MinesweeperEnv

from .agents import BaseAgent


# ============================================================================
# Playtest Statistics
# ============================================================================

@dataclass
class PlaytestStats:
    """Accumulated playtest statistics."""

    games: int = 0
    wins: int = 0
    losses: int = 0
    total_steps: int = 0
    total_revealed: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0

    @property
    def avg_steps(self) -> float:
        return self.total_steps / self.games if self.games else 0.0

    @property
    def avg_revealed(self) -> float:
        return self.total_revealed / self.games if self.games else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": self.win_rate,
            "avg_steps": self.avg_steps,
            "avg_revealed": self.avg_revealed,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Play an agent through many games and report how it fared.

    Games that run past max_steps count as neither won nor lost.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_games: int = 100,
        max_steps: Optional[int] = None,
        log_frequency: int = 10,
        verbose: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for every game.
            num_games: Number of games to play.
            max_steps: Maximum steps per game (default: one per tile).
            log_frequency: Games between progress lines.
            verbose: Print progress lines while playing.
            seed: Seed for the first game's mine layout.
        """
        self.board_config = board_config or BoardConfig()
        self.num_games = num_games
        self.max_steps = max_steps or self.board_config.total_cells
        self.log_frequency = log_frequency
        self.verbose = verbose
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> PlaytestStats:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Statistics over all games played.
        """
        env = MinesweeperEnv(config=self.board_config)
        stats = PlaytestStats()
        start_time = time.time()

        observation, _ = env.reset(seed=self.seed)
        for game in range(self.num_games):
            if game:
                observation, _ = env.reset()
            agent.reset()
            info: Dict[str, Any] = {}

            for _ in range(self.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, _, terminated, truncated, info = env.step(action)
                stats.total_steps += 1
                if terminated or truncated:
                    break

            stats.games += 1
            if info.get("game_state") == "WON":
                stats.wins += 1
            elif info.get("game_state") == "LOST":
                stats.losses += 1
            stats.total_revealed += info.get("revealed", 0)

            if self.verbose and stats.games % self.log_frequency == 0:
                self._log_progress(stats, start_time)

        return stats

    def _log_progress(self, stats: PlaytestStats, start_time: float) -> None:
        """Log evaluation progress."""
        elapsed = time.time() - start_time
        games_per_sec = stats.games / elapsed if elapsed > 0 else 0

        print(
            f"Game {stats.games}/{self.num_games} | "
            f"Win Rate: {stats.win_rate:.1%} | "
            f"Avg Steps: {stats.avg_steps:.1f} | "
            f"Speed: {games_per_sec:.1f} games/s"
        )
