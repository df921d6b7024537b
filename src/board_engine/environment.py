"""
Gymnasium environment wrapper for the board engine.

Lets automated players drive a Game session through the standard
reset/step interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .game import BoardConfig, Game
from .tile import FLAGGED, HIDDEN, REVEALED_MINE


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * columns.
        Action i reveals the tile at (i // columns, i % columns).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (revealed/flagged tile or game over)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game.from_config(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED,
            high=REVEALED_MINE,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game = Game.from_config(self.config, seed=self.np_random)
        self.game.start()
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one tile.

        Args:
            action: Tile index to reveal (row * columns + column).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, column = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, column)
        observation = self.game.get_observation()
        terminated = self.game.is_over

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, column) position."""
        row, column = divmod(int(action), self.config.columns)
        return row, column

    def _calculate_reward(self, row: int, column: int) -> float:
        """Reveal the tile and score the outcome."""
        if not self.game.reveal(row, column):
            return -0.1
        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.grid.count(
                lambda tile: tile.is_revealed and not tile.is_mine
            ),
            "total_safe": self.config.safe_cells,
            "game_state": self.game.status.name,
            "valid_actions": len(self.game.get_valid_actions()),
            "remaining_flags": self.game.remaining_flags,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game)
        if self.render_mode == "human":
            print(render_board(self.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, column in self.game.get_valid_actions():
            mask[row * self.config.columns + column] = True
        return mask


# ============================================================================
# Text Rendering
# ============================================================================

def render_board(game: Game) -> str:
    """
    Render a session's board as ASCII text.

    Hidden tiles are ``.``, flags ``F``, mines ``*``, the exploded mine
    ``X`` and empty revealed tiles a blank.
    """
    lines = []
    for row in range(game.rows):
        symbols = []
        for column in range(game.columns):
            tile = game.get_tile(row, column)
            value = tile.to_observation()
            if tile.is_exploded:
                symbols.append("X")
            elif value == HIDDEN:
                symbols.append(".")
            elif value == FLAGGED:
                symbols.append("F")
            elif value == REVEALED_MINE:
                symbols.append("*")
            elif value == 0:
                symbols.append(" ")
            else:
                symbols.append(str(value))
        lines.append(" ".join(symbols))
    return "\n".join(lines)
