"""
Automated players for exercising the board engine.

Agents look only at the numeric observation and the valid action mask,
never at hidden mine positions.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which tile to reveal based on the current observation.
    """

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = rows
        self.columns = columns

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of tile states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * columns + column).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, column) position."""
        return action // self.columns, action % self.columns

    def position_to_action(self, row: int, column: int) -> int:
        """Convert (row, column) position to flat action index."""
        return row * self.columns + column

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        # Hidden tiles (value -1) are valid actions
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for a new game."""


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals a uniformly random valid tile.

    Serves as a baseline and as a driver for smoke-testing full games.
    """

    def __init__(
        self,
        rows: int = 9,
        columns: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(rows, columns)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Returns:
            Random action index from valid actions, or 0 if none remain.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0
        return int(self.rng.choice(valid_indices))
