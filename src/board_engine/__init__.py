"""
Minesweeper board engine.

Provides the game session, its grid of tiles, and a Gymnasium wrapper.
"""
from .errors import BoundsError, ConfigurationError
from .tile import Tile
from .grid import Grid
from .game import BoardConfig, Game, GameStatus, SafeZone
from .environment import MinesweeperEnv, render_board

__all__ = [
    "BoundsError",
    "ConfigurationError",
    "Tile",
    "Grid",
    "BoardConfig",
    "Game",
    "GameStatus",
    "SafeZone",
    "MinesweeperEnv",
    "render_board",
]
