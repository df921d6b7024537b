"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from board_engine import BoardConfig, Game, Grid, SafeZone, Tile


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a started 9x9 game with 10 mines and a fixed seed."""
    game = Game(9, 9, 10, seed=1234)
    game.start()
    return game


@pytest.fixture
def small_game() -> Game:
    """Create a 3x3 game with a single mine injected at (0, 0)."""
    game = Game(3, 3, 1)
    game.start()
    game.place_mines([(0, 0)])
    return game


@pytest.fixture
def corner_mines_game() -> Game:
    """Create a 5x5 game with mines at opposite corners."""
    game = Game(5, 5, 2)
    game.start()
    game.place_mines([(0, 0), (4, 4)])
    return game


@pytest.fixture
def empty_game() -> Game:
    """Create a game with no mines for cascade testing."""
    game = Game(5, 5, 0)
    game.start()
    return game


@pytest.fixture
def single_cell_game() -> Game:
    """Create a game whose safe zone is only the first clicked cell."""
    game = Game(4, 4, 15, safe_zone=SafeZone.CELL, seed=7)
    game.start()
    return game


# ============================================================================
# Grid and Tile Fixtures
# ============================================================================

@pytest.fixture
def grid() -> Grid:
    """Create an empty 4x6 grid."""
    return Grid(4, 6)


@pytest.fixture
def hidden_tile() -> Tile:
    """Create a default tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def tiny_config() -> BoardConfig:
    """A board small enough to finish quickly in playtests."""
    return BoardConfig(4, 4, 2)
