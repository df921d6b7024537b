"""
Game session module for the board engine.

Implements lazy mine placement, adjacency counting, tile revealing
with cascade expansion, flag accounting and win/lose detection.
"""
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, List, Union

import numpy as np

from .errors import ConfigurationError
from .grid import Grid, Position
from .tile import Tile


SeedLike = Union[None, int, np.random.Generator]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a session."""

    START = auto()
    WON = auto()
    LOST = auto()


class SafeZone(Enum):
    """Cells kept mine-free around the first revealed position."""

    LATERAL = auto()  # whole row and whole column of the first reveal
    CELL = auto()  # the first revealed cell only


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a session's board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Total mines to place.
        safe_zone: Which cells the first reveal protects.
    """

    rows: int = 9
    columns: int = 9
    mine_count: int = 10
    safe_zone: SafeZone = SafeZone.LATERAL

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values describe a playable board."""
        if self.rows < 1 or self.columns < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        if self.mine_count > self.max_mines:
            raise ConfigurationError(f"Too many mines (max {self.max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.mine_count

    @property
    def max_mines(self) -> int:
        """Largest mine count placeable outside any safe zone."""
        if self.safe_zone == SafeZone.LATERAL:
            return (self.rows - 1) * (self.columns - 1)
        return self.total_cells - 1


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper playthrough.

    The session exclusively owns its grid. Mines are seeded on the
    first reveal so the opening move is always safe; the status stays
    ``START`` until the game is won or lost.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        mine_count: int,
        *,
        safe_zone: SafeZone = SafeZone.LATERAL,
        seed: SeedLike = None,
    ) -> None:
        """
        Create a session with fixed dimensions.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            mine_count: Mines to place on the first reveal.
            safe_zone: Cells protected by the first reveal.
            seed: Int seed or numpy Generator used for mine placement.

        Raises:
            ConfigurationError: If the board cannot hold the mines.
        """
        self.config = BoardConfig(rows, columns, mine_count, safe_zone)
        self.elapsed_time = 0
        self._rng = np.random.default_rng(seed)
        self._grid = Grid(rows, columns)
        self._status = GameStatus.START
        self._flags_placed = 0
        self._mines_placed = False
        self._safe_revealed = 0

    @classmethod
    def from_config(cls, config: BoardConfig, seed: SeedLike = None) -> "Game":
        """Create a session from an existing board configuration."""
        return cls(
            config.rows,
            config.columns,
            config.mine_count,
            safe_zone=config.safe_zone,
            seed=seed,
        )

    def start(self) -> None:
        """Reset counters and the grid for a fresh, unplayed game."""
        self._status = GameStatus.START
        self.elapsed_time = 0
        self._flags_placed = 0
        self._mines_placed = False
        self._safe_revealed = 0
        self._grid._reset()

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def place_mines(self, positions: Iterable[Position]) -> None:
        """
        Lay mines at explicit positions instead of random ones.

        Args:
            positions: (row, column) cells to mine.

        Raises:
            BoundsError: If a position is outside the grid.
            ConfigurationError: If mines are already placed or the number
                of distinct positions differs from the mine count.
        """
        if self._mines_placed:
            raise ConfigurationError("Mines have already been placed")
        layout = set()
        for row, column in positions:
            self._grid.check_bounds(row, column)
            layout.add((row, column))
        if len(layout) != self.config.mine_count:
            raise ConfigurationError(
                f"Expected {self.config.mine_count} mine positions, "
                f"got {len(layout)}"
            )
        self._lay_mines(sorted(layout))

    def _place_random_mines(self, start_row: int, start_column: int) -> None:
        """Sample mines uniformly from cells outside the safe zone."""
        candidates = [
            position for position in self._grid.positions()
            if not self._in_safe_zone(position, start_row, start_column)
        ]
        mine_count = self.config.mine_count
        if len(candidates) < mine_count:
            raise ConfigurationError(
                f"Only {len(candidates)} cells can hold {mine_count} mines"
            )
        chosen: Iterable[int] = []
        if mine_count:
            chosen = self._rng.choice(
                len(candidates), size=mine_count, replace=False
            )
        self._lay_mines(candidates[index] for index in chosen)

    def _in_safe_zone(
        self, position: Position, start_row: int, start_column: int
    ) -> bool:
        row, column = position
        if self.config.safe_zone == SafeZone.LATERAL:
            return row == start_row or column == start_column
        return position == (start_row, start_column)

    def _lay_mines(self, positions: Iterable[Position]) -> None:
        for row, column in positions:
            tile = self._grid[row, column]
            self._grid._replace(row, column, replace(tile, is_mine=True))
        self._mines_placed = True
        self._calculate_adjacent_mines()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for row, column, tile in list(self._grid):
            if tile.is_mine:
                continue
            count = sum(
                1 for neighbor in self._grid.neighbors(row, column)
                if self._grid[neighbor].is_mine
            )
            self._grid._replace(
                row, column, replace(tile, adjacent_mines=count)
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, column: int) -> bool:
        """
        Reveal the tile at the given position.

        On the first reveal, places mines outside the safe zone. A zero
        tile opens its whole connected empty region. A mine loses the
        game and discloses the board.

        Args:
            row: Row index to reveal.
            column: Column index to reveal.

        Returns:
            True if any tile changed, False for flagged or already
            revealed tiles and for finished games.

        Raises:
            BoundsError: If the position is outside the grid.
        """
        self._grid.check_bounds(row, column)
        if self.is_over:
            return False

        if not self._mines_placed:
            self._place_random_mines(row, column)

        tile = self._grid[row, column]
        if tile.is_flagged or tile.is_revealed:
            return False

        if tile.is_mine:
            self._explode(row, column)
            return True

        self._mark_revealed(row, column)
        if tile.is_zero:
            self._expand_empty_tile(row, column)

        self._check_win_condition()
        return True

    def _mark_revealed(self, row: int, column: int) -> None:
        tile = self._grid[row, column]
        self._grid._replace(row, column, replace(tile, is_revealed=True))
        if not tile.is_mine:
            self._safe_revealed += 1

    def _expand_empty_tile(self, row: int, column: int) -> None:
        """Reveal the connected region around a zero tile, stopping at flags."""
        pending = deque([(row, column)])
        while pending:
            current_row, current_column = pending.pop()
            for neighbor_row, neighbor_col in self._grid.neighbors(
                current_row, current_column
            ):
                neighbor = self._grid[neighbor_row, neighbor_col]
                if neighbor.is_revealed or neighbor.is_flagged:
                    continue
                self._mark_revealed(neighbor_row, neighbor_col)
                if neighbor.is_zero:
                    pending.append((neighbor_row, neighbor_col))

    def _explode(self, row: int, column: int) -> None:
        tile = self._grid[row, column]
        self._grid._replace(
            row, column, replace(tile, is_exploded=True, is_revealed=True)
        )
        self._status = GameStatus.LOST
        self._reveal_all_tiles()

    def _check_win_condition(self) -> None:
        """Win once every non-mine tile is revealed."""
        if self._safe_revealed == self.config.safe_cells:
            self._status = GameStatus.WON
            self._reveal_all_tiles()

    def _reveal_all_tiles(self) -> None:
        for row, column, tile in list(self._grid):
            if not tile.is_revealed:
                self._grid._replace(
                    row, column, replace(tile, is_revealed=True)
                )

    def toggle_flag(self, row: int, column: int) -> bool:
        """
        Toggle the flag on a tile and update the flag counter.

        Returns:
            True if the flag was toggled, False if the tile is revealed
            or the game is over.

        Raises:
            BoundsError: If the position is outside the grid.
        """
        self._grid.check_bounds(row, column)
        if self.is_over:
            return False
        tile = self._grid[row, column]
        if tile.is_revealed:
            return False
        self._grid._replace(
            row, column, replace(tile, is_flagged=not tile.is_flagged)
        )
        self.adjust_flags(-1 if tile.is_flagged else 1)
        return True

    def adjust_flags(self, delta: int) -> None:
        """Record flags placed (+1) or removed (-1) by the caller."""
        self._flags_placed += delta

    def tick(self, seconds: int = 1) -> None:
        """Advance the caller-driven elapsed time counter."""
        self.elapsed_time += seconds

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def grid(self) -> Grid:
        """Read-only view of the board."""
        return self._grid

    @property
    def remaining_flags(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.mine_count - self._flags_placed

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def in_progress(self) -> bool:
        """Check if the first reveal happened and the game is not over."""
        return self._status == GameStatus.START and self._mines_placed

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.START

    def get_tile(self, row: int, column: int) -> Tile:
        """Get tile at position; raises BoundsError if invalid."""
        return self._grid[row, column]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        return self._grid.to_observation()

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of positions that can still be revealed.

        Returns:
            (row, column) positions of hidden, unflagged tiles, or an
            empty list once the game is over.
        """
        if self.is_over:
            return []
        return [
            (row, column) for row, column, tile in self._grid
            if tile.is_hidden
        ]

    def __repr__(self) -> str:
        return (
            f"Game(rows={self.rows}, columns={self.columns}, "
            f"mine_count={self.mine_count}, status={self._status.name})"
        )
