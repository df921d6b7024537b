"""
Grid module for the board engine.

Owns the fixed rows x columns array of tiles. Callers get read-only
access; the underscored mutators are reserved for the game session.
"""
from typing import Callable, Iterator, List, Tuple

import numpy as np

from .errors import BoundsError
from .tile import Tile


Position = Tuple[int, int]


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Bounds-checked two-dimensional container of tiles.

    Tiles are immutable, so ``grid[row, column]`` can be handed out
    freely without exposing the grid to outside mutation.
    """

    def __init__(self, rows: int, columns: int) -> None:
        self._rows = rows
        self._columns = columns
        self._tiles: List[List[Tile]] = []
        self._reset()

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def __len__(self) -> int:
        return self._rows * self._columns

    def __getitem__(self, position: Position) -> Tile:
        row, column = position
        self.check_bounds(row, column)
        return self._tiles[row][column]

    def __iter__(self) -> Iterator[Tuple[int, int, Tile]]:
        for row in range(self._rows):
            for column in range(self._columns):
                yield row, column, self._tiles[row][column]

    # ========================================================================
    # Position Utilities
    # ========================================================================

    def in_bounds(self, row: int, column: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self._rows and 0 <= column < self._columns

    def check_bounds(self, row: int, column: int) -> None:
        """Raise BoundsError if position is outside the grid."""
        if not self.in_bounds(row, column):
            raise BoundsError(row, column, self._rows, self._columns)

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, column) position in row-major order."""
        for row in range(self._rows):
            for column in range(self._columns):
                yield row, column

    def neighbors(self, row: int, column: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Args:
            row: Row index of center cell.
            column: Column index of center cell.

        Returns:
            List of (row, column) tuples within Chebyshev distance 1,
            clipped to the grid edges.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = column + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def count(self, predicate: Callable[[Tile], bool]) -> int:
        """Count tiles for which predicate holds."""
        return sum(1 for _, _, tile in self if predicate(tile))

    def to_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D int8 array of ``Tile.to_observation`` values.
        """
        obs = np.zeros((self._rows, self._columns), dtype=np.int8)
        for row, column, tile in self:
            obs[row, column] = tile.to_observation()
        return obs

    # ========================================================================
    # Session-only Mutators
    # ========================================================================

    def _reset(self) -> None:
        self._tiles = [
            [Tile() for _ in range(self._columns)]
            for _ in range(self._rows)
        ]

    def _replace(self, row: int, column: int, tile: Tile) -> None:
        self._tiles[row][column] = tile
