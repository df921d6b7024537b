"""
Tile module for the board engine.

A tile is an immutable value describing one cell of the grid: whether
it holds a mine, whether the player flagged or revealed it, and how many
mines surround it.
"""
from dataclasses import dataclass


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN = -1
FLAGGED = -2
REVEALED_MINE = 9


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_flagged: Whether the player marked this cell.
        is_exploded: Whether this mine ended the game.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        is_revealed: Whether the cell is shown to the player.
    """

    is_mine: bool = False
    is_flagged: bool = False
    is_exploded: bool = False
    adjacent_mines: int = 0
    is_revealed: bool = False

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def is_zero(self) -> bool:
        """Check if cell is a safe cell with no mines around it."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_observation(self) -> int:
        """
        Convert tile to a numeric observation value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine
        """
        if self.is_revealed:
            return REVEALED_MINE if self.is_mine else self.adjacent_mines
        if self.is_flagged:
            return FLAGGED
        return HIDDEN
