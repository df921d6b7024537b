"""
Exceptions raised by the board engine.
"""


class ConfigurationError(ValueError):
    """Board dimensions or mine layout cannot describe a playable game."""


class BoundsError(IndexError):
    """A (row, column) position lies outside the grid."""

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Position ({row}, {column}) is outside the {rows}x{columns} grid"
        )
        self.row = row
        self.column = column
