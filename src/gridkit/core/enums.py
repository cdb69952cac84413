"""Enumerations for grid shapes and zipped-grid presentation styles."""

from enum import Enum


class GridShape(Enum):
    """Row-count classification of a grid."""

    EMPTY = "empty"
    FLAT = "flat"
    MULTI = "multi"

    @classmethod
    def from_row_count(cls, n_rows: int) -> "GridShape":
        """Classify a grid by its number of rows.

        Args:
            n_rows: Number of rows in the grid.

        Returns:
            EMPTY for zero rows, FLAT for one row, MULTI otherwise.
        """
        if n_rows == 0:
            return cls.EMPTY
        if n_rows == 1:
            return cls.FLAT
        return cls.MULTI


class ZipStyle(Enum):
    """How a zipped grid is rendered."""

    ROWS = "rows"  # one bracketed row per pair/quad
    TUPLES = "tuples"  # single line of parenthesised tuples
