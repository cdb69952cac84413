"""Base models for two-level nested sequences.

This module provides the immutable data models the grid algebra operates on. A
`Grid` is an ordered sequence of rows, each row an ordered tuple of elements, and
every element in every row shares one Python type. The models enforce these
invariants through Pydantic v2 at construction time, so any `Grid` that exists is
valid and operations never need to re-check homogeneity.

The zip combinator produces one of two tagged variants:
    - `PairGrid`: every row holds exactly two elements (a first zip).
    - `QuadGrid`: every row holds exactly four elements (a zip of pairs).

`ZipResult` is the union of the two, so callers can state which variant they
expect instead of inferring it from row counts.

Key Features:
    - Frozen models; operations always return new grids
    - Flat / multi / empty classification computed from the row count
    - NumPy interop for uniform grids
"""

from typing import Any, ClassVar, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .enums import GridShape
from .exceptions import ShapeMismatchError
from .types import GridRows, PairGridRows, QuadGridRows, Row, element_type_of

__all__ = [
    "Grid",
    "PairGrid",
    "QuadGrid",
    "ZipResult",
]


class Grid(BaseModel):
    """An ordered, immutable sequence of rows sharing one element type.

    Rows may have different lengths. A grid with exactly one row is *flat*,
    one with more than one row is *multi*, and one with no rows is *empty*.

    Validation ensures that:
        - Rows are non-string iterables (converted to tuples)
        - All elements across all rows have the same type

    Attributes:
        rows: The rows of the grid, as a tuple of tuples.
    """

    arity: ClassVar[Optional[int]] = None

    rows: GridRows = Field(
        default=(), description="Rows of the grid, each a tuple of elements."
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_rows(cls, *rows: Any) -> "Grid":
        """Build a grid from literal rows.

        Example:
            >>> Grid.from_rows([1, 2, 3, 4]).shape
            <GridShape.FLAT: 'flat'>
        """
        return cls(rows=rows)

    @classmethod
    def from_numpy(cls, array: Any) -> "Grid":
        """Build a grid from a 1-D (flat) or 2-D (one row per array row) array.

        Elements are converted to native Python scalars.

        Raises:
            ShapeMismatchError: If the array is not 1-D or 2-D.
        """
        array = np.asarray(array)
        if array.ndim == 1:
            return cls(rows=(array.tolist(),))
        if array.ndim == 2:
            return cls(rows=array.tolist())
        raise ShapeMismatchError(
            f"Only 1-D or 2-D arrays can be converted to a grid, got {array.ndim}-D."
        )

    def to_numpy(self) -> np.ndarray:
        """Convert the grid to a 2-D array of shape ``(rows, row_length)``.

        Raises:
            ShapeMismatchError: If the rows do not all have the same length.
        """
        if self.is_empty:
            return np.empty((0, 0))
        if not self.is_uniform:
            raise ShapeMismatchError(
                f"Rows must have equal lengths to convert to an array, got {self.row_lengths}."
            )
        return np.array(self.rows)

    @property
    def shape(self) -> GridShape:
        """Row-count classification of the grid."""
        return GridShape.from_row_count(len(self.rows))

    @property
    def is_empty(self) -> bool:
        return self.shape is GridShape.EMPTY

    @property
    def is_flat(self) -> bool:
        return self.shape is GridShape.FLAT

    @property
    def is_multi(self) -> bool:
        return self.shape is GridShape.MULTI

    @property
    def is_pair_shaped(self) -> bool:
        """True for a multi grid whose rows are all pairs."""
        return self.is_multi and all(len(row) == 2 for row in self.rows)

    @property
    def element_type(self) -> Optional[type]:
        """Type shared by every element, or None if the grid holds no elements."""
        return element_type_of(self.rows)

    @property
    def row_lengths(self) -> Tuple[int, ...]:
        return tuple(len(row) for row in self.rows)

    @property
    def is_uniform(self) -> bool:
        """True if all rows have the same length."""
        return len(set(self.row_lengths)) <= 1

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: Union[int, slice]) -> Union[Row, "Grid"]:
        """Access rows by index or slice.

        Args:
            index: Index or slice to retrieve.

        Returns:
            The row at the index if index is int, or a new grid of the same
            variant holding the sliced rows.
        """
        if isinstance(index, slice):
            return type(self)(rows=self.rows[index])
        return self.rows[index]

    def __repr__(self) -> str:
        element_type = self.element_type
        type_name = element_type.__name__ if element_type is not None else None
        return (
            f"{type(self).__name__}(shape={self.shape.value}, rows={len(self)}, "
            f"element_type={type_name})"
        )


class PairGrid(Grid):
    """Result of zipping two flat grids: every row is a pair ``(a_i, b_i)``."""

    arity: ClassVar[Optional[int]] = 2

    rows: PairGridRows = Field(
        default=(), description="Rows of the grid, each a pair of elements."
    )

    @property
    def is_pair_shaped(self) -> bool:
        return True


class QuadGrid(Grid):
    """Result of zipping two pair grids: every row is ``(a_i0, a_i1, b_i0, b_i1)``."""

    arity: ClassVar[Optional[int]] = 4

    rows: QuadGridRows = Field(
        default=(), description="Rows of the grid, each a quad of elements."
    )

    @property
    def is_pair_shaped(self) -> bool:
        return False


ZipResult = Union[PairGrid, QuadGrid]
