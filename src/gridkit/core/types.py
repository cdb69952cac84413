"""Reusable type definitions for grids.

Type Aliases:
    Row: An immutable tuple of elements of one type.
    GridRows: A tuple of rows validated to share a single element type.
    PairRow / QuadRow: Rows of exactly two / four elements.
    PairGridRows / QuadGridRows: GridRows whose rows are all pairs / quads.

These types are used by the grid models for validation at construction time.
"""

from typing import AbstractSet, Annotated, Any, Iterable, Mapping, Optional, Tuple
import annotated_types as at
from pydantic.functional_validators import BeforeValidator

__all__ = [
    "Row",
    "GridRows",
    "PairRow",
    "QuadRow",
    "PairGridRows",
    "QuadGridRows",
    "element_type_of",
]

Row = Tuple[Any, ...]

PairRow = Annotated[Tuple[Any, ...], at.Len(2, 2)]
QuadRow = Annotated[Tuple[Any, ...], at.Len(4, 4)]


def _is_sequence_like(value: Any) -> bool:
    # Sets and mappings iterate in no meaningful row order
    if isinstance(value, (str, bytes, AbstractSet, Mapping)):
        return False
    return isinstance(value, Iterable)


def _as_row(row: Any) -> Row:
    if not _is_sequence_like(row):
        raise ValueError(
            "Each row must be an ordered, non-string iterable of elements, "
            f"got {type(row).__name__}."
        )
    return tuple(row)


def element_type_of(rows: Iterable[Row]) -> Optional[type]:
    """Return the type of the first element found in row-major order.

    Args:
        rows: Rows to scan.

    Returns:
        The element type, or None when every row is empty.
    """
    for row in rows:
        for element in row:
            return type(element)
    return None


def validate_homogeneous_rows(rows: Any) -> Tuple[Row, ...]:
    """Validator to convert rows to tuples and ensure one element type.

    Args:
        rows: An iterable of iterables of elements.

    Returns:
        The rows as a tuple of tuples.

    Raises:
        ValueError: If rows is not an iterable of non-string iterables, or if
            elements of differing types are found.
    """
    if not _is_sequence_like(rows):
        raise ValueError("Rows must be an ordered iterable of rows.")

    normalized = tuple(_as_row(row) for row in rows)
    expected = element_type_of(normalized)
    if expected is None:
        return normalized  # No elements, nothing to compare

    for i, row in enumerate(normalized):
        for element in row:
            if type(element) is not expected:
                raise ValueError(
                    f"All elements must share one type. Found '{type(element).__name__}' "
                    f"in row {i}, expected '{expected.__name__}'."
                )
    return normalized


# Rows of a grid, converted to tuples and validated for a single element type
GridRows = Annotated[Tuple[Row, ...], BeforeValidator(validate_homogeneous_rows)]

# Rows of a zipped grid: same validation, plus a fixed row arity
PairGridRows = Annotated[Tuple[PairRow, ...], BeforeValidator(validate_homogeneous_rows)]
QuadGridRows = Annotated[Tuple[QuadRow, ...], BeforeValidator(validate_homogeneous_rows)]
