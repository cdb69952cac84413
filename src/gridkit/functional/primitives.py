"""Construction, transformation and aggregation primitives for grids.

Every function here is pure: it reads its input grid and returns a freshly
built grid (or row) without mutating anything. Callables passed in (`f`,
`pred`, `combine`) may be any Python callable, closures included; they are
assumed to be total over the elements they receive.

Example:
    >>> from gridkit.functional.primitives import generate, filter_grid, reduce_grid
    >>> squares = generate(5, lambda i: i * i)
    >>> squares.rows
    ((0, 1, 4, 9, 16),)
    >>> filter_grid(squares, lambda x: x % 2 == 0).rows
    ((0, 4, 16),)
    >>> reduce_grid(squares, lambda acc, x: acc + x, [0])
    (30,)
"""

from typing import Annotated, Any, Callable, Iterable, Sequence

import annotated_types as at
from pydantic import validate_call

from gridkit.core.base_models import Grid
from gridkit.core.exceptions import ShapeMismatchError
from gridkit.core.types import Row

__all__ = [
    "generate",
    "from_rows",
    "append_row",
    "map_grid",
    "filter_grid",
    "reduce_grid",
]


@validate_call
def generate(count: Annotated[int, at.Ge(0)], f: Callable[[int], Any]) -> Grid:
    """Build a flat grid whose single row is ``f(0), f(1), ..., f(count - 1)``.

    Args:
        count: Length of the generated row. Must be non-negative.
        f: Function from an index in ``[0, count)`` to an element.

    Returns:
        A flat grid. ``count == 0`` gives a grid with one empty row.

    Raises:
        pydantic.ValidationError: If count is negative or not an integer.
    """
    return Grid(rows=(tuple(f(i) for i in range(count)),))


def from_rows(*rows: Iterable[Any]) -> Grid:
    """Initialize a grid from literal rows."""
    return Grid.from_rows(*rows)


def append_row(grid: Grid, row: Iterable[Any]) -> Grid:
    """Return a new grid with ``row`` appended after the rows of ``grid``.

    The new row must hold the same element type as the existing rows.
    """
    return Grid(rows=grid.rows + (tuple(row),))


def map_grid(grid: Grid, f: Callable[[Any], Any]) -> Grid:
    """Apply ``f`` to every element of every row.

    Row count, row lengths and row order are preserved, so the result keeps
    the variant of the input (mapping a `PairGrid` gives a `PairGrid`).
    """
    return type(grid)(rows=tuple(tuple(f(e) for e in row) for row in grid.rows))


def filter_grid(grid: Grid, pred: Callable[[Any], bool]) -> Grid:
    """Keep, per row, the elements for which ``pred`` holds.

    Rows keep their relative order and may shrink independently, down to
    empty; the number of rows never changes. When no row shrinks the result
    keeps the variant of the input, otherwise it is a plain `Grid`.
    """
    rows = tuple(tuple(e for e in row if pred(e)) for row in grid.rows)
    if all(len(new) == len(old) for new, old in zip(rows, grid.rows)):
        return type(grid)(rows=rows)
    return Grid(rows=rows)


def reduce_grid(
    grid: Grid, combine: Callable[[Any, Any], Any], identity: Sequence[Any]
) -> Row:
    """Fold every element of the grid into a single value.

    Elements are visited row-major: row 0 from element 0 upward, then row 1,
    and so on. The running value starts at ``identity[0]`` and is updated as
    ``acc = combine(acc, element)``, so non-commutative functions such as
    string concatenation give reproducible results.

    Args:
        grid: Grid to fold.
        combine: Binary function, ideally associative.
        identity: Single-element row holding the seed value.

    Returns:
        A single-element row holding the folded value.

    Raises:
        ShapeMismatchError: If identity is not a single-element row.

    Example:
        >>> reduce_grid(Grid.from_rows(["a", "b"], ["c"]), lambda a, b: a + b, [""])
        ('abc',)
    """
    if isinstance(identity, (str, bytes)) or len(identity) != 1:
        raise ShapeMismatchError(
            f"Identity must be a single-element row, got {identity!r}."
        )

    acc = identity[0]
    for row in grid.rows:
        for element in row:
            acc = combine(acc, element)
    return (acc,)
