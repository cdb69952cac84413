"""Arity-aware zip combinator.

Zipping is defined on two input shapes and produces one of the two `ZipResult`
variants:

    - **First zip**: two flat grids ``[[a0, a1, ...]]`` and ``[[b0, b1, ...]]``
      give a `PairGrid` with one row per index, ``(a_i, b_i)``.
    - **Second zip**: two pair-shaped grids give a `QuadGrid` with one row per
      index, ``(a_i0, a_i1, b_i0, b_i1)``. Re-zipping a `PairGrid` with itself
      therefore yields ``(x, y, x, y)`` rows.

The arity escalates from 2 to 4 purely by calling the combinator again on its
own output; there is no separate zip4 primitive. `zip_grids` picks the case
from the inputs on every call and nothing is remembered between calls. A
`PairGrid` input is recognised by its variant first and by row shape only
when it is a plain `Grid`, so a one-row `PairGrid` still re-zips to quads and
is never treated as a flat data row.

Iteration stops at the shorter side; unmatched trailing elements or rows are
dropped without error.

Example:
    >>> from gridkit.core.base_models import Grid
    >>> v = Grid.from_rows([1, 2, 3, 4])
    >>> w = Grid.from_rows([-1, 3, -3, 4])
    >>> z = zip_grids(v, w)
    >>> z.rows
    ((1, -1), (2, 3), (3, -3), (4, 4))
    >>> zip_grids(z, z).rows[0]
    (1, -1, 1, -1)
"""

from typing import Optional, Type

from gridkit.core.base_models import Grid, PairGrid, QuadGrid, ZipResult
from gridkit.core.exceptions import ShapeMismatchError, TypeMismatchError
from gridkit.logger.logger import logger

__all__ = ["zip_pairs", "zip_quads", "zip_grids", "check_element_types"]


def check_element_types(a: Grid, b: Grid) -> None:
    """Ensure two grids hold the same element type.

    A grid without elements has no element type and matches anything.

    Raises:
        TypeMismatchError: If both grids hold elements of different types.
    """
    left, right = a.element_type, b.element_type
    if left is not None and right is not None and left is not right:
        raise TypeMismatchError(left, right)


def zip_pairs(a: Grid, b: Grid) -> PairGrid:
    """Zip two flat grids element-wise into a grid of pairs.

    Args:
        a: Flat grid supplying the first element of each pair.
        b: Flat grid supplying the second element of each pair.

    Returns:
        A `PairGrid` with ``min(len(a_row), len(b_row))`` rows. Zipping with an
        empty grid returns an empty `PairGrid`.

    Raises:
        TypeMismatchError: If the element types differ.
        ShapeMismatchError: If a non-empty input is not flat.
    """
    check_element_types(a, b)
    if a.is_empty or b.is_empty:
        return PairGrid()
    if not (a.is_flat and b.is_flat):
        raise ShapeMismatchError(
            f"Pair zip needs two flat grids, got {a.shape.value} and {b.shape.value}."
        )
    return PairGrid(rows=tuple(zip(a.rows[0], b.rows[0])))


def zip_quads(a: Grid, b: Grid) -> QuadGrid:
    """Zip two grids of pairs row-wise into a grid of quads.

    Row ``i`` of the result is row ``i`` of ``a`` followed by row ``i`` of
    ``b``.

    Returns:
        A `QuadGrid` with ``min(len(a), len(b))`` rows. Zipping with an empty
        grid returns an empty `QuadGrid`.

    Raises:
        TypeMismatchError: If the element types differ.
        ShapeMismatchError: If a non-empty input is not pair-shaped.
    """
    check_element_types(a, b)
    if a.is_empty or b.is_empty:
        return QuadGrid()
    if not (a.is_pair_shaped and b.is_pair_shaped):
        raise ShapeMismatchError(
            "Quad zip needs two grids whose rows are all pairs, "
            f"got row lengths {a.row_lengths} and {b.row_lengths}."
        )
    return QuadGrid(rows=tuple(p + q for p, q in zip(a.rows, b.rows)))


def _dispatch(a: Grid, b: Grid) -> Type[ZipResult]:
    """Pick the zip variant from the input shapes."""
    if a.is_empty and b.is_empty:
        return PairGrid
    if a.is_empty or b.is_empty:
        other = b if a.is_empty else a
        return QuadGrid if other.is_pair_shaped else PairGrid

    tagged = (isinstance(a, PairGrid), isinstance(b, PairGrid))
    if all(tagged):
        return QuadGrid
    if any(tagged):
        # A PairGrid never contributes data rows to a pair zip
        other = b if tagged[0] else a
        if other.is_pair_shaped:
            return QuadGrid
        raise ShapeMismatchError(
            f"Cannot zip a PairGrid with a grid that is not pairs: {a!r} and {b!r}."
        )
    if a.is_flat and b.is_flat:
        return PairGrid
    if a.is_pair_shaped and b.is_pair_shaped:
        return QuadGrid
    raise ShapeMismatchError(
        "Cannot zip grids that are neither both flat nor both pairs: "
        f"{a!r} and {b!r}."
    )


def zip_grids(
    a: Grid, b: Grid, expect: Optional[Type[ZipResult]] = None
) -> ZipResult:
    """Zip two grids, escalating the arity when the inputs are already pairs.

    Args:
        a: Left grid.
        b: Right grid.
        expect: Optional variant (`PairGrid` or `QuadGrid`) the caller expects.

    Returns:
        A `PairGrid` for two flat inputs or a `QuadGrid` for two pair-shaped
        inputs. Zipping with an empty grid returns an empty grid of the
        expected (or implied) variant.

    Raises:
        TypeMismatchError: If the element types differ.
        ShapeMismatchError: If the inputs are neither both flat nor both
            pair-shaped, or the dispatched variant is not ``expect``.
    """
    check_element_types(a, b)

    if (a.is_empty or b.is_empty) and expect is not None:
        variant = expect
    else:
        variant = _dispatch(a, b)

    if expect is not None and variant is not expect:
        raise ShapeMismatchError(
            f"Expected a {expect.__name__} but the inputs zip to a {variant.__name__}."
        )

    logger.debug(
        f"Zipping {a.shape.value} grid ({len(a)} rows) with {b.shape.value} grid "
        f"({len(b)} rows) into {variant.__name__}"
    )
    if variant is QuadGrid:
        return zip_quads(a, b)
    return zip_pairs(a, b)
