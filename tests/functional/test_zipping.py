import pytest

from gridkit.core.base_models import Grid, PairGrid, QuadGrid
from gridkit.core.exceptions import ShapeMismatchError, TypeMismatchError
from gridkit.functional.primitives import from_rows, generate
from gridkit.functional.zipping import (
    check_element_types,
    zip_grids,
    zip_pairs,
    zip_quads,
)


@pytest.fixture
def v():
    return from_rows([1, 2, 3, 4])


@pytest.fixture
def w():
    return from_rows([-1, 3, -3, 4])


def test_first_zip(v, w):
    z = zip_grids(v, w)
    assert isinstance(z, PairGrid)
    assert z.rows == ((1, -1), (2, 3), (3, -3), (4, 4))


def test_second_zip_of_itself(v, w):
    z = zip_grids(v, w)
    x = zip_grids(z, z)
    assert isinstance(x, QuadGrid)
    assert len(x) == 4
    assert x.row_lengths == (4, 4, 4, 4)
    assert x.rows[0] == (1, -1, 1, -1)
    assert x.rows[3] == (4, 4, 4, 4)


def test_second_zip_of_different_pairs(v, w):
    z1 = zip_grids(v, w)
    z2 = zip_grids(w, v)
    assert zip_grids(z1, z2).rows[1] == (2, 3, 3, 2)


def test_zip_truncates_to_shorter(v):
    short = from_rows([10, 20])
    assert zip_grids(v, short).rows == ((1, 10), (2, 20))
    assert zip_grids(short, v).rows == ((10, 1), (20, 2))

    pairs = zip_grids(v, v)
    assert len(zip_grids(pairs, pairs[:2])) == 2


def test_zip_is_pure(v, w):
    zip_grids(v, w)
    assert v.rows == ((1, 2, 3, 4),)
    assert w.rows == ((-1, 3, -3, 4),)


def test_single_row_pair_grid_escalates():
    z = zip_grids(from_rows([5]), from_rows([7]))
    assert z.rows == ((5, 7),)
    assert z.is_flat
    # The PairGrid variant, not the row count, decides the second zip
    assert zip_grids(z, z).rows == ((5, 7, 5, 7),)


def test_plain_pair_shaped_grid_escalates():
    pairs = from_rows([1, 2], [3, 4])
    assert zip_grids(pairs, pairs).rows == ((1, 2, 1, 2), (3, 4, 3, 4))


@pytest.mark.parametrize(
    "left, right",
    [
        (from_rows([1, 2]), from_rows(["a", "b"])),
        (from_rows(["a"]), from_rows([1.5])),
        (from_rows([1.0]), from_rows([1])),
        (from_rows([True]), from_rows([1])),
    ],
)
def test_type_mismatch(left, right):
    with pytest.raises(TypeMismatchError):
        zip_grids(left, right)
    with pytest.raises(TypeMismatchError):
        zip_pairs(left, right)


def test_type_mismatch_checked_before_shape():
    with pytest.raises(TypeMismatchError):
        zip_grids(from_rows([1], [2], [3]), from_rows(["a"]))


def test_elementless_grid_never_mismatches():
    check_element_types(from_rows([]), from_rows(["a"]))
    assert zip_grids(generate(0, str), from_rows([1, 2])) == PairGrid()


@pytest.mark.parametrize(
    "other", [from_rows([1, 2, 3]), from_rows([1, 2], [3, 4]), Grid()]
)
def test_zip_with_empty_grid(other):
    assert zip_grids(Grid(), other).is_empty
    assert zip_grids(other, Grid()).is_empty


def test_zip_with_empty_grid_variant(v):
    assert type(zip_grids(Grid(), v)) is PairGrid
    pairs = zip_grids(v, v)
    assert type(zip_grids(pairs, Grid())) is QuadGrid
    assert type(zip_grids(Grid(), Grid(), expect=QuadGrid)) is QuadGrid


def test_ambiguous_shapes_rejected(v):
    with pytest.raises(ShapeMismatchError, match="neither both flat nor both pairs"):
        zip_grids(v, from_rows([1, 2], [3, 4]))

    with pytest.raises(ShapeMismatchError):
        zip_grids(from_rows([1, 2, 3], [4, 5, 6]), from_rows([1, 2, 3], [4, 5, 6]))

    quads = zip_grids(zip_grids(v, v), zip_grids(v, v))
    with pytest.raises(ShapeMismatchError):
        zip_grids(quads, quads)


def test_expect_matches(v, w):
    z = zip_grids(v, w, expect=PairGrid)
    assert isinstance(z, PairGrid)
    assert isinstance(zip_grids(z, z, expect=QuadGrid), QuadGrid)


def test_expect_mismatch(v, w):
    with pytest.raises(ShapeMismatchError, match="Expected a QuadGrid"):
        zip_grids(v, w, expect=QuadGrid)

    z = zip_grids(v, w)
    with pytest.raises(ShapeMismatchError, match="Expected a PairGrid"):
        zip_grids(z, z, expect=PairGrid)


def test_zip_pairs_requires_flat_inputs():
    with pytest.raises(ShapeMismatchError, match="two flat grids"):
        zip_pairs(from_rows([1, 2], [3, 4]), from_rows([1, 2], [3, 4]))


def test_zip_quads_requires_pairs(v):
    with pytest.raises(ShapeMismatchError, match="rows are all pairs"):
        zip_quads(v, v)
    assert zip_quads(Grid(), v) == QuadGrid()


def test_single_row_pair_grid_with_plain_pairs_escalates():
    tagged = PairGrid(rows=[[5, 7]])
    plain = from_rows([1, 2], [3, 4])
    assert zip_grids(tagged, plain).rows == ((5, 7, 1, 2),)
    assert zip_grids(plain, tagged).rows == ((1, 2, 5, 7),)


def test_pair_grid_is_never_zipped_as_flat_data():
    tagged = PairGrid(rows=[[5, 7]])
    with pytest.raises(ShapeMismatchError, match="PairGrid with a grid that is not pairs"):
        zip_grids(tagged, from_rows([1, 2]))
    with pytest.raises(ShapeMismatchError, match="PairGrid with a grid that is not pairs"):
        zip_grids(from_rows([1, 2]), tagged)
