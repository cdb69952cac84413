import pytest

from gridkit.core.exceptions import (
    GridError,
    ShapeMismatchError,
    TypeMismatchError,
)
from gridkit.core.enums import GridShape, ZipStyle
from gridkit.core.types import element_type_of, validate_homogeneous_rows


def test_validate_homogeneous_rows_normalizes():
    assert validate_homogeneous_rows([[1, 2], (3,), iter([4])]) == ((1, 2), (3,), (4,))


def test_validate_homogeneous_rows_empty_rows():
    assert validate_homogeneous_rows([]) == ()
    assert validate_homogeneous_rows([[], []]) == ((), ())


def test_validate_homogeneous_rows_reports_position():
    with pytest.raises(ValueError, match="in row 1, expected 'str'"):
        validate_homogeneous_rows([["a"], ["b", 3]])


def test_element_type_of_skips_empty_rows():
    assert element_type_of([(), ("x",)]) is str
    assert element_type_of([(), ()]) is None


def test_grid_shape_from_row_count():
    assert GridShape.from_row_count(0) is GridShape.EMPTY
    assert GridShape.from_row_count(1) is GridShape.FLAT
    assert GridShape.from_row_count(5) is GridShape.MULTI


def test_zip_style_values():
    assert ZipStyle("rows") is ZipStyle.ROWS
    assert ZipStyle("tuples") is ZipStyle.TUPLES


def test_exception_hierarchy():
    error = TypeMismatchError(int, str)
    assert isinstance(error, GridError)
    assert isinstance(error, TypeError)
    assert error.left is int and error.right is str
    assert "'int' and 'str'" in str(error)

    assert issubclass(ShapeMismatchError, GridError)
    assert issubclass(ShapeMismatchError, ValueError)


@pytest.mark.parametrize("row", [{1, 2}, frozenset({1}), {"a": 1}])
def test_unordered_rows_rejected(row):
    with pytest.raises(ValueError, match="ordered, non-string iterable"):
        validate_homogeneous_rows([row])


def test_unordered_rows_container_rejected():
    with pytest.raises(ValueError, match="ordered iterable of rows"):
        validate_homogeneous_rows({(1, 2)})
