"""Core data structures for the grid algebra."""

from gridkit.core.base_models import Grid, PairGrid, QuadGrid, ZipResult
from gridkit.core.enums import GridShape, ZipStyle
from gridkit.core.exceptions import GridError, ShapeMismatchError, TypeMismatchError

__all__ = [
    "Grid",
    "PairGrid",
    "QuadGrid",
    "ZipResult",
    "GridShape",
    "ZipStyle",
    "GridError",
    "ShapeMismatchError",
    "TypeMismatchError",
]
