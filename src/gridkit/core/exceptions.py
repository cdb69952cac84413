"""Exceptions raised by grid operations."""

__all__ = ["GridError", "TypeMismatchError", "ShapeMismatchError"]


class GridError(Exception):
    """Base class for grid algebra errors."""


class TypeMismatchError(GridError, TypeError):
    """Raised when two grids combined together hold different element types."""

    def __init__(self, left: type, right: type):
        self.left = left
        self.right = right
        super().__init__(
            f"Element types must match. Found '{left.__name__}' and '{right.__name__}'."
        )


class ShapeMismatchError(GridError, ValueError):
    """Raised when a grid or row does not have the shape an operation requires."""
