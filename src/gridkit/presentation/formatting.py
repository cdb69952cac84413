"""Deterministic string rendering of grids.

All functions are pure and total over valid grids; they never print. Default
separators come from `gridkit.config.settings` and every function accepts
explicit overrides.

Rendering rules:
    - A row with exactly one element renders as the bare element.
    - Any other row renders bracketed: ``[1, 2, 3]`` (``[]`` when empty).
    - A flat grid renders as its single row.
    - A multi grid renders one bracketed row per line, always bracketed.
    - An empty grid renders as an empty string.
"""

from typing import Any, Optional, Sequence, Union

from gridkit.config import settings
from gridkit.core.base_models import Grid, ZipResult
from gridkit.core.enums import ZipStyle

__all__ = ["format_row", "format_grid", "format_zipped", "banner"]


def _bracketed(row: Sequence[Any], separator: str) -> str:
    return "[" + separator.join(str(e) for e in row) + "]"


def format_row(row: Sequence[Any], separator: Optional[str] = None) -> str:
    """Render a row, unbracketed when it holds exactly one element.

    Example:
        >>> format_row((6,))
        '6'
        >>> format_row((1, 2, 3))
        '[1, 2, 3]'
    """
    if len(row) == 1:
        return str(row[0])
    return _bracketed(row, settings.ELEMENT_SEPARATOR if separator is None else separator)


def format_grid(
    grid: Grid, separator: Optional[str] = None, delimiter: Optional[str] = None
) -> str:
    """Render a grid as text.

    Args:
        grid: Grid to render.
        separator: Text between elements of a row.
        delimiter: Text between rows of a multi grid.

    Returns:
        The rendered grid.
    """
    separator = settings.ELEMENT_SEPARATOR if separator is None else separator
    delimiter = settings.ROW_DELIMITER if delimiter is None else delimiter

    if grid.is_empty:
        return ""
    if grid.is_flat:
        return format_row(grid.rows[0], separator)
    return delimiter.join(_bracketed(row, separator) for row in grid.rows)


def format_zipped(
    result: ZipResult,
    style: Union[ZipStyle, str] = ZipStyle.ROWS,
    separator: Optional[str] = None,
) -> str:
    """Render the result of a zip.

    ``ROWS`` renders it like any other grid. ``TUPLES`` renders every pair or
    quad as a parenthesised, space-separated group on a single line:
    ``[(1 -1) , (2 3) , (3 -3) , (4 4)]``.

    Args:
        result: A `PairGrid` or `QuadGrid`.
        style: Presentation style, as a `ZipStyle` or its value.
        separator: For ``ROWS``, the element separator; for ``TUPLES``, the
            text between groups.
    """
    style = ZipStyle(style)
    if style is ZipStyle.ROWS:
        return format_grid(result, separator=separator)

    separator = settings.TUPLE_SEPARATOR if separator is None else separator
    groups = ("(" + " ".join(str(e) for e in row) + ")" for row in result.rows)
    return "[" + separator.join(groups) + "]"


def banner(char: str = "*", width: Optional[int] = None) -> str:
    """Separator line printed between sections of output."""
    return char * (settings.BANNER_WIDTH if width is None else width)
