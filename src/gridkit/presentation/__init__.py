"""Text rendering of grids and rows."""

from gridkit.presentation.formatting import (
    banner,
    format_grid,
    format_row,
    format_zipped,
)

__all__ = ["banner", "format_grid", "format_row", "format_zipped"]
