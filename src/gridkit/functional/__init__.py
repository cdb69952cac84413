"""Functional primitives for gridkit.

This module provides the grid algebra: construction (`generate`, `from_rows`,
`append_row`), transformation (`map_grid`, `filter_grid`), aggregation
(`reduce_grid`) and the arity-aware zip combinator (`zip_grids`). Utilities
are stateless and side-effect-free so they can be composed into pipelines.
"""

from gridkit.functional.primitives import (
    append_row,
    filter_grid,
    from_rows,
    generate,
    map_grid,
    reduce_grid,
)
from gridkit.functional.zipping import zip_grids, zip_pairs, zip_quads

__all__ = [
    "generate",
    "from_rows",
    "append_row",
    "map_grid",
    "filter_grid",
    "reduce_grid",
    "zip_grids",
    "zip_pairs",
    "zip_quads",
]
