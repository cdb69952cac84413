"""Console output for grids, built on the pure formatters."""

from typing import Any, Optional, Sequence, Union

from rich.console import Console

from gridkit.core.base_models import Grid, ZipResult
from gridkit.core.enums import ZipStyle
from gridkit.presentation.formatting import (
    banner,
    format_grid,
    format_row,
    format_zipped,
)

__all__ = ["print_grid", "print_row", "print_zipped", "print_banner"]

_console: Optional[Console] = None


def _get_console(console: Optional[Console]) -> Console:
    global _console
    if console is not None:
        return console
    if _console is None:
        _console = Console()
    return _console


def _emit(text: str, console: Optional[Console]) -> None:
    # Rendered grids contain square brackets, which rich would read as markup
    _get_console(console).print(text, markup=False, highlight=False)


def print_grid(grid: Grid, console: Optional[Console] = None) -> None:
    _emit(format_grid(grid), console)


def print_row(row: Sequence[Any], console: Optional[Console] = None) -> None:
    _emit(format_row(row), console)


def print_zipped(
    result: ZipResult,
    style: Union[ZipStyle, str] = ZipStyle.TUPLES,
    console: Optional[Console] = None,
) -> None:
    _emit(format_zipped(result, style), console)


def print_banner(char: str = "*", console: Optional[Console] = None) -> None:
    _emit(banner(char), console)
