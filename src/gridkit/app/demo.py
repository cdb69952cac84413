"""Walkthrough of the grid algebra on fixed sample data.

Run with ``gridkit-demo`` (or ``python -m gridkit.app.demo``); pass
``--verbose`` to see the zip dispatch decisions logged.
"""

import argparse
from typing import List, Optional

from rich.console import Console

from gridkit.core.base_models import Grid
from gridkit.functional.primitives import (
    append_row,
    filter_grid,
    generate,
    map_grid,
    reduce_grid,
)
from gridkit.functional.zipping import zip_grids
from gridkit.app.printing import print_banner, print_grid, print_row, print_zipped
from gridkit.logger.logger import logger, set_level


def square(x: int) -> int:
    return x * x


def is_positive(x: int) -> bool:
    return x > 0


def sign_indicator(x: int) -> int:
    return 1 if x > 0 else 0


def add(a, b):
    return a + b


def run(console: Optional[Console] = None) -> None:
    """Print every step of the walkthrough to ``console``."""
    v = append_row(Grid(), [1, 2, 3, 4])
    w = append_row(Grid(), [-1, 3, -3, 4])

    print_grid(v, console)
    print_banner("*", console)
    print_grid(w, console)
    print_banner("*", console)

    z = zip_grids(v, w)
    print_zipped(z, console=console)
    print_banner("*", console)

    x = zip_grids(z, z)
    print_zipped(x, console=console)
    print_banner("*", console)

    print_grid(generate(10, square), console)
    print_grid(filter_grid(w, is_positive), console)

    u = map_grid(w, sign_indicator)
    print_grid(u, console)
    print_row(reduce_grid(u, add, [0]), console)

    print_banner("$", console)
    words = append_row(Grid(), ["hello", "there", "franco", "carlacci"])
    print_grid(words, console)
    print_row(reduce_grid(words, add, [""]), console)

    print_banner("$", console)
    chars = append_row(Grid(), ["a", "b", "c", "d"])
    print_grid(chars, console)
    print_banner("$", console)
    print_row(reduce_grid(chars, add, [" "]), console)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Grid algebra walkthrough.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log zip dispatch decisions."
    )
    args = parser.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    logger.info("Starting grid algebra demo")
    run()
    logger.info("Demo finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
