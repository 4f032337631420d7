"""Command line entry point: solve the Poisson equation for a sample source."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Callable, Optional

import numpy as np

from mggss.grid import Grid
from mggss.routines import format_output, multigrid


class Source(Enum):
    """Shape of the right-hand side."""

    CIRCLE = 1
    GAUSSIAN = 2


def initialize(n: int, source: Source = Source.CIRCLE) -> Grid:
    """Create a grid of ``n`` interior points with the chosen right-hand side."""
    grid = Grid.zeros(n)
    d = np.arange(n + 2) - n // 2
    squares = d[:, None] ** 2 + d[None, :] ** 2
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.sqrt(1.0 / ((n - 1.0) * (n - 1.0)) * squares)
    if source is Source.CIRCLE:
        grid.v[...] = np.where(r < 0.1, 100.0, 0.0)
    elif source is Source.GAUSSIAN:
        grid.v[...] = np.exp(-1000 * r * r)
    return grid


def _ratio(eps: float, previous: float) -> float:
    if previous == 0.0:
        return float("nan") if eps == 0.0 else float("inf")
    return eps / previous


def solve(
    grid: Grid,
    tolerance: float = 1e-10,
    gamma: int = 6,
    report: Optional[Callable[[float, float], None]] = None,
) -> list[float]:
    """Run multigrid cycles until the error drops to ``tolerance``.

    ``report`` receives the error and its ratio to the previous error after
    every cycle. Returns the errors of all cycles.
    """
    errors: list[float] = []
    eps = 0.0
    while True:
        previous = eps
        eps = multigrid(grid, 0, gamma)
        errors.append(eps)
        if report is not None:
            report(eps, _ratio(eps, previous))
        if not eps > tolerance:
            return errors


def _print_error(eps: float, ratio: float) -> None:
    print("Error: %.2e \t Error_Fractional: %.2e " % (eps, ratio))


def main(argv: Optional[list[str]] = None) -> int:
    """Solve, print the error per cycle, then print the solution."""
    parser = argparse.ArgumentParser(
        prog="mggss", description="Multigrid Gauss-Seidel Poisson solver."
    )
    parser.add_argument("--n", type=int, default=199, help="interior points per side (odd)")
    parser.add_argument("--tolerance", type=float, default=1e-10, help="error limit")
    parser.add_argument("--gamma", type=int, default=6, help="number of coarser levels")
    parser.add_argument(
        "--source",
        choices=[s.name.lower() for s in Source],
        default="circle",
        help="shape of the right-hand side",
    )
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error("--n must not be negative")

    grid = initialize(args.n, Source[args.source.upper()])
    solve(grid, args.tolerance, args.gamma, _print_error)
    sys.stdout.write(format_output(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())