"""Gauss-Seidel smoothing and multigrid cycles for the Poisson equation."""

from __future__ import annotations

import numpy as np

from mggss.grid import Grid


def gauss_seidel(grid: Grid) -> None:
    """Run one lexicographic Gauss-Seidel sweep over the interior, in place.

    Points on one anti-diagonal do not depend on each other, so each
    diagonal is updated at once; the result equals the row-by-row sweep.
    """
    u, v, n = grid.u, grid.v, grid.n
    h2 = grid.h * grid.h
    for d in range(2, 2 * n + 1):
        i = np.arange(max(1, d - n), min(n, d - 1) + 1)
        j = d - i
        u[i, j] = 0.25 * (
            h2 * v[i, j] + u[i + 1, j] + u[i - 1, j] + u[i, j + 1] + u[i, j - 1]
        )


def add_eval(alpha: float, grid: Grid) -> None:
    """Add ``alpha`` times the discrete Laplace operator applied to ``u`` to ``v``."""
    u, v, n = grid.u, grid.v, grid.n
    a = alpha / (grid.h * grid.h)
    c = slice(1, n + 1)
    v[c, c] = v[c, c] + a * (
        4.0 * u[c, c] - u[2 : n + 2, c] - u[0:n, c] - u[c, 2 : n + 2] - u[c, 0:n]
    )


def restriction(fine: Grid, coarse: Grid) -> None:
    """Write the residual of ``fine`` into its ``v`` and restrict it to ``coarse``.

    The coarse solution is reset to zero.
    """
    n = fine.n
    if coarse.n != n // 2:
        raise ValueError("coarse grid must have half as many points as the fine grid")
    add_eval(-1.0, fine)
    v = fine.v
    e = slice(2, n + 1, 2)
    ep = slice(3, n + 2, 2)
    em = slice(1, n, 2)
    nc = coarse.n
    coarse.v[1 : nc + 1, 1 : nc + 1] = 0.25 * (
        v[e, e]
        + 0.5 * (v[ep, e] + v[em, e] + v[e, ep] + v[e, em])
        + 0.5 * (v[ep, ep] + v[em, em])
    )
    coarse.u[...] = 0.0


def prolongation(coarse: Grid, fine: Grid) -> None:
    """Interpolate the coarse solution onto the interior of the fine grid."""
    nf = fine.n
    if coarse.n != nf // 2:
        raise ValueError("coarse grid must have half as many points as the fine grid")
    uc = coarse.u
    idx = np.arange(1, nf + 1)
    i, j = np.meshgrid(idx, idx, indexing="ij")
    i_even = i % 2 == 0
    j_even = j % 2 == 0
    both_even = uc[i // 2, j // 2]
    i_odd_only = 0.5 * (uc[(i + 1) // 2, j // 2] + uc[(i - 1) // 2, j // 2])
    j_odd_only = 0.5 * (uc[i // 2, (j + 1) // 2] + uc[i // 2, (j - 1) // 2])
    both_odd = 0.5 * (uc[(i + 1) // 2, (j + 1) // 2] + uc[(i - 1) // 2, (j - 1) // 2])
    fine.u[1 : nf + 1, 1 : nf + 1] = np.where(
        j_even,
        np.where(i_even, both_even, i_odd_only),
        np.where(i_even, j_odd_only, both_odd),
    )


def max_norm(u: np.ndarray, n: int) -> float:
    """Largest absolute value among the interior points of ``u``."""
    interior = np.abs(u[1 : n + 1, 1 : n + 1])
    return float(interior.max()) if interior.size else 0.0


def multigrid(grid: Grid, level: int = 0, gamma: int = 6) -> float:
    """Run one multigrid cycle on ``grid`` in place.

    Recurses down to ``gamma`` coarser levels and returns the maximum
    norm of the residual found on the deepest level visited.
    """
    coarse = Grid.zeros(grid.n // 2)
    gauss_seidel(grid)
    u_save = grid.u.copy()
    v_save = grid.v.copy()

    restriction(grid, coarse)
    eps = max_norm(grid.v, grid.n)
    gauss_seidel(coarse)

    if level < gamma:
        eps = multigrid(coarse, level + 1, gamma)

    prolongation(coarse, grid)
    grid.u[...] = u_save + grid.u
    grid.v[...] = v_save
    gauss_seidel(grid)
    return eps


def format_output(grid: Grid) -> str:
    """Render the grid as ``x, y, u, v`` lines, one blank line after each row."""
    n = grid.n
    scale = 1.0 / (n - 1) if n > 1 else float("inf")
    rows = []
    for i in range(1, n + 1):
        lines = "".join(
            f"{scale * (i - 1.0):.18f}, {scale * (j - 1.0):.18f}, "
            f"{grid.u[i, j]:.18f}, {grid.v[i, j]:.18f}\n"
            for j in range(1, n + 1)
        )
        rows.append(lines + "\n")
    return "".join(rows) + "\n"