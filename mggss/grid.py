"""Square grid holding a solution and a right-hand side for the unit square."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Grid:
    """A grid of ``n`` x ``n`` interior points plus a one-point boundary.

    ``u`` holds the solution and ``v`` the right-hand side. Both are arrays
    of shape ``(n + 2, n + 2)`` indexed as ``[i, j]``.
    """

    u: np.ndarray
    v: np.ndarray

    def __post_init__(self) -> None:
        self.u = np.asarray(self.u, dtype=float)
        self.v = np.asarray(self.v, dtype=float)
        if self.u.ndim != 2 or self.u.shape[0] != self.u.shape[1]:
            raise ValueError("solution array must be square")
        if self.u.shape[0] < 2:
            raise ValueError("grid needs at least the boundary points")
        if self.v.shape != self.u.shape:
            raise ValueError("solution and right-hand side must have the same shape")

    @classmethod
    def zeros(cls, n: int) -> Grid:
        """Create a grid of ``n`` interior points per side, all values zero."""
        if n < 0:
            raise ValueError("number of grid points must not be negative")
        shape = (n + 2, n + 2)
        return cls(np.zeros(shape), np.zeros(shape))

    @property
    def n(self) -> int:
        """Number of interior points per side."""
        return self.u.shape[0] - 2

    @property
    def h(self) -> float:
        """Step width between neighbouring points."""
        return 1.0 / (self.n + 1.0)

    def copy(self) -> Grid:
        """Return an independent copy of the grid."""
        return Grid(self.u.copy(), self.v.copy())